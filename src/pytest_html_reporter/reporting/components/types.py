"""Type definitions for htpy components.

These dataclasses define the exact data shape each component expects,
so the components only format values and never make decisions about them.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ReportMetadata:
    """Header data for the report page."""

    page_title: str
    timestamp: str
    total: int
    passed: int
    failed: int
    pending: int


@dataclass(slots=True)
class TestRowData:
    """One table row: a single test result."""

    __test__ = False  # not a pytest test class

    status: str
    suite_label: str
    title: str
    result_text: str
    failure_messages: list[str] = field(default_factory=list)


@dataclass(slots=True)
class SuiteData:
    """A suite header plus its result table."""

    path: str
    execution_time: str
    is_slow: bool
    rows: list[TestRowData] = field(default_factory=list)


@dataclass(slots=True)
class ReportContext:
    """Everything the full report component needs."""

    report: ReportMetadata
    stylesheet: str
    suites: list[SuiteData] = field(default_factory=list)
