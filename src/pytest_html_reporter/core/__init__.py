"""Core types for pytest-html-reporter."""

from pytest_html_reporter.core.errors import (
    ConfigError,
    ReportDataError,
    ReporterError,
    ReportWriteError,
    StylesheetNotFoundError,
)
from pytest_html_reporter.core.results import (
    FAILED,
    PASSED,
    PENDING,
    RunResults,
    SuiteResult,
    TestResult,
    status_from_pytest,
)
from pytest_html_reporter.core.serialization import (
    deserialize_run_results,
    load_run_results,
    serialize_dataclass,
)

__all__ = [
    # Errors
    "ConfigError",
    "ReportDataError",
    "ReportWriteError",
    "ReporterError",
    "StylesheetNotFoundError",
    # Results
    "FAILED",
    "PASSED",
    "PENDING",
    "RunResults",
    "SuiteResult",
    "TestResult",
    "status_from_pytest",
    # Serialization
    "deserialize_run_results",
    "load_run_results",
    "serialize_dataclass",
]
