"""Suite component - suite header and one table row per test."""

from __future__ import annotations

from htpy import Node, div, p, table, td, tr

from .types import SuiteData, TestRowData


def _failure_messages(row: TestRowData) -> Node | None:
    """Render failure messages below the test title."""
    if not row.failure_messages:
        return None
    return div(".failureMessages")[(p(".failureMsg")[msg] for msg in row.failure_messages)]


def _test_row(row: TestRowData) -> Node:
    return tr(class_=row.status)[
        td(".suite")[row.suite_label],
        td(".test")[row.title, _failure_messages(row)],
        td(".result")[row.result_text],
    ]


def suite_info(suite: SuiteData) -> Node:
    """Render the suite path and execution time."""
    time_class = "suite-time warn" if suite.is_slow else "suite-time"
    return div(".suite-info")[
        div(".suite-path")[suite.path],
        div(class_=time_class)[suite.execution_time],
    ]


def suite_table(suite: SuiteData) -> Node:
    """Render the result table for one suite."""
    return table(".suite-table", cellspacing="0", cellpadding="0")[
        (_test_row(row) for row in suite.rows)
    ]
