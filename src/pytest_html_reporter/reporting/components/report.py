"""Full report component - main HTML page."""

from __future__ import annotations

from htpy import Node, body, div, h1, head, html, meta, style, title
from markupsafe import Markup

from .suite_table import suite_info, suite_table
from .types import ReportContext, ReportMetadata


def _html_head(report: ReportMetadata, stylesheet: str) -> Node:
    """Render the HTML head section."""
    return head[
        meta(charset="utf-8"),
        title[report.page_title],
        style(type="text/css")[Markup(stylesheet)],
    ]


def _metadata(report: ReportMetadata) -> Node:
    """Render the start time and the test summary line."""
    summary = (
        f"{report.total} tests -- "
        f"{report.passed} passed / "
        f"{report.failed} failed / "
        f"{report.pending} pending"
    )
    return div(id="metadata-container")[
        div(id="timestamp")[f"Start: {report.timestamp}"],
        div(id="summary")[summary],
    ]


def full_report(context: ReportContext) -> Node:
    """Render the complete report page.

    Suites without rows are skipped.
    """
    suites = [suite for suite in context.suites if suite.rows]
    return html[
        _html_head(context.report, context.stylesheet),
        body[
            h1(id="title")[context.report.page_title],
            _metadata(context.report),
            ((suite_info(suite), suite_table(suite)) for suite in suites),
        ],
    ]
