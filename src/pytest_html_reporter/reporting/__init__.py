"""Reporting module - result collection, ordering and HTML generation."""

from pytest_html_reporter.reporting.collector import ResultCollector, split_nodeid
from pytest_html_reporter.reporting.generator import (
    LogMessage,
    create_report,
    generate_html,
    get_stylesheet,
    log_message,
    render_html,
    strip_ansi,
    write_file,
)
from pytest_html_reporter.reporting.sorting import (
    sort_suite_results,
    sort_suite_results_by_status,
)

__all__ = [
    # Collection
    "ResultCollector",
    "split_nodeid",
    # Ordering
    "sort_suite_results",
    "sort_suite_results_by_status",
    # Generation
    "LogMessage",
    "create_report",
    "generate_html",
    "get_stylesheet",
    "log_message",
    "render_html",
    "strip_ansi",
    "write_file",
]
