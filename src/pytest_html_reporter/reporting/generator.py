"""Report generation with htpy components."""

from __future__ import annotations

import importlib.resources as resources
import logging
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from pytest_html_reporter.core.errors import (
    ReportDataError,
    ReporterError,
    ReportWriteError,
    StylesheetNotFoundError,
)
from pytest_html_reporter.reporting.components import full_report
from pytest_html_reporter.reporting.components.types import (
    ReportContext,
    ReportMetadata,
    SuiteData,
    TestRowData,
)
from pytest_html_reporter.reporting.sorting import sort_suite_results

if TYPE_CHECKING:
    from htpy import Node

    from pytest_html_reporter.config import ReporterConfig
    from pytest_html_reporter.core.results import RunResults, SuiteResult, TestResult

_logger = logging.getLogger(__name__)

LOG_PREFIX = "pytest-html-reporter"

LOG_COLORS = {
    "default": "\x1b[37m%s\x1b[0m",
    "success": "\x1b[32m%s\x1b[0m",
    "error": "\x1b[31m%s\x1b[0m",
}

# CSI sequences (colors, cursor movement) and OSC sequences (hyperlinks, titles)
_ANSI_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from terminal output."""
    return _ANSI_RE.sub("", text)


def format_seconds(ms: float) -> str:
    """Format milliseconds as compact seconds (1500 -> "1.5", 5000 -> "5")."""
    seconds = round(ms / 1000, 3)
    if seconds.is_integer():
        return str(int(seconds))
    return str(seconds)


@dataclass(slots=True)
class LogMessage:
    """A console line emitted by the reporter."""

    kind: str
    color: str
    text: str


def log_message(kind: str, msg: object, *, ignore_console: bool = False) -> LogMessage:
    """Log a reporter message and print it in the kind's terminal color.

    Unknown kinds use the default color.

    Returns:
        The formatted LogMessage (also when nothing was printed)
    """
    color = LOG_COLORS.get(kind, LOG_COLORS["default"])
    text = f"{LOG_PREFIX} >> {msg}"

    if kind == "error":
        _logger.error(text)
    else:
        _logger.info(text)

    if not ignore_console:
        print(color % text)
    return LogMessage(kind=kind, color=color, text=text)


def theme_stylesheet_path(theme: str) -> Path:
    """Path of a bundled theme stylesheet."""
    themes = resources.files("pytest_html_reporter").joinpath("themes")
    return Path(str(themes.joinpath(f"{theme}.css")))


def get_stylesheet(config: ReporterConfig) -> str:
    """Return the stylesheet to embed in the report.

    Uses ``style_override_path`` when set, otherwise the configured theme.

    Raises:
        StylesheetNotFoundError: If the stylesheet cannot be read
    """
    if config.style_override_path:
        path = Path(config.style_override_path)
    else:
        path = theme_stylesheet_path(config.theme)

    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise StylesheetNotFoundError(str(path), e) from e


def write_file(file_path: str | Path, content: str) -> Path:
    """Write content to a file, creating parent directories as needed.

    Raises:
        ReportWriteError: If the directory or file cannot be created
    """
    path = Path(file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ReportWriteError(str(path), e) from e
    return path


def render_html(results: RunResults | None, stylesheet: str, config: ReporterConfig) -> Node:
    """Build the report document tree.

    Args:
        results: Aggregated run results
        stylesheet: CSS embedded into the page
        config: Resolved reporter config

    Raises:
        ReportDataError: If results are missing
    """
    if results is None:
        raise ReportDataError()

    context = _build_report_context(results, stylesheet, config)
    return full_report(context)


def generate_html(
    results: RunResults | None,
    output_path: str | Path,
    config: ReporterConfig,
    *,
    stylesheet: str | None = None,
) -> Path:
    """Render results and write the HTML report.

    Args:
        results: Aggregated run results
        output_path: Path to write HTML file
        config: Resolved reporter config
        stylesheet: CSS to embed instead of the configured one

    Raises:
        ReporterError: If the stylesheet, the data or the output file is unusable

    Example:
        generate_html(results, "report.html", ReporterConfig())
    """
    if stylesheet is None:
        stylesheet = get_stylesheet(config)
    html_node = render_html(results, stylesheet, config)
    return write_file(output_path, str(html_node))


def create_report(
    results: RunResults | None,
    config: ReporterConfig,
    *,
    stylesheet: str | None = None,
    ignore_console: bool = False,
) -> LogMessage:
    """Generate the report at the configured output path and log the outcome.

    Reporter errors are logged, not raised.

    Returns:
        The success or error LogMessage
    """
    destination = config.output_filepath
    try:
        generate_html(results, destination, config, stylesheet=stylesheet)
    except ReporterError as e:
        return log_message("error", e, ignore_console=ignore_console)
    return log_message(
        "success", f"Report generated ({destination})", ignore_console=ignore_console
    )


# --- Internal helpers ---


def _format_start_time(results: RunResults, date_format: str) -> str:
    try:
        timestamp = datetime.fromtimestamp(results.start_time_ms / 1000)
    except (OverflowError, OSError, ValueError) as e:
        raise ReportDataError(f"Invalid start time {results.start_time_ms!r}: {e}") from e
    return timestamp.strftime(date_format)


def _result_text(test: TestResult) -> str:
    if test.is_passed and test.duration_ms is not None:
        return f"{test.status} in {format_seconds(test.duration_ms)}s"
    return test.status


def _build_row(test: TestResult, config: ReporterConfig) -> TestRowData:
    failure_messages = []
    if config.include_failure_msg and test.failure_messages:
        failure_messages = [strip_ansi(msg) for msg in test.failure_messages]

    return TestRowData(
        status=test.status,
        suite_label=" > ".join(test.ancestor_titles),
        title=test.title,
        result_text=_result_text(test),
        failure_messages=failure_messages,
    )


def _build_suite(suite: SuiteResult, config: ReporterConfig) -> SuiteData:
    execution_time = suite.execution_time_s
    return SuiteData(
        path=suite.test_file_path,
        execution_time=f"{format_seconds(suite.perf_end_ms - suite.perf_start_ms)}s",
        is_slow=execution_time > config.execution_time_warning_threshold,
        rows=[_build_row(test, config) for test in suite.test_results],
    )


def _build_report_context(
    results: RunResults, stylesheet: str, config: ReporterConfig
) -> ReportContext:
    """Build typed ReportContext from RunResults."""
    report_meta = ReportMetadata(
        page_title=config.page_title,
        timestamp=_format_start_time(results, config.date_format),
        total=results.num_total_tests or 0,
        passed=results.num_passed_tests or 0,
        failed=results.num_failed_tests or 0,
        pending=results.num_pending_tests or 0,
    )

    suites = sort_suite_results(results.test_results, config.sort)
    _logger.debug("Rendering %d suite(s) with sort=%r", len(suites), config.sort)

    return ReportContext(
        report=report_meta,
        stylesheet=stylesheet,
        suites=[_build_suite(suite, config) for suite in suites],
    )
