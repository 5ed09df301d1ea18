"""pytest plugin for HTML test reports."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from pytest_html_reporter.config import SORT_DEFAULT, SORT_STATUS, ReporterConfig, load_config
from pytest_html_reporter.core.errors import ConfigError
from pytest_html_reporter.reporting import ResultCollector, create_report

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.config.argparsing import Parser
    from _pytest.nodes import Item
    from _pytest.reports import TestReport as PytestTestReport
    from _pytest.runner import CallInfo
    from _pytest.terminal import TerminalReporter

    from pytest_html_reporter.reporting import LogMessage


# Keys for storing the collector and resolved config in config
COLLECTOR_KEY = pytest.StashKey[ResultCollector]()
CONFIG_KEY = pytest.StashKey[ReporterConfig]()

__all__ = ["COLLECTOR_KEY", "CONFIG_KEY"]

# pytest option dest -> ReporterConfig field
_OPTION_FIELDS = {
    "html_report": "output_path",
    "html_report_title": "page_title",
    "html_report_theme": "theme",
    "html_report_style_override": "style_override_path",
    "html_report_sort": "sort",
    "html_report_include_failure_msg": "include_failure_msg",
    "html_report_date_format": "date_format",
    "html_report_warn_threshold": "execution_time_warning_threshold",
}


def pytest_addoption(parser: Parser) -> None:
    """Add pytest CLI options for the HTML report.

    Every option falls back to ``htmlreporter.config.json``, the
    ``[tool.pytest-html-reporter]`` section of pyproject.toml and
    ``PYTEST_HTML_REPORTER_*`` environment variables, in that order.
    """
    group = parser.getgroup("html-reporter", "HTML test report")

    group.addoption(
        "--html-report",
        metavar="PATH",
        nargs="?",
        const="",
        default=None,
        help=(
            "Generate an HTML report. PATH overrides the configured output path "
            "(default: test-report.html in the working directory)"
        ),
    )
    group.addoption(
        "--html-report-title",
        metavar="TITLE",
        default=None,
        help="Page title of the report (default: 'Test report')",
    )
    group.addoption(
        "--html-report-theme",
        metavar="NAME",
        default=None,
        help="Bundled theme: defaultTheme, lightTheme or darkTheme",
    )
    group.addoption(
        "--html-report-style-override",
        metavar="PATH",
        default=None,
        help="Path to a CSS file used instead of the theme stylesheet",
    )
    group.addoption(
        "--html-report-sort",
        choices=[SORT_DEFAULT, SORT_STATUS],
        default=None,
        help="Order of results: 'default' keeps run order, 'status' lists pending, failed, passed",
    )
    group.addoption(
        "--html-report-include-failure-msg",
        action="store_true",
        default=None,
        help="Include failure messages below failed tests",
    )
    group.addoption(
        "--html-report-date-format",
        metavar="FORMAT",
        default=None,
        help="strftime format of the start time (default: '%%Y-%%m-%%d %%H:%%M:%%S')",
    )
    group.addoption(
        "--html-report-warn-threshold",
        metavar="SECONDS",
        type=float,
        default=None,
        help="Flag suites that run longer than this many seconds (default: 5)",
    )


def pytest_configure(config: Config) -> None:
    """Configure the HTML reporter plugin."""
    # Register custom hookspecs so downstream plugins can extend behavior
    from pytest_html_reporter.hooks import HtmlReporterHookSpec

    config.pluginmanager.add_hookspecs(HtmlReporterHookSpec)

    config.addinivalue_line(
        "markers",
        "html_report_skip: Exclude this test from the HTML report",
    )

    if config.getoption("--html-report", default=None) is None:
        return

    try:
        reporter_config = load_config(
            _option_overrides(config), cwd=config.invocation_params.dir
        )
    except ConfigError as e:
        raise pytest.UsageError(str(e)) from e

    config.stash[CONFIG_KEY] = reporter_config
    config.stash[COLLECTOR_KEY] = ResultCollector()


def _option_overrides(config: Config) -> dict[str, Any]:
    """Collect command-line options as ReporterConfig overrides."""
    return {
        field: getattr(config.option, dest, None) for dest, field in _OPTION_FIELDS.items()
    }


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: Item, call: CallInfo[Any]) -> Any:
    """Capture each test phase for the report."""
    outcome = yield
    report: PytestTestReport = outcome.get_result()

    # Check if reporting is enabled
    collector = item.config.stash.get(COLLECTOR_KEY, None)
    if collector is None:
        return

    # Skip if marked to exclude from report
    if any(m.name == "html_report_skip" for m in item.iter_markers()):
        return

    collector.record(
        item.nodeid,
        report.when,
        report.outcome,
        duration_s=report.duration,
        start_s=call.start,
        stop_s=call.stop,
        longrepr=report.longreprtext if report.failed else "",
    )


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:
    """Generate the HTML report at end of test session."""
    config = session.config
    collector = config.stash.get(COLLECTOR_KEY, None)
    if collector is None:
        return

    reporter_config = config.stash[CONFIG_KEY]
    message = create_report(
        collector.build_run_results(),
        reporter_config,
        stylesheet=_resolve_stylesheet(config, reporter_config),
        ignore_console=True,
    )
    _log_message(config, message)


def _resolve_stylesheet(config: Config, reporter_config: ReporterConfig) -> str | None:
    """Ask plugins for a stylesheet unless a style override is configured.

    None lets the generator load the override file or the bundled theme.
    """
    if reporter_config.style_override_path:
        return None
    return config.pluginmanager.hook.pytest_html_reporter_stylesheet(
        config=config, reporter_config=reporter_config
    )


def _log_message(config: Config, message: LogMessage) -> None:
    """Write the report outcome to the terminal."""
    terminalreporter: TerminalReporter | None = config.pluginmanager.get_plugin("terminalreporter")
    if terminalreporter:
        terminalreporter.write_line(
            message.text,
            green=message.kind == "success",
            red=message.kind == "error",
        )
