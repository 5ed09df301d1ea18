"""pytest-html-reporter: static HTML reports for test results."""

import logging

# Libraries should add NullHandler to prevent "No handler found" warnings
# when the application hasn't configured logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Configuration
from pytest_html_reporter.config import ReporterConfig, load_config  # noqa: E402

# Core types
from pytest_html_reporter.core import (  # noqa: E402
    ConfigError,
    ReportDataError,
    ReporterError,
    ReportWriteError,
    RunResults,
    StylesheetNotFoundError,
    SuiteResult,
    TestResult,
    load_run_results,
)

# Hooks (for plugin extensibility)
from pytest_html_reporter.hooks import HtmlReporterHookSpec  # noqa: E402

# Reporting
from pytest_html_reporter.reporting import (  # noqa: E402
    create_report,
    generate_html,
    render_html,
    sort_suite_results,
    sort_suite_results_by_status,
)

__version__ = "0.3.0"

__all__ = [
    "ConfigError",
    "HtmlReporterHookSpec",
    "ReportDataError",
    "ReportWriteError",
    "ReporterConfig",
    "ReporterError",
    "RunResults",
    "StylesheetNotFoundError",
    "SuiteResult",
    "TestResult",
    "create_report",
    "generate_html",
    "load_config",
    "load_run_results",
    "render_html",
    "sort_suite_results",
    "sort_suite_results_by_status",
]
