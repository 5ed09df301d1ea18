"""CLI for rendering an HTML report from a JSON results file.

Usage:
    pytest-html-reporter results.json
    pytest-html-reporter results.json --output reports/index.html --sort status
    pytest-html-reporter results.json --theme darkTheme --include-failure-msg

Configuration (in order of precedence):
    1. CLI arguments (highest)
    2. htmlreporter.config.json in the current directory
    3. pyproject.toml [tool.pytest-html-reporter] section
    4. Environment variables: PYTEST_HTML_REPORTER_*
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pytest_html_reporter.config import SORT_DEFAULT, SORT_STATUS, load_config
from pytest_html_reporter.core.errors import ConfigError, ReportDataError
from pytest_html_reporter.core.serialization import load_run_results
from pytest_html_reporter.reporting.generator import create_report

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pytest-html-reporter",
        description="Render an HTML test report from a JSON results file",
    )

    parser.add_argument(
        "json_file",
        type=Path,
        help="Path to JSON results file (e.g., results.json)",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="PATH",
        help="Where to write the report (default: test-report.html)",
    )
    parser.add_argument("--title", metavar="TITLE", help="Page title of the report")
    parser.add_argument(
        "--theme",
        metavar="NAME",
        help="Bundled theme: defaultTheme, lightTheme or darkTheme",
    )
    parser.add_argument(
        "--style-override",
        metavar="PATH",
        help="Path to a CSS file used instead of the theme stylesheet",
    )
    parser.add_argument(
        "--sort",
        choices=[SORT_DEFAULT, SORT_STATUS],
        help="Order of results (default keeps run order)",
    )
    parser.add_argument(
        "--include-failure-msg",
        action="store_true",
        default=None,
        help="Include failure messages below failed tests",
    )
    parser.add_argument(
        "--date-format",
        metavar="FORMAT",
        help="strftime format of the start time",
    )
    parser.add_argument(
        "--warn-threshold",
        metavar="SECONDS",
        type=float,
        help="Flag suites that run longer than this many seconds",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Validate arguments
    if not args.json_file.exists():
        print(f"Error: JSON file not found: {args.json_file}", file=sys.stderr)
        return 1

    try:
        config = load_config(
            {
                "output_path": args.output,
                "page_title": args.title,
                "theme": args.theme,
                "style_override_path": args.style_override,
                "sort": args.sort,
                "include_failure_msg": args.include_failure_msg,
                "date_format": args.date_format,
                "execution_time_warning_threshold": args.warn_threshold,
            }
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        results = load_run_results(args.json_file)
    except ReportDataError as e:
        print(f"Error: Failed to parse JSON file: {e}", file=sys.stderr)
        return 1

    _logger.debug("Loaded %d suite(s) from %s", len(results.test_results), args.json_file)

    message = create_report(results, config)
    return 0 if message.kind == "success" else 1


if __name__ == "__main__":
    sys.exit(main())
