"""pytest-html-reporter hook specifications.

Downstream plugins can implement these hooks to customize the report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config

    from pytest_html_reporter.config import ReporterConfig


class HtmlReporterHookSpec:
    """Hook specifications for pytest-html-reporter extensibility."""

    @pytest.hookspec(firstresult=True)
    def pytest_html_reporter_stylesheet(
        self, config: Config, reporter_config: ReporterConfig
    ) -> str | None:
        """Return the CSS to embed in the HTML report.

        Only called when no ``style_override_path`` is configured. The first
        plugin that returns a non-None string wins (``firstresult=True``).

        Args:
            config: The pytest config object.
            reporter_config: The resolved reporter configuration.

        Returns:
            Stylesheet text, or None to use the configured theme.

        Example::

            @pytest.hookimpl
            def pytest_html_reporter_stylesheet(config, reporter_config):
                return (Path(__file__).parent / "report.css").read_text()
        """
