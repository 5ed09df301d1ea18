"""Reporter configuration.

Configuration (in order of precedence):
    1. Explicit overrides: pytest options or CLI arguments (highest)
    2. ``htmlreporter.config.json`` in the working directory
    3. pyproject.toml ``[tool.pytest-html-reporter]`` section
    4. Environment variables: ``PYTEST_HTML_REPORTER_*``
    5. Built-in defaults (lowest)
"""

from __future__ import annotations

import json
import logging
import os
import re
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from pytest_html_reporter.core.errors import ConfigError

_logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "htmlreporter.config.json"
PYPROJECT_SECTION = "pytest-html-reporter"
ENV_PREFIX = "PYTEST_HTML_REPORTER_"

DEFAULT_THEME = "defaultTheme"
SORT_DEFAULT = "default"
SORT_STATUS = "status"

_TRUE_STRINGS = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class ReporterConfig:
    """Resolved settings for one report.

    Example:
        ReporterConfig(page_title="Nightly run", sort="status")
    """

    output_path: str | None = None
    theme: str = DEFAULT_THEME
    style_override_path: str | None = None
    page_title: str = "Test report"
    include_failure_msg: bool = False
    execution_time_warning_threshold: float = 5
    date_format: str = "%Y-%m-%d %H:%M:%S"
    sort: str = SORT_DEFAULT

    @property
    def output_filepath(self) -> Path:
        """Where the report is written (defaults to ``test-report.html`` in cwd)."""
        if self.output_path:
            return Path(self.output_path)
        return Path.cwd() / "test-report.html"

    @property
    def sort_by_status(self) -> bool:
        return self.sort == SORT_STATUS


CONFIG_KEYS = frozenset(f.name for f in fields(ReporterConfig))


def normalize_key(key: str) -> str:
    """Normalize ``outputPath`` / ``output-path`` / ``output_path`` to snake_case."""
    key = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", key)
    return key.replace("-", "_").lower()


def _coerce(key: str, value: Any) -> Any:
    """Convert a raw config value (often a string) to the field's type."""
    if key == "include_failure_msg":
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_STRINGS
        return bool(value)
    if key == "execution_time_warning_threshold":
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(key, value, "expected a number of seconds") from e
    if value is None:
        return None
    return str(value)


def _coerce_all(values: dict[str, Any]) -> dict[str, Any]:
    return {k: _coerce(k, v) for k, v in values.items()}


def _is_set(value: Any) -> bool:
    # None and "" fall through to the next source
    return value is not None and value != ""


def _known_keys(raw: dict[str, Any], source: str) -> dict[str, Any]:
    """Normalize keys and drop the ones ReporterConfig does not know."""
    result = {}
    for key, value in raw.items():
        name = normalize_key(key)
        if name not in CONFIG_KEYS:
            _logger.debug("Ignoring unknown config key %r from %s", key, source)
        elif _is_set(value):
            result[name] = value
    return result


def load_config_from_env(environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Read ``PYTEST_HTML_REPORTER_*`` environment variables.

    Empty values are treated as unset.
    """
    environ = os.environ if environ is None else environ
    result = {}
    for name in CONFIG_KEYS:
        value = environ.get(ENV_PREFIX + name.upper())
        if value:
            result[name] = value
    return result


def load_config_from_pyproject(start: Path | None = None) -> dict[str, Any]:
    """Load configuration from pyproject.toml [tool.pytest-html-reporter] section.

    Searches for pyproject.toml in the start directory and its parents.
    Returns empty dict if not found or section doesn't exist.
    """
    current = (start or Path.cwd()).resolve()
    for parent in [current, *current.parents]:
        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
            except (OSError, tomllib.TOMLDecodeError):
                _logger.warning("Failed to parse %s", pyproject, exc_info=True)
                return {}
            section = data.get("tool", {}).get(PYPROJECT_SECTION, {})
            return _known_keys(section, str(pyproject))
    return {}


def load_config_from_json(start: Path | None = None) -> dict[str, Any]:
    """Load configuration from ``htmlreporter.config.json`` in the start directory."""
    path = (start or Path.cwd()) / CONFIG_FILE_NAME
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        _logger.warning("Failed to parse %s", path, exc_info=True)
        return {}
    if not isinstance(data, dict):
        _logger.warning("Ignoring %s: expected a JSON object", path)
        return {}
    return _known_keys(data, str(path))


def load_config(
    overrides: dict[str, Any] | None = None,
    *,
    cwd: Path | None = None,
    environ: dict[str, str] | None = None,
) -> ReporterConfig:
    """Resolve the reporter configuration.

    Args:
        overrides: Explicit values (e.g. from command-line options); None
            values are ignored
        cwd: Directory to search for config files (default: current directory)
        environ: Environment mapping (default: ``os.environ``)

    Raises:
        ConfigError: If a value cannot be converted to its setting's type
    """
    values: dict[str, Any] = {}
    # Lowest precedence first; later sources win
    values.update(load_config_from_env(environ))
    values.update(load_config_from_pyproject(cwd))
    values.update(load_config_from_json(cwd))
    values.update({k: v for k, v in (overrides or {}).items() if _is_set(v)})

    config = ReporterConfig(**_coerce_all(values))
    _logger.debug("Resolved reporter config: %s", config)
    return config
