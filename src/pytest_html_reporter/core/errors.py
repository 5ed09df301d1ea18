"""Custom exceptions for pytest-html-reporter."""

from __future__ import annotations


class ReporterError(Exception):
    """Base exception for pytest-html-reporter errors."""


class ConfigError(ReporterError):
    """Invalid configuration value."""

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid value for '{key}' ({value!r}): {message}")


class ReportDataError(ReporterError):
    """Test result data is missing or malformed."""

    def __init__(self, message: str = "Test data missing or malformed") -> None:
        super().__init__(message)


class StylesheetNotFoundError(ReporterError):
    """The configured stylesheet could not be read."""

    def __init__(self, path: str, reason: object) -> None:
        self.path = path
        super().__init__(f"Could not locate the stylesheet: '{path}': {reason}")


class ReportWriteError(ReporterError):
    """The report file could not be written."""

    def __init__(self, path: str, reason: object) -> None:
        self.path = path
        super().__init__(f"Something went wrong when creating the file: {reason}")
