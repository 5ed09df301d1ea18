"""Serialization helpers for result dataclasses and runner JSON output."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any

from pytest_html_reporter.core.errors import ReportDataError
from pytest_html_reporter.core.results import RunResults, SuiteResult, TestResult


def serialize_dataclass(obj: Any) -> Any:
    """Convert dataclass to dict recursively.

    Excludes private fields (prefixed with _) from serialization.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        data = asdict(obj)  # type: ignore[arg-type]
        return {k: serialize_dataclass(v) for k, v in data.items() if not k.startswith("_")}
    elif isinstance(obj, (list, tuple)):
        return [serialize_dataclass(item) for item in obj]
    elif isinstance(obj, dict):
        return {k: serialize_dataclass(v) for k, v in obj.items()}
    else:
        return obj


def _get(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present in ``data`` (snake_case or camelCase)."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def _optional_float(value: Any) -> float | None:
    return None if value is None else float(value)


def _optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


def _deserialize_test(data: dict[str, Any]) -> TestResult:
    if not isinstance(data, dict):
        raise ReportDataError(f"Test result must be an object: {data!r}")
    title = _get(data, "title")
    status = _get(data, "status")
    if title is None or status is None:
        raise ReportDataError(f"Test result needs 'title' and 'status': {data!r}")

    return TestResult(
        title=str(title),
        status=str(status),
        ancestor_titles=list(_get(data, "ancestor_titles", "ancestorTitles", default=[]) or []),
        failure_messages=list(
            _get(data, "failure_messages", "failureMessages", default=[]) or []
        ),
        duration_ms=_optional_float(_get(data, "duration_ms", "duration")),
        full_name=_get(data, "full_name", "fullName"),
    )


def _deserialize_suite(data: dict[str, Any]) -> SuiteResult:
    if not isinstance(data, dict):
        raise ReportDataError(f"Suite result must be an object: {data!r}")
    path = _get(data, "test_file_path", "testFilePath", "name")
    if path is None:
        raise ReportDataError(f"Suite result needs a test file path: {sorted(data)!r}")

    perf = data.get("perfStats") or {}
    start = _get(data, "perf_start_ms", default=perf.get("start", data.get("startTime", 0)))
    end = _get(data, "perf_end_ms", default=perf.get("end", data.get("endTime", start)))

    # The runner's --json output calls the per-test list "assertionResults"
    raw_tests = _get(data, "test_results", "testResults", "assertionResults", default=[])

    return SuiteResult(
        test_file_path=str(path),
        perf_start_ms=float(start or 0),
        perf_end_ms=float(end or 0),
        test_results=[_deserialize_test(t) for t in raw_tests or []],
    )


def deserialize_run_results(data: Any) -> RunResults:
    """Deserialize RunResults from a dict (from JSON).

    Accepts the snake_case shape written by ``serialize_dataclass`` as well as
    the camelCase aggregated-result shape emitted by test runners.

    Raises:
        ReportDataError: If the data is missing or malformed
    """
    if not isinstance(data, dict):
        raise ReportDataError()

    try:
        suites = [
            _deserialize_suite(s) for s in _get(data, "test_results", "testResults", default=[])
        ]
        return RunResults(
            start_time_ms=float(_get(data, "start_time_ms", "startTime", default=0) or 0),
            test_results=suites,
            num_total_tests=_optional_int(_get(data, "num_total_tests", "numTotalTests")),
            num_passed_tests=_optional_int(_get(data, "num_passed_tests", "numPassedTests")),
            num_failed_tests=_optional_int(_get(data, "num_failed_tests", "numFailedTests")),
            num_pending_tests=_optional_int(_get(data, "num_pending_tests", "numPendingTests")),
        )
    except (TypeError, ValueError, AttributeError) as e:
        raise ReportDataError(f"Test data missing or malformed: {e}") from e


def load_run_results(json_path: str | Path) -> RunResults:
    """Load RunResults from a JSON results file.

    Raises:
        ReportDataError: If the file is unreadable, not valid JSON or has the wrong shape
    """
    try:
        data = json.loads(Path(json_path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ReportDataError(f"Test data missing or malformed: {e}") from e
    return deserialize_run_results(data)
