"""Shared fixtures for pytest-html-reporter tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from pytest_html_reporter.config import ENV_PREFIX
from pytest_html_reporter.core.results import RunResults, SuiteResult, TestResult

pytest_plugins = ["pytester"]

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "reports"


@pytest.fixture(autouse=True)
def _clean_reporter_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PYTEST_HTML_REPORTER_* variables from the outer shell out of tests."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def run_results() -> RunResults:
    """Two suites covering every status, in run order."""
    return RunResults(
        start_time_ms=1_700_000_000_000,
        test_results=[
            SuiteResult(
                test_file_path="tests/test_api.py",
                perf_start_ms=1_700_000_000_000,
                perf_end_ms=1_700_000_001_500,
                test_results=[
                    TestResult("test_list", "passed", ["TestUsers"], duration_ms=12),
                    TestResult(
                        "test_create",
                        "failed",
                        ["TestUsers"],
                        failure_messages=["\x1b[31mAssertionError\x1b[0m: 409 != 201"],
                        duration_ms=30,
                    ),
                    TestResult("test_archive", "pending", ["TestUsers"]),
                    TestResult("test_delete", "passed", ["TestUsers"], duration_ms=1500),
                ],
            ),
            SuiteResult(
                test_file_path="tests/test_slow.py",
                perf_start_ms=1_700_000_000_000,
                perf_end_ms=1_700_000_007_250,
                test_results=[
                    TestResult("test_crunch", "passed", [], duration_ms=7000),
                    TestResult(
                        "test_timeout",
                        "failed",
                        [],
                        failure_messages=["Timeout <5000ms> exceeded"],
                    ),
                ],
            ),
        ],
    )
