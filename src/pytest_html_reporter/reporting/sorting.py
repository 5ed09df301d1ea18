"""Suite result ordering."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from pytest_html_reporter.config import SORT_STATUS
from pytest_html_reporter.core.results import FAILED, PENDING

if TYPE_CHECKING:
    from pytest_html_reporter.core.results import SuiteResult, TestResult


def sort_suite_results_by_status(suite_results: list[SuiteResult]) -> list[SuiteResult]:
    """Split suites apart by test status and order them by that status.

    Every suite is copied once per non-empty status bucket, and the copies are
    emitted as: all pending suites, then all failing suites, then all passing
    suites. Tests keep their original relative order within each bucket and
    the input suites are left untouched.
    """
    pending_suites: list[SuiteResult] = []
    failing_suites: list[SuiteResult] = []
    passing_suites: list[SuiteResult] = []

    for suite in suite_results:
        pending: list[TestResult] = []
        failed: list[TestResult] = []
        passed: list[TestResult] = []

        for test in suite.test_results:
            if test.status == PENDING:
                pending.append(test)
            elif test.status == FAILED:
                failed.append(test)
            else:
                passed.append(test)

        if pending:
            pending_suites.append(replace(suite, test_results=pending))
        if failed:
            failing_suites.append(replace(suite, test_results=failed))
        if passed:
            passing_suites.append(replace(suite, test_results=passed))

    return [*pending_suites, *failing_suites, *passing_suites]


def sort_suite_results(suite_results: list[SuiteResult], sort: str | None) -> list[SuiteResult]:
    """Order suite results according to the configured sort.

    Unknown or missing sort values leave the order unchanged.
    """
    if sort == SORT_STATUS:
        return sort_suite_results_by_status(suite_results)
    return suite_results
