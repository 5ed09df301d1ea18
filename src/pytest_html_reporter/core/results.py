"""Result data structures consumed by the report renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

PASSED = "passed"
FAILED = "failed"
PENDING = "pending"

# pytest outcome / xfail state -> report status
_PYTEST_STATUS = {
    "passed": PASSED,
    "failed": FAILED,
    "skipped": PENDING,
    "xfailed": PENDING,
    "xpassed": PASSED,
    "error": FAILED,
}


def status_from_pytest(outcome: str) -> str:
    """Map a pytest outcome to a report status.

    Unknown outcomes are passed through unchanged so the renderer can still
    show them.
    """
    return _PYTEST_STATUS.get(outcome, outcome)


@dataclass
class TestResult:
    """Outcome of a single test case.

    Attributes:
        title: Test name as shown in the report
        status: "passed", "failed" or "pending"
        ancestor_titles: Enclosing group titles, outermost first
        failure_messages: Failure output (may contain ANSI escapes)
        duration_ms: Test duration in milliseconds, if known
        full_name: Fully qualified test id (e.g. a pytest node id)
    """

    __test__ = False  # not a pytest test class

    title: str
    status: str
    ancestor_titles: list[str] = field(default_factory=list)
    failure_messages: list[str] = field(default_factory=list)
    duration_ms: float | None = None
    full_name: str | None = None

    @property
    def is_passed(self) -> bool:
        return self.status == PASSED

    @property
    def is_failed(self) -> bool:
        return self.status == FAILED

    @property
    def is_pending(self) -> bool:
        return self.status == PENDING


@dataclass
class SuiteResult:
    """Outcome of all tests in one test file."""

    test_file_path: str
    perf_start_ms: float = 0.0
    perf_end_ms: float = 0.0
    test_results: list[TestResult] = field(default_factory=list)

    @property
    def execution_time_s(self) -> float:
        return (self.perf_end_ms - self.perf_start_ms) / 1000


@dataclass
class RunResults:
    """Aggregated results of a whole test run.

    Counts left as ``None`` are computed from the suites.
    """

    start_time_ms: float
    test_results: list[SuiteResult] = field(default_factory=list)
    num_total_tests: int | None = None
    num_passed_tests: int | None = None
    num_failed_tests: int | None = None
    num_pending_tests: int | None = None

    def __post_init__(self) -> None:
        tests = [t for suite in self.test_results for t in suite.test_results]
        if self.num_total_tests is None:
            self.num_total_tests = len(tests)
        if self.num_passed_tests is None:
            self.num_passed_tests = sum(1 for t in tests if t.is_passed)
        if self.num_failed_tests is None:
            self.num_failed_tests = sum(1 for t in tests if t.is_failed)
        if self.num_pending_tests is None:
            self.num_pending_tests = sum(1 for t in tests if t.is_pending)

    @property
    def all_tests(self) -> list[TestResult]:
        return [t for suite in self.test_results for t in suite.test_results]
