"""Collects pytest phase reports into RunResults."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from pytest_html_reporter.core.results import (
    FAILED,
    PASSED,
    PENDING,
    RunResults,
    SuiteResult,
    TestResult,
    status_from_pytest,
)


def split_nodeid(nodeid: str) -> tuple[str, list[str], str]:
    """Split a pytest node ID into (file path, ancestor titles, test title).

    Example:
        "tests/test_a.py::TestApi::TestGet::test_ok[x]"
        -> ("tests/test_a.py", ["TestApi", "TestGet"], "test_ok[x]")
    """
    parts = nodeid.split("::")
    if len(parts) == 1:
        return parts[0], [], parts[0]
    return parts[0], parts[1:-1], parts[-1]


@dataclass
class _Entry:
    """Accumulated phase data for one test item."""

    nodeid: str
    file_path: str
    ancestor_titles: list[str]
    title: str
    status: str = PASSED
    duration_ms: float | None = None
    failure_messages: list[str] = field(default_factory=list)


@dataclass
class _Window:
    start_ms: float
    end_ms: float


class ResultCollector:
    """Accumulates per-phase outcomes during a session.

    Each test becomes one TestResult. The call phase decides the status unless
    setup or teardown failed or skipped.
    """

    def __init__(self) -> None:
        self.start_time_ms = time.time() * 1000
        self._entries: dict[str, _Entry] = {}
        self._windows: dict[str, _Window] = {}

    @property
    def tests(self) -> list[str]:
        """Node IDs recorded so far, in first-seen order."""
        return list(self._entries)

    def record(
        self,
        nodeid: str,
        when: str,
        outcome: str,
        *,
        duration_s: float = 0.0,
        start_s: float | None = None,
        stop_s: float | None = None,
        longrepr: str = "",
    ) -> None:
        """Record one phase (setup/call/teardown) of a test.

        Args:
            nodeid: pytest node ID
            when: "setup", "call" or "teardown"
            outcome: pytest outcome: "passed", "failed" or "skipped"
            duration_s: Phase duration in seconds
            start_s: Phase start (epoch seconds)
            stop_s: Phase end (epoch seconds)
            longrepr: Failure text for failed phases
        """
        entry = self._entries.get(nodeid)
        if entry is None:
            file_path, ancestors, title = split_nodeid(nodeid)
            entry = _Entry(nodeid, file_path, ancestors, title)
            self._entries[nodeid] = entry

        if start_s is not None:
            self._extend_window(entry.file_path, start_s * 1000, (stop_s or start_s) * 1000)

        if when == "call":
            entry.duration_ms = duration_s * 1000

        # xfailed tests report "skipped", xpassed tests report "passed"
        status = status_from_pytest(outcome)
        if status == FAILED:
            entry.status = FAILED
            if longrepr:
                entry.failure_messages.append(longrepr)
        elif status == PENDING and entry.status != FAILED:
            entry.status = PENDING

    def _extend_window(self, file_path: str, start_ms: float, end_ms: float) -> None:
        window = self._windows.get(file_path)
        if window is None:
            self._windows[file_path] = _Window(start_ms, end_ms)
            return
        window.start_ms = min(window.start_ms, start_ms)
        window.end_ms = max(window.end_ms, end_ms)

    def build_run_results(self) -> RunResults:
        """Build RunResults grouped by test file, in first-seen order."""
        suites: dict[str, SuiteResult] = {}
        for entry in self._entries.values():
            suite = suites.get(entry.file_path)
            if suite is None:
                window = self._windows.get(entry.file_path)
                suite = SuiteResult(
                    test_file_path=entry.file_path,
                    perf_start_ms=window.start_ms if window else self.start_time_ms,
                    perf_end_ms=window.end_ms if window else self.start_time_ms,
                )
                suites[entry.file_path] = suite

            suite.test_results.append(
                TestResult(
                    title=entry.title,
                    status=entry.status,
                    ancestor_titles=list(entry.ancestor_titles),
                    failure_messages=list(entry.failure_messages),
                    duration_ms=entry.duration_ms,
                    full_name=entry.nodeid,
                )
            )

        return RunResults(start_time_ms=self.start_time_ms, test_results=list(suites.values()))
