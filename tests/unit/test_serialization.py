"""Tests for loading runner JSON output into result dataclasses."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pytest_html_reporter.core.errors import ReportDataError
from pytest_html_reporter.core.results import RunResults
from pytest_html_reporter.core.serialization import (
    deserialize_run_results,
    load_run_results,
    serialize_dataclass,
)


class TestAggregatedShape:
    """camelCase aggregated results (testResults / perfStats)."""

    def test_counts(self, fixtures_dir: Path) -> None:
        results = load_run_results(fixtures_dir / "01_aggregated_results.json")
        assert results.start_time_ms == 1_700_000_000_000
        assert results.num_total_tests == 5
        assert results.num_passed_tests == 2
        assert results.num_failed_tests == 2
        assert results.num_pending_tests == 1

    def test_suites(self, fixtures_dir: Path) -> None:
        results = load_run_results(fixtures_dir / "01_aggregated_results.json")
        users, slow = results.test_results
        assert users.test_file_path == "tests/api/users.test.js"
        assert users.execution_time_s == 1.5
        assert slow.execution_time_s == 7.25
        assert [t.title for t in users.test_results] == [
            "creates a user",
            "rejects duplicates",
            "archives a user",
        ]

    def test_tests(self, fixtures_dir: Path) -> None:
        results = load_run_results(fixtures_dir / "01_aggregated_results.json")
        created, rejected, _ = results.test_results[0].test_results
        assert created.ancestor_titles == ["Users", "POST"]
        assert created.duration_ms == 12
        assert rejected.is_failed
        assert rejected.failure_messages == ["\x1b[31mExpected 409\x1b[39m received 200"]


class TestJsonOutputShape:
    """--json output (assertionResults / name / startTime / endTime)."""

    def test_suite(self, fixtures_dir: Path) -> None:
        results = load_run_results(fixtures_dir / "02_json_output.json")
        (suite,) = results.test_results
        assert suite.test_file_path == "/repo/src/math.test.js"
        assert suite.perf_start_ms == 1_700_000_000_100
        assert suite.perf_end_ms == 1_700_000_000_350
        assert len(suite.test_results) == 3

    def test_tests(self, fixtures_dir: Path) -> None:
        results = load_run_results(fixtures_dir / "02_json_output.json")
        sums, _, divides = results.test_results[0].test_results
        assert sums.full_name == "math add sums two numbers"
        assert sums.duration_ms == 3
        assert divides.is_pending
        assert divides.duration_ms is None


class TestSnakeCaseShape:
    def test_round_trip(self, run_results: RunResults) -> None:
        data = json.loads(json.dumps(serialize_dataclass(run_results)))
        assert deserialize_run_results(data) == run_results

    def test_counts_computed_when_absent(self) -> None:
        results = deserialize_run_results(
            {
                "start_time_ms": 0,
                "test_results": [
                    {
                        "test_file_path": "tests/test_a.py",
                        "test_results": [
                            {"title": "test_a", "status": "passed"},
                            {"title": "test_b", "status": "failed"},
                        ],
                    }
                ],
            }
        )
        assert results.num_total_tests == 2
        assert results.num_passed_tests == 1
        assert results.num_failed_tests == 1
        assert results.num_pending_tests == 0

    def test_serialize_skips_private_fields(self) -> None:
        from dataclasses import dataclass

        @dataclass
        class _Sample:
            name: str
            _cache: int = 0

        assert serialize_dataclass(_Sample("x")) == {"name": "x"}


class TestMalformed:
    @pytest.mark.parametrize("data", [None, [], "results", 42])
    def test_not_an_object(self, data: object) -> None:
        with pytest.raises(ReportDataError, match="Test data missing or malformed"):
            deserialize_run_results(data)

    def test_suite_without_path(self) -> None:
        with pytest.raises(ReportDataError, match="test file path"):
            deserialize_run_results({"testResults": [{"testResults": []}]})

    def test_test_without_status(self) -> None:
        with pytest.raises(ReportDataError, match="'title' and 'status'"):
            deserialize_run_results(
                {"testResults": [{"testFilePath": "a.js", "testResults": [{"title": "x"}]}]}
            )

    def test_suite_not_an_object(self) -> None:
        with pytest.raises(ReportDataError, match="Suite result must be an object"):
            deserialize_run_results({"testResults": ["not a suite"]})

    def test_wrong_types(self) -> None:
        with pytest.raises(ReportDataError, match="Test data missing or malformed"):
            deserialize_run_results({"startTime": "yesterday"})

    def test_invalid_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "results.json"
        path.write_text("{oops", encoding="utf-8")
        with pytest.raises(ReportDataError, match="Test data missing or malformed"):
            load_run_results(path)

    def test_non_numeric_duration(self) -> None:
        data = {
            "testResults": [
                {
                    "testFilePath": "a.js",
                    "testResults": [{"title": "x", "status": "passed", "duration": "abc"}],
                }
            ]
        }
        with pytest.raises(ReportDataError, match="Test data missing or malformed"):
            deserialize_run_results(data)

    @pytest.mark.parametrize(
        "key", ["numTotalTests", "numPassedTests", "numFailedTests", "numPendingTests"]
    )
    def test_non_numeric_count(self, key: str) -> None:
        with pytest.raises(ReportDataError, match="Test data missing or malformed"):
            deserialize_run_results({key: "x"})

    def test_numeric_strings_are_converted(self) -> None:
        results = deserialize_run_results(
            {
                "numTotalTests": "1",
                "testResults": [
                    {
                        "testFilePath": "a.js",
                        "testResults": [{"title": "x", "status": "passed", "duration": "12"}],
                    }
                ],
            }
        )
        assert results.num_total_tests == 1
        assert results.all_tests[0].duration_ms == 12.0

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ReportDataError, match="Test data missing or malformed"):
            load_run_results(tmp_path)

    def test_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "results.json"
        path.write_bytes(b"\xff\xfe{}")
        with pytest.raises(ReportDataError, match="Test data missing or malformed"):
            load_run_results(path)
