"""Performance benchmark suite for json-structural-diff.

Timing targets:
- 10-key flat objects: <1ms
- 1000-field nested objects: <50ms
- 100-level deep chains: <5ms

Run with: pytest tests/benchmarks/ --benchmark-only -v
Skip during normal test runs: pytest --benchmark-disable
"""

from __future__ import annotations

import pytest

pytest.importorskip("pytest_benchmark")

from json_structural_diff import diff  # noqa: E402


class TestPerformance10Key:
    """Benchmark suite for 10-key flat objects."""

    def test_10key_identical(self, benchmark, pair_10key_identical):  # type: ignore[no-untyped-def]
        left, right = pair_10key_identical
        result = benchmark(diff, left, right)
        assert result is None

    def test_10key_late(self, benchmark, pair_10key_late):  # type: ignore[no-untyped-def]
        left, right = pair_10key_late
        result = benchmark(diff, left, right)
        assert result is not None
        assert result.path == ("key_9",)


class TestPerformance1000Key:
    """Benchmark suite for 20 sections x 50 fields."""

    def test_1000key_identical(self, benchmark, pair_1000key_identical):  # type: ignore[no-untyped-def]
        left, right = pair_1000key_identical
        result = benchmark(diff, left, right)
        assert result is None

    def test_1000key_late(self, benchmark, pair_1000key_late):  # type: ignore[no-untyped-def]
        left, right = pair_1000key_late
        result = benchmark(diff, left, right)
        assert result is not None
        assert result.path == ("section_19", "field_49", "label")


class TestPerformanceDeep:
    """Benchmark suite for 100-level nested chains."""

    def test_deep_identical(self, benchmark, pair_deep_identical):  # type: ignore[no-untyped-def]
        left, right = pair_deep_identical
        result = benchmark(diff, left, right)
        assert result is None

    def test_deep_late(self, benchmark, pair_deep_late):  # type: ignore[no-untyped-def]
        left, right = pair_deep_late
        result = benchmark(diff, left, right)
        assert result is not None
        assert len(result.path) == 101
        assert result.detail == "(bottom != changed)"
