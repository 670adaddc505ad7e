"""Tests for the scalability benchmark."""

from jobpick.bench import BenchmarkRow, run_benchmark
from jobpick.config import BenchmarkConfig
from jobpick.selection import DEFAULT_EXHAUSTIVE_MAX_TASKS, ExhaustiveConfig


def test_exhaustive_only_within_limit() -> None:
    """Sizes above the exhaustive limit run greedy only."""
    rows = run_benchmark(
        [5, 10, 200],
        config=BenchmarkConfig(seed=1),
        exhaustive=ExhaustiveConfig(max_tasks=10),
    )

    assert [row.size for row in rows] == [5, 10, 200]
    assert rows[0].exhaustive_ran and rows[1].exhaustive_ran
    assert not rows[2].exhaustive_ran
    assert rows[2].exhaustive_count is None
    assert rows[2].speedup is None
    assert rows[2].counts_match is None


def test_disabled_limit_falls_back_to_default_limit() -> None:
    """With max_tasks=None, large random sets still run greedy only."""
    rows = run_benchmark(
        [5, DEFAULT_EXHAUSTIVE_MAX_TASKS + 1, 5000],
        config=BenchmarkConfig(seed=3),
        exhaustive=ExhaustiveConfig(max_tasks=None),
    )

    assert rows[0].exhaustive_ran
    assert not rows[1].exhaustive_ran
    assert not rows[2].exhaustive_ran
    assert rows[2].greedy_count > 0


def test_counts_match_when_both_run() -> None:
    """Where exhaustive ran, its count equals greedy's."""
    rows = run_benchmark([4, 8, 12], config=BenchmarkConfig(seed=2))

    for row in rows:
        assert row.counts_match is True
        assert row.exhaustive_comparisons is not None


def test_seeded_runs_are_reproducible() -> None:
    """With a seed the same task sets, and so the same counts, come back."""
    config = BenchmarkConfig(seed=42)
    first = run_benchmark([10, 300], config=config)
    second = run_benchmark([10, 300], config=config)

    assert [r.greedy_count for r in first] == [r.greedy_count for r in second]
    assert [r.exhaustive_count for r in first] == [r.exhaustive_count for r in second]


def test_sizes_default_to_config() -> None:
    """Without explicit sizes the configured ones are used."""
    rows = run_benchmark(config=BenchmarkConfig(sizes=[3, 6], seed=0))

    assert [row.size for row in rows] == [3, 6]


def test_row_speedup() -> None:
    """Speedup is exhaustive time over greedy time."""
    row = BenchmarkRow(
        size=5,
        greedy_elapsed=0.001,
        greedy_count=3,
        greedy_comparisons=12,
        exhaustive_elapsed=0.01,
        exhaustive_count=3,
        exhaustive_comparisons=40,
    )

    assert row.speedup is not None
    assert round(row.speedup, 6) == 10.0
    assert row.counts_match is True


def test_row_mismatch() -> None:
    """Differing counts are reported."""
    row = BenchmarkRow(
        size=5,
        greedy_elapsed=0.0,
        greedy_count=2,
        greedy_comparisons=12,
        exhaustive_elapsed=0.01,
        exhaustive_count=3,
        exhaustive_comparisons=40,
    )

    assert row.counts_match is False
    assert row.speedup is None
