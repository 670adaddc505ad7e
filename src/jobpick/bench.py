"""Scalability benchmark: both selectors across a range of input sizes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .config import BenchmarkConfig
from .generator import generate_random_tasks
from .logger import get_logger
from .selection import (
    DEFAULT_EXHAUSTIVE_MAX_TASKS,
    ExhaustiveConfig,
    select_exhaustive,
    select_greedy,
)

logger = get_logger()


@dataclass(frozen=True)
class BenchmarkRow:
    """Measurements for one input size.

    Exhaustive fields are None when the size is above the exhaustive limit.
    """

    size: int
    greedy_elapsed: float
    greedy_count: int
    greedy_comparisons: int
    exhaustive_elapsed: float | None = None
    exhaustive_count: int | None = None
    exhaustive_comparisons: int | None = None

    @property
    def exhaustive_ran(self) -> bool:
        return self.exhaustive_elapsed is not None

    @property
    def speedup(self) -> float | None:
        """How many times faster greedy was, when both ran and greedy took measurable time."""
        if self.exhaustive_elapsed is None or self.greedy_elapsed <= 0:
            return None
        return self.exhaustive_elapsed / self.greedy_elapsed

    @property
    def counts_match(self) -> bool | None:
        if self.exhaustive_count is None:
            return None
        return self.exhaustive_count == self.greedy_count


def _seed_for(base_seed: int | None, size: int) -> int | None:
    if base_seed is None:
        return None
    return base_seed * 1_000_003 + size


def run_benchmark(
    sizes: Iterable[int] | None = None,
    *,
    config: BenchmarkConfig | None = None,
    exhaustive: ExhaustiveConfig | None = None,
) -> list[BenchmarkRow]:
    """Time both selectors on one random task set per size.

    Exhaustive search only runs for sizes within the exhaustive limit;
    greedy always runs. A disabled limit (None) falls back to the default
    limit here, since random sets much larger than that keep the
    exponential search running indefinitely. With a seed in the config
    the task sets, and so the counts, are reproducible.

    Args:
        sizes: Sizes to run (defaults to config.sizes)
        config: Benchmark configuration (generator bounds, seed)
        exhaustive: Exhaustive selector limit

    Returns:
        One BenchmarkRow per size, in the given order
    """
    bench_config = config or BenchmarkConfig()
    exhaustive_config = exhaustive or ExhaustiveConfig()
    limit = exhaustive_config.max_tasks
    cap = limit if limit is not None else DEFAULT_EXHAUSTIVE_MAX_TASKS

    rows: list[BenchmarkRow] = []
    for size in sizes if sizes is not None else bench_config.sizes:
        tasks = generate_random_tasks(
            size,
            max_time=bench_config.max_time,
            max_duration=bench_config.max_duration,
            seed=_seed_for(bench_config.seed, size),
        )
        greedy = select_greedy(tasks)

        if size <= cap:
            brute = select_exhaustive(tasks, max_tasks=limit)
            row = BenchmarkRow(
                size=size,
                greedy_elapsed=greedy.elapsed,
                greedy_count=greedy.count,
                greedy_comparisons=greedy.comparisons,
                exhaustive_elapsed=brute.elapsed,
                exhaustive_count=brute.count,
                exhaustive_comparisons=brute.comparisons,
            )
            if not row.counts_match:
                logger.warning(
                    "Size %d: exhaustive selected %d but greedy selected %d",
                    size,
                    brute.count,
                    greedy.count,
                )
        else:
            logger.decision("Size %d: above exhaustive limit %d, greedy only", size, cap)
            row = BenchmarkRow(
                size=size,
                greedy_elapsed=greedy.elapsed,
                greedy_count=greedy.count,
                greedy_comparisons=greedy.comparisons,
            )
        rows.append(row)
    return rows
