"""Timing wrapper that turns an algorithm outcome into a SelectionResult."""

from __future__ import annotations

import time
from collections.abc import Iterable
from typing import Any

from jobpick.logger import get_logger
from jobpick.models import TaskSet, build_task_set

from .algorithms import create_selector
from .config import DEFAULT_EXHAUSTIVE_MAX_TASKS, AlgorithmType, ExhaustiveConfig, SelectionConfig
from .core import COMPLEXITY, SelectionResult
from .protocols import TaskSelector

logger = get_logger()


def run_timed(selector: TaskSelector, task_set: TaskSet) -> SelectionResult:
    """Run selector on task_set and record its wall-clock time.

    Timing lives here so that the algorithm cores stay free of clock calls.
    """
    started = time.perf_counter()
    outcome = selector.select(task_set)
    elapsed = time.perf_counter() - started

    counters = outcome.counters
    result = SelectionResult(
        algorithm=selector.algorithm,
        selected=outcome.selected,
        count=len(outcome.selected),
        comparisons=counters.comparisons,
        elapsed=elapsed,
        max_depth=counters.max_depth if selector.algorithm == AlgorithmType.EXHAUSTIVE else None,
        metadata={
            "input_size": len(task_set),
            "complexity": dict(COMPLEXITY[selector.algorithm]),
        },
    )
    logger.run_summary(
        "%s: selected %d of %d tasks (%d comparisons, %.6fs)",
        result.display_name,
        result.count,
        len(task_set),
        result.comparisons,
        result.elapsed,
    )
    return result


def select(
    task_set: TaskSet | Iterable[Any],
    config: SelectionConfig | None = None,
) -> SelectionResult:
    """Run the selector named in config (greedy by default)."""
    effective_config = config or SelectionConfig()
    selector = create_selector(effective_config.algorithm, effective_config)
    return run_timed(selector, build_task_set(task_set))


def select_exhaustive(
    task_set: TaskSet | Iterable[Any],
    *,
    max_tasks: int | None = DEFAULT_EXHAUSTIVE_MAX_TASKS,
) -> SelectionResult:
    """Maximum non-overlapping subset by exhaustive search.

    Raises:
        InvalidIntervalError: If task_set is not already a TaskSet and holds a bad interval
        SelectionLimitError: If the input has more than max_tasks tasks
    """
    config = SelectionConfig(
        algorithm=AlgorithmType.EXHAUSTIVE, exhaustive=ExhaustiveConfig(max_tasks=max_tasks)
    )
    return select(task_set, config)


def select_greedy(task_set: TaskSet | Iterable[Any]) -> SelectionResult:
    """Maximum non-overlapping subset by earliest-finish-time greedy selection.

    Raises:
        InvalidIntervalError: If task_set is not already a TaskSet and holds a bad interval
    """
    return select(task_set, SelectionConfig(algorithm=AlgorithmType.GREEDY))
