"""Cross-checking the two selectors against each other."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .logger import get_logger
from .models import TaskSet, build_task_set, is_valid_selection
from .selection import (
    DEFAULT_EXHAUSTIVE_MAX_TASKS,
    AlgorithmType,
    SelectionResult,
    select_exhaustive,
    select_greedy,
)

logger = get_logger()


@dataclass(frozen=True)
class ComparisonReport:
    """Outcome of comparing two selector results on the same input."""

    first: SelectionResult
    second: SelectionResult
    same_count: bool
    first_valid: bool
    second_valid: bool
    speedup: float | None  # slower elapsed / faster elapsed
    faster: AlgorithmType | None  # None when both took the same time

    @property
    def ok(self) -> bool:
        """True when both selections are valid and equally large."""
        return self.same_count and self.first_valid and self.second_valid


def compare_results(first: SelectionResult, second: SelectionResult) -> ComparisonReport:
    """Compare two results for equal cardinality, validity and relative speed."""
    if first.elapsed == second.elapsed:
        faster = None
    else:
        faster = first.algorithm if first.elapsed < second.elapsed else second.algorithm

    quicker = min(first.elapsed, second.elapsed)
    slower = max(first.elapsed, second.elapsed)
    speedup = slower / quicker if quicker > 0 else None

    report = ComparisonReport(
        first=first,
        second=second,
        same_count=first.count == second.count,
        first_valid=is_valid_selection(first.selected),
        second_valid=is_valid_selection(second.selected),
        speedup=speedup,
        faster=faster,
    )
    if not report.ok:
        logger.warning(
            "Selector mismatch: %s selected %d (valid=%s), %s selected %d (valid=%s)",
            first.display_name,
            first.count,
            report.first_valid,
            second.display_name,
            second.count,
            report.second_valid,
        )
    return report


def cross_check(
    task_set: TaskSet | Iterable[Any],
    *,
    max_tasks: int | None = DEFAULT_EXHAUSTIVE_MAX_TASKS,
) -> ComparisonReport:
    """Run both selectors on the same input and compare them.

    Raises:
        InvalidIntervalError: If the input holds a bad interval
        SelectionLimitError: If the input is too large for exhaustive search
    """
    tasks = build_task_set(task_set)
    exhaustive = select_exhaustive(tasks, max_tasks=max_tasks)
    greedy = select_greedy(tasks)
    return compare_results(exhaustive, greedy)
