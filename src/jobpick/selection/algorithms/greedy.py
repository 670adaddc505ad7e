"""Earliest-finish-time greedy selection."""

from __future__ import annotations

import math
from functools import cmp_to_key

from jobpick.logger import decisions_enabled, get_logger
from jobpick.models import Task, TaskSet

from ..config import AlgorithmType
from ..core import SelectionCounters, SelectionOutcome

logger = get_logger()


def _compare_end(a: Task, b: Task) -> int:
    return (a.end > b.end) - (a.end < b.end)


def _fits_after(task: Task, last_end: float) -> bool:
    return task.start >= last_end


class GreedySelector:
    """Sort by finish time, then take every task that starts after the last one taken.

    Why this is optimal: let g be the task that finishes first overall. Any
    optimal selection can swap its own earliest-finishing task for g without
    creating an overlap, because g ends no later than it did. So some optimal
    selection starts with g, and the same argument applies to the tasks that
    start at or after g ends. The argument relies on every task being worth
    the same; for weighted or duration-maximising objectives it fails and a
    dynamic program or the exhaustive selector is needed instead.

    The sort is stable, so tasks with equal end times keep their input order
    and repeated runs on the same input return the same selection. Cost is
    O(n log n) for the sort plus O(n) for the scan.
    """

    algorithm = AlgorithmType.GREEDY

    def select(self, task_set: TaskSet) -> SelectionOutcome:
        """Return a maximum-cardinality set of pairwise non-overlapping tasks."""
        counters = SelectionCounters()
        compare = counters.counted(_compare_end)
        fits = counters.counted(_fits_after)
        trace = decisions_enabled()

        ordered = sorted(task_set, key=cmp_to_key(compare))

        selected: list[Task] = []
        last_end = -math.inf
        for task in ordered:
            if fits(task, last_end):
                selected.append(task)
                last_end = task.end
                if trace:
                    logger.decision("  accept %s", task)
            elif trace:
                logger.decision("  reject %s (starts before %s)", task, last_end)

        return SelectionOutcome(selected=tuple(selected), counters=counters)
