"""Exhaustive include/exclude search for the maximum non-overlapping task set."""

from __future__ import annotations

import sys

from jobpick.exceptions import SelectionLimitError
from jobpick.logger import get_logger, trace_enabled
from jobpick.models import Task, TaskSet, tasks_overlap

from ..config import DEFAULT_EXHAUSTIVE_MAX_TASKS, AlgorithmType
from ..core import SelectionCounters, SelectionOutcome

logger = get_logger()

# Stack frames kept free for the caller when deciding whether recursion fits
_RECURSION_HEADROOM = 100
# Each level of the search is a depth-tracking wrapper frame plus the step itself
_FRAMES_PER_LEVEL = 2


class ExhaustiveSelector:
    """Explores every subset by recursive include/exclude decisions.

    At index i the search first recurses without task i, then, if task i
    overlaps none of the tasks already accepted on this path, recurses with
    it. At index n the partial set is a leaf; of the two leaves coming back
    from a decision the larger one wins and ties keep the "without" leaf.
    The result is a provably maximum set, but which maximum set is returned
    when several exist depends on input order.

    Cost model: each "with" branch compares the new task against the whole
    partial set, so time is O(n * 2^n) in the worst case (no overlaps at
    all) and recursion depth is exactly n. Inputs larger than max_tasks are
    refused up front with SelectionLimitError; a limit of None disables the
    check.
    """

    algorithm = AlgorithmType.EXHAUSTIVE

    def __init__(self, max_tasks: int | None = DEFAULT_EXHAUSTIVE_MAX_TASKS):
        self.max_tasks = max_tasks

    def check_size(self, size: int) -> None:
        """Raise SelectionLimitError if a task set of this size may not be searched."""
        if self.max_tasks is not None and size > self.max_tasks:
            raise SelectionLimitError(size, self.max_tasks)
        stack_limit = (sys.getrecursionlimit() - _RECURSION_HEADROOM) // _FRAMES_PER_LEVEL
        if size > stack_limit:
            raise SelectionLimitError(size, stack_limit)

    def select(self, task_set: TaskSet) -> SelectionOutcome:
        """Return a maximum-cardinality set of pairwise non-overlapping tasks."""
        self.check_size(len(task_set))
        counters = SelectionCounters()
        search = _Search(task_set.tasks, counters, trace=trace_enabled())
        best = search.run(0, ())
        selected = tuple(sorted(best, key=lambda task: task.end))
        return SelectionOutcome(selected=selected, counters=counters)


class _Search:
    """State for one exhaustive run; the recursion itself holds no globals."""

    def __init__(self, tasks: tuple[Task, ...], counters: SelectionCounters, *, trace: bool):
        self.tasks = tasks
        self.counters = counters
        self.overlap = counters.counted(tasks_overlap)
        self.run = counters.tracked(self._step)
        self.trace = trace

    def compatible(self, candidate: Task, accepted: tuple[Task, ...]) -> bool:
        """Check candidate against every task already on the path."""
        return not any(self.overlap(task, candidate) for task in accepted)

    def _step(self, index: int, accepted: tuple[Task, ...]) -> tuple[Task, ...]:
        if index == len(self.tasks):
            return accepted

        without = self.run(index + 1, accepted)

        candidate = self.tasks[index]
        with_task = accepted
        if self.compatible(candidate, accepted):
            with_task = self.run(index + 1, (*accepted, candidate))
        elif self.trace:
            logger.debug("depth %d: %s conflicts with current path, pruned", index, candidate)

        if self.trace:
            logger.debug(
                "depth %d: without=%d with=%d for %s", index, len(without), len(with_task), candidate
            )
        return with_task if len(with_task) > len(without) else without
