"""Protocol definitions for the selection system."""

from typing import Protocol

from jobpick.models import TaskSet

from .config import AlgorithmType
from .core import SelectionOutcome


class TaskSelector(Protocol):
    """Protocol for maximum non-overlapping subset selectors."""

    algorithm: AlgorithmType

    def select(self, task_set: TaskSet) -> SelectionOutcome:
        """Select a maximum-cardinality set of pairwise non-overlapping tasks.

        Args:
            task_set: Validated input; never mutated

        Returns:
            SelectionOutcome with the selected tasks and operation counters
        """
        ...
