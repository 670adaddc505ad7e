"""Core dataclasses for task selection results and instrumentation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from jobpick.models import Task

from .config import AlgorithmType

T = TypeVar("T")

COMPLEXITY: dict[AlgorithmType, dict[str, str]] = {
    AlgorithmType.EXHAUSTIVE: {"time": "O(n * 2^n)", "space": "O(n)"},
    AlgorithmType.GREEDY: {"time": "O(n log n)", "space": "O(n)"},
}

DISPLAY_NAMES: dict[AlgorithmType, str] = {
    AlgorithmType.EXHAUSTIVE: "Exhaustive search",
    AlgorithmType.GREEDY: "Greedy (earliest finish)",
}


def _default_dict() -> dict[str, Any]:
    return {}


@dataclass
class SelectionCounters:
    """Operation counters for a single selector run.

    A fresh instance is created per run and handed to the algorithm, so
    concurrent runs never share counters. Algorithms count by calling
    predicates wrapped with counted() and recursive steps wrapped with
    tracked() rather than incrementing inline.
    """

    comparisons: int = 0
    max_depth: int = 0

    def counted(self, fn: Callable[..., T]) -> Callable[..., T]:
        """Wrap fn so that every call adds one to comparisons."""

        def wrapper(*args: Any) -> T:
            self.comparisons += 1
            return fn(*args)

        return wrapper

    def tracked(self, fn: Callable[..., T]) -> Callable[..., T]:
        """Wrap a recursive step whose first argument is its depth.

        Every call raises max_depth to that depth if it is deeper than any
        seen so far.
        """

        def wrapper(depth: int, *args: Any) -> T:
            if depth > self.max_depth:
                self.max_depth = depth
            return fn(depth, *args)

        return wrapper


@dataclass(frozen=True)
class SelectionOutcome:
    """What an algorithm core returns: the chosen tasks and its counters."""

    selected: tuple[Task, ...]
    counters: SelectionCounters


@dataclass(frozen=True)
class SelectionResult:
    """Result of one selector run, owned by the caller.

    Attributes:
        algorithm: Which selector produced this result
        selected: Chosen non-overlapping tasks in ascending end order
        count: Number of selected tasks
        comparisons: Overlap tests (exhaustive) or ordering comparisons plus
            scan tests (greedy); a cost proxy independent of wall-clock noise
        elapsed: Wall-clock duration of the run in seconds
        max_depth: Deepest recursion level reached (exhaustive only)
        metadata: Complexity labels and input size
    """

    algorithm: AlgorithmType
    selected: tuple[Task, ...]
    count: int
    comparisons: int
    elapsed: float
    max_depth: int | None = None
    metadata: dict[str, Any] = field(default_factory=_default_dict)

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self.algorithm]
