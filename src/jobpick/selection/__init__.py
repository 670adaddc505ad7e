"""Selection package - maximum non-overlapping task selection.

Two interchangeable selectors solve the same problem and always agree on
the size of the answer:
- ExhaustiveSelector: include/exclude search, exponential, gated by size
- GreedySelector: earliest finish time first, O(n log n)

Main entry points:
- select_exhaustive / select_greedy: run one selector and time it
- create_selector + run_timed: the same, for a configured algorithm

Configuration:
- SelectionConfig: algorithm choice and exhaustive size limit
"""

from .algorithms import ExhaustiveSelector, GreedySelector, create_selector
from .config import (
    DEFAULT_EXHAUSTIVE_MAX_TASKS,
    AlgorithmType,
    ExhaustiveConfig,
    SelectionConfig,
)
from .core import SelectionCounters, SelectionOutcome, SelectionResult
from .protocols import TaskSelector
from .runner import run_timed, select, select_exhaustive, select_greedy

__all__ = [
    # Core dataclasses
    "SelectionCounters",
    "SelectionOutcome",
    "SelectionResult",
    # Configuration
    "AlgorithmType",
    "DEFAULT_EXHAUSTIVE_MAX_TASKS",
    "ExhaustiveConfig",
    "SelectionConfig",
    # Protocols
    "TaskSelector",
    # Selectors
    "ExhaustiveSelector",
    "GreedySelector",
    "create_selector",
    # Entry points
    "run_timed",
    "select",
    "select_exhaustive",
    "select_greedy",
]
