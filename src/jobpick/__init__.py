"""jobpick - pick the largest set of non-overlapping delivery jobs for a driver."""

from .exceptions import InvalidIntervalError, JobpickError, SelectionLimitError
from .models import Task, TaskSet, build_task_set, tasks_overlap
from .selection import SelectionResult, select_exhaustive, select_greedy

__version__ = "0.1.0"

__all__ = [
    "InvalidIntervalError",
    "JobpickError",
    "SelectionLimitError",
    "SelectionResult",
    "Task",
    "TaskSet",
    "build_task_set",
    "select_exhaustive",
    "select_greedy",
    "tasks_overlap",
]
