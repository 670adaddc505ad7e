"""Data models for jobpick: tasks, task sets and the overlap predicate."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, overload

from .exceptions import InvalidIntervalError


@dataclass(frozen=True)
class Task:
    """A job occupying the half-open time span [start, end) on a driver's timeline.

    Tasks are plain values: two tasks with the same start and end compare
    equal, and a task set may contain such duplicates. The optional id is
    carried along for display only and does not take part in comparisons.
    """

    start: float
    end: float
    id: str | None = field(default=None, compare=False)

    @property
    def duration(self) -> float:
        return self.end - self.start

    def overlaps(self, other: Task) -> bool:
        """Return True if this task shares any interior time point with other."""
        return tasks_overlap(self, other)

    def __str__(self) -> str:
        span = f"[{_fmt(self.start)}, {_fmt(self.end)})"
        return f"{self.id} {span}" if self.id else span


def _fmt(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def tasks_overlap(a: Task, b: Task) -> bool:
    """Two tasks overlap iff a.start < b.end and b.start < a.end.

    Both inequalities are strict, so tasks that merely touch (one ends exactly
    when the other starts) do not overlap.
    """
    return a.start < b.end and b.start < a.end


def _check_endpoint(index: int, start: object, end: object, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidIntervalError(index, start, end, f"endpoint {value!r} is not a number")
    if math.isnan(value):
        raise InvalidIntervalError(index, start, end, "endpoint is NaN")


def validate_task(index: int, task: Task) -> None:
    """Raise InvalidIntervalError unless task is a proper interval (start < end)."""
    _check_endpoint(index, task.start, task.end, task.start)
    _check_endpoint(index, task.start, task.end, task.end)
    if not task.start < task.end:
        raise InvalidIntervalError(index, task.start, task.end)


class TaskSet(Sequence[Task]):
    """An immutable, ordered batch of validated tasks.

    Input order is preserved because the greedy selector breaks ties on equal
    end times by input position. Every task is checked once, here; the
    selectors rely on that and never re-validate.
    """

    __slots__ = ("_tasks",)

    def __init__(self, tasks: Iterable[Task] = ()):
        items = tuple(tasks)
        for index, task in enumerate(items):
            if not isinstance(task, Task):
                raise TypeError(f"TaskSet items must be Task, got {type(task).__name__}")
            validate_task(index, task)
        self._tasks: tuple[Task, ...] = items

    @overload
    def __getitem__(self, index: int) -> Task: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Task, ...]: ...

    def __getitem__(self, index: int | slice) -> Task | tuple[Task, ...]:
        return self._tasks[index]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TaskSet):
            return self._tasks == other._tasks
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tasks)

    def __repr__(self) -> str:
        return f"TaskSet({list(self._tasks)!r})"

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks


def _coerce(index: int, item: Any) -> Task:
    if isinstance(item, Task):
        return item
    if isinstance(item, Mapping):
        if "start" not in item or "end" not in item:
            raise InvalidIntervalError(
                index, item.get("start"), item.get("end"), "missing 'start' or 'end'"
            )
        task_id = item.get("id")
        return Task(item["start"], item["end"], str(task_id) if task_id is not None else None)
    if isinstance(item, (str, bytes)) or not isinstance(item, Sequence) or len(item) != 2:  # noqa: PLR2004
        raise InvalidIntervalError(index, item, None, "expected a (start, end) pair")
    return Task(item[0], item[1])


def build_task_set(items: Iterable[Any]) -> TaskSet:
    """Build a validated TaskSet from (start, end) pairs, mappings or Task objects.

    Args:
        items: Iterable of ``(start, end)`` pairs, ``{"start": .., "end": ..}``
            mappings (an optional ``id`` key is kept), or Task instances

    Returns:
        TaskSet preserving the input order (duplicates included)

    Raises:
        InvalidIntervalError: For the first item that is not a valid interval
    """
    if isinstance(items, TaskSet):
        return items
    return TaskSet(_coerce(index, item) for index, item in enumerate(items))


def find_overlaps(tasks: Sequence[Task]) -> list[tuple[int, int]]:
    """Return the index pairs (i, j), i < j, of tasks that overlap."""
    pairs: list[tuple[int, int]] = []
    for i in range(len(tasks)):
        for j in range(i + 1, len(tasks)):
            if tasks_overlap(tasks[i], tasks[j]):
                pairs.append((i, j))
    return pairs


def is_valid_selection(tasks: Sequence[Task]) -> bool:
    """Return True if no two tasks in the sequence overlap."""
    return not find_overlaps(tasks)
