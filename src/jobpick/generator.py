"""Task set generators: random batches and the classic stress scenarios."""

from __future__ import annotations

import random

from .models import Task, TaskSet


def generate_random_tasks(
    count: int,
    *,
    max_time: int = 100,
    max_duration: int = 10,
    seed: int | None = None,
) -> TaskSet:
    """Generate count tasks with integer starts in [0, max_time) and durations in [1, max_duration].

    Passing a seed makes the batch reproducible.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if max_time < 1 or max_duration < 1:
        raise ValueError("max_time and max_duration must be at least 1")

    rng = random.Random(seed)
    tasks = []
    for _ in range(count):
        start = rng.randrange(max_time)
        tasks.append(Task(start, start + rng.randint(1, max_duration)))
    return TaskSet(tasks)


def all_overlapping(count: int, *, start: int = 0, end: int = 100) -> TaskSet:
    """count copies of the same interval; only one can ever be selected."""
    return TaskSet(Task(start, end) for _ in range(count))


def non_overlapping(count: int, *, spacing: int = 10, duration: int = 5) -> TaskSet:
    """count disjoint tasks [i*spacing, i*spacing + duration); all can be selected."""
    if duration > spacing:
        raise ValueError("duration must not exceed spacing or the tasks would overlap")
    return TaskSet(Task(i * spacing, i * spacing + duration) for i in range(count))


def duplicated(pairs: int, *, duration: int = 5) -> TaskSet:
    """Each interval [i, i + duration) appears twice, for i in range(pairs)."""
    tasks = []
    for i in range(pairs):
        tasks.append(Task(i, i + duration))
        tasks.append(Task(i, i + duration))
    return TaskSet(tasks)


def nested(count: int, *, outer_end: int = 200) -> TaskSet:
    """Concentric intervals [i, outer_end - i); every pair overlaps."""
    if outer_end <= 2 * (count - 1):
        raise ValueError("outer_end too small for the requested nesting depth")
    return TaskSet(Task(i, outer_end - i) for i in range(count))
