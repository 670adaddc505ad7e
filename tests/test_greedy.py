"""Tests for the earliest-finish-time greedy selector."""

import math

from jobpick.generator import generate_random_tasks
from jobpick.models import Task, TaskSet, build_task_set
from jobpick.selection import GreedySelector, select_greedy


def test_worked_example_selection(sample_tasks: TaskSet) -> None:
    """(1,3) accept, (2,5) reject, (4,6) accept, (6,7) accept, (5,9) reject, (8,10) accept."""
    result = select_greedy(sample_tasks)

    assert result.selected == (Task(1, 3), Task(4, 6), Task(6, 7), Task(8, 10))
    assert result.count == 4


def test_unsorted_input() -> None:
    """Input order does not matter beyond tie-breaking."""
    result = select_greedy([(5, 9), (8, 10), (1, 3), (6, 7), (2, 5), (4, 6)])

    assert result.selected == (Task(1, 3), Task(4, 6), Task(6, 7), Task(8, 10))


def test_earliest_finish_beats_earliest_start() -> None:
    """A long early job loses to two short ones that finish sooner."""
    result = select_greedy([(0, 10), (1, 3), (4, 6)])

    assert result.selected == (Task(1, 3), Task(4, 6))


def test_equal_end_keeps_input_order() -> None:
    """Among tasks ending together, the earliest in the input is taken."""
    tasks = TaskSet([Task(2, 5, "late-start"), Task(0, 5, "early-start"), Task(1, 5, "mid")])
    result = select_greedy(tasks)

    assert [task.id for task in result.selected] == ["late-start"]


def test_duplicate_tie_takes_first_copy() -> None:
    """Of two identical jobs the first in input order is selected."""
    tasks = TaskSet([Task(0, 10, "first"), Task(0, 10, "second")])

    assert select_greedy(tasks).selected[0].id == "first"


def test_determinism_on_identical_input() -> None:
    """Two runs on the same task set return identical sequences, ids included."""
    tasks = TaskSet(
        Task(task.start, task.end, f"job-{index}")
        for index, task in enumerate(generate_random_tasks(500, max_time=50, seed=7))
    )
    first = select_greedy(tasks)
    second = select_greedy(tasks)

    assert [t.id for t in first.selected] == [t.id for t in second.selected]


def test_comparisons_include_sort_and_scan() -> None:
    """Comparisons count comparator calls plus one start test per task."""
    n = 200
    tasks = generate_random_tasks(n, seed=3)
    result = select_greedy(tasks)

    # At least n - 1 comparator calls to sort, plus n scan tests
    assert result.comparisons >= 2 * n - 1
    # Timsort stays within n log2 n comparator calls
    assert result.comparisons <= n + n * math.ceil(math.log2(n))


def test_single_task_needs_one_comparison() -> None:
    """Sorting one task costs nothing; the scan tests it once."""
    assert select_greedy([(0, 1)]).comparisons == 1


def test_scales_to_large_inputs() -> None:
    """Ten thousand tasks are handled in one pass."""
    tasks = generate_random_tasks(10_000, max_time=1000, seed=11)
    result = select_greedy(tasks)

    # Every selected task lasts at least one unit inside [0, 1010)
    assert 0 < result.count <= 1010
    assert all(a.end <= b.start for a, b in zip(result.selected, result.selected[1:]))


def test_selector_outcome() -> None:
    """The selector returns its selection and counters."""
    outcome = GreedySelector().select(build_task_set([(0, 2), (1, 3), (2, 4)]))

    assert outcome.selected == (Task(0, 2), Task(2, 4))
    assert outcome.counters.max_depth == 0
