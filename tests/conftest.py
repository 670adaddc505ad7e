"""Pytest configuration and fixtures for jobpick tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from jobpick import context
from jobpick.logger import reset_logger
from jobpick.models import TaskSet, build_task_set
from jobpick.selection import (
    AlgorithmType,
    SelectionConfig,
    SelectionResult,
    create_selector,
    run_timed,
)

SELECTOR_VARIANTS: list[AlgorithmType] = [AlgorithmType.EXHAUSTIVE, AlgorithmType.GREEDY]
SELECTOR_IDS = ["exhaustive", "greedy"]

# (start, end) pairs from the dispatcher's worked example
SAMPLE_PAIRS: list[tuple[int, int]] = [(1, 3), (2, 5), (4, 6), (6, 7), (5, 9), (8, 10)]


@pytest.fixture(autouse=True)
def _clean_state() -> Iterator[None]:
    """Reset logger and CLI context between tests."""
    reset_logger()
    context.reset()
    yield
    reset_logger()
    context.reset()


@pytest.fixture(params=SELECTOR_VARIANTS, ids=SELECTOR_IDS)
def selector_variant(request: pytest.FixtureRequest) -> AlgorithmType:
    """Current selector being tested."""
    return request.param  # type: ignore[no-any-return]


@pytest.fixture
def run_selector(selector_variant: AlgorithmType) -> Callable[..., SelectionResult]:
    """Run the current selector on anything build_task_set accepts.

    The exhaustive size limit is lifted so boundary cases that stay cheap
    (such as many identical tasks) can run at full size.
    """

    def _run(tasks: Any, *, max_tasks: int | None = None) -> SelectionResult:
        config = SelectionConfig.model_validate(
            {"algorithm": selector_variant, "exhaustive": {"max_tasks": max_tasks}}
        )
        selector = create_selector(selector_variant, config)
        return run_timed(selector, build_task_set(tasks))

    return _run


@pytest.fixture
def sample_tasks() -> TaskSet:
    """The six-task worked example."""
    return build_task_set(SAMPLE_PAIRS)
