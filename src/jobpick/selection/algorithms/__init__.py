"""Selector factory and exports."""

from ..config import AlgorithmType, SelectionConfig
from .exhaustive import ExhaustiveSelector
from .greedy import GreedySelector


def create_selector(
    algorithm_type: AlgorithmType,
    config: SelectionConfig | None = None,
) -> ExhaustiveSelector | GreedySelector:
    """Create a selector instance.

    Args:
        algorithm_type: Type of selector to create
        config: Optional selection configuration (exhaustive size limit)

    Returns:
        Selector ready to run
    """
    effective_config = config or SelectionConfig()

    if algorithm_type == AlgorithmType.EXHAUSTIVE:
        return ExhaustiveSelector(max_tasks=effective_config.exhaustive.max_tasks)

    if algorithm_type == AlgorithmType.GREEDY:
        return GreedySelector()

    msg = f"Unknown algorithm type: {algorithm_type}"
    raise ValueError(msg)


__all__ = [
    "ExhaustiveSelector",
    "GreedySelector",
    "create_selector",
]
