"""Configuration classes for task selection."""

from enum import Enum

from pydantic import BaseModel, Field

# Above roughly this many tasks the exhaustive search takes seconds to hours.
DEFAULT_EXHAUSTIVE_MAX_TASKS = 25


class AlgorithmType(str, Enum):
    """Available selection algorithms."""

    EXHAUSTIVE = "exhaustive"
    GREEDY = "greedy"


class ExhaustiveConfig(BaseModel):
    """Configuration for the exhaustive (include/exclude) selector."""

    # Refuse inputs larger than this; None disables the gate
    max_tasks: int | None = Field(default=DEFAULT_EXHAUSTIVE_MAX_TASKS, ge=0)


class SelectionConfig(BaseModel):
    """Configuration for algorithm selection."""

    algorithm: AlgorithmType = AlgorithmType.GREEDY
    exhaustive: ExhaustiveConfig = ExhaustiveConfig()
