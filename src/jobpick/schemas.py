"""Pydantic schemas for task file validation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TaskEntrySchema(BaseModel):
    """One task in a task file: ``[start, end]`` or ``{start, end, id}``.

    Endpoint values are checked later by build_task_set, which reports the
    offending task's position.
    """

    model_config = ConfigDict(extra="forbid")

    start: Any
    end: Any
    id: str | None = None

    @model_validator(mode="before")
    @classmethod
    def from_pair(cls, value: Any) -> Any:
        """Accept a two-element list as shorthand for start/end."""
        if isinstance(value, (list, tuple)):
            if len(value) != 2:  # noqa: PLR2004
                raise ValueError(f"task pair must have exactly 2 elements, got {len(value)}")
            return {"start": value[0], "end": value[1]}
        return value


class TaskFileSchema(BaseModel):
    """Schema for a task file's root mapping."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    tasks: list[TaskEntrySchema] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def from_list(cls, value: Any) -> Any:
        """Accept a bare list of tasks at the root."""
        if isinstance(value, list):
            return {"tasks": value}
        return value
