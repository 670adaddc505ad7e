"""Reading and writing task files (YAML)."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from .exceptions import ParseError
from .models import TaskSet, build_task_set
from .schemas import TaskFileSchema


def parse_task_data(data: Any) -> TaskSet:
    """Validate already-loaded YAML data and build a TaskSet from it.

    Raises:
        ParseError: If the data does not have the task file shape
        InvalidIntervalError: If a task is not a valid interval
    """
    if data is None:
        return TaskSet()
    if not isinstance(data, (dict, list)):
        raise ParseError("Task file must contain a list of tasks or a mapping with 'tasks'")
    try:
        schema = TaskFileSchema.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(f"Invalid task file: {e}") from e

    return build_task_set(entry.model_dump(exclude_none=True) for entry in schema.tasks)


def load_task_file(path: Path | str) -> TaskSet:
    """Load a task file.

    Accepted shapes::

        tasks:
          - [1, 3]
          - {start: 2, end: 5, id: parcel-17}

    or the same list at the root.

    Raises:
        ParseError: If the file is missing, is not YAML, or has the wrong shape
        InvalidIntervalError: If a task is not a valid interval
    """
    path = Path(path)
    if not path.exists():
        raise ParseError(f"File not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse YAML: {e}") from e

    return parse_task_data(data)


def write_task_file(path: Path | str, task_set: TaskSet, *, name: str | None = None) -> None:
    """Write a task set as YAML, one ``[start, end]`` pair per line.

    Tasks with an id are written in mapping form so the id survives a
    round trip.
    """
    yaml_rt = YAML()
    yaml_rt.indent(mapping=2, sequence=4, offset=2)

    tasks = CommentedSeq()
    for task in task_set:
        if task.id is not None:
            entry: Any = CommentedMap([("start", task.start), ("end", task.end), ("id", task.id)])
        else:
            entry = CommentedSeq([task.start, task.end])
        entry.fa.set_flow_style()
        tasks.append(entry)

    document = CommentedMap()
    if name is not None:
        document["name"] = name
    document["tasks"] = tasks

    with Path(path).open("w", encoding="utf-8") as f:
        yaml_rt.dump(document, f)  # type: ignore[no-untyped-call]
