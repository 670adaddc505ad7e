"""Process-wide CLI state (the --config option)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class _Context:
    config_path: Path | None = None


_context = _Context()


def get_config_path() -> Path | None:
    """Get the config path given on the command line, if any."""
    return _context.config_path


def set_config_path(path: Path | None) -> None:
    """Set the config path given on the command line."""
    _context.config_path = path


def reset() -> None:
    """Forget any CLI-provided state. Used by tests."""
    _context.config_path = None
