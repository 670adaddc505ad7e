"""Unified configuration loader (jobpick_config.yaml).

A single YAML file configures the selectors and the benchmark:

    selection:
      algorithm: greedy
      exhaustive:
        max_tasks: 20
    benchmark:
      sizes: [5, 10, 15, 20, 100]
      seed: 42
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from . import context
from .selection import SelectionConfig

DEFAULT_CONFIG_NAME = "jobpick_config.yaml"
DEFAULT_BENCHMARK_SIZES = [5, 10, 15, 20, 50, 100, 500, 1000, 5000]


class BenchmarkConfig(BaseModel):
    """Configuration for the scalability benchmark."""

    sizes: list[int] = Field(default_factory=lambda: list(DEFAULT_BENCHMARK_SIZES))
    max_time: int = Field(default=100, ge=1)  # Starts are drawn from [0, max_time)
    max_duration: int = Field(default=10, ge=1)
    seed: int | None = None  # None = fresh random batches on every run

    @field_validator("sizes")
    @classmethod
    def sizes_non_negative(cls, sizes: list[int]) -> list[int]:
        if any(size < 0 for size in sizes):
            raise ValueError("benchmark sizes must be non-negative")
        return sizes


class UnifiedConfig(BaseModel):
    """Top-level configuration."""

    selection: SelectionConfig = SelectionConfig()
    benchmark: BenchmarkConfig = BenchmarkConfig()


def load_unified_config(config_path: Path | str) -> UnifiedConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to jobpick_config.yaml

    Returns:
        UnifiedConfig with defaults for any section the file omits

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)

    if data is None:
        return UnifiedConfig()
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the root level")

    unknown = set(data) - set(UnifiedConfig.model_fields)
    if unknown:
        raise ValueError(f"Unknown config sections: {', '.join(sorted(unknown))}")

    return UnifiedConfig.model_validate(data)


def discover_config(config_path: Path | None = None) -> UnifiedConfig:
    """Find and load configuration.

    Search order:
    1. Explicit config_path argument
    2. Global context (set via CLI --config)
    3. Current directory / jobpick_config.yaml
    4. Built-in defaults
    """
    if config_path is not None:
        return load_unified_config(config_path)

    ctx_config = context.get_config_path()
    if ctx_config is not None:
        return load_unified_config(ctx_config)

    cwd_config = Path(DEFAULT_CONFIG_NAME)
    if cwd_config.exists():
        return load_unified_config(cwd_config)

    return UnifiedConfig()
