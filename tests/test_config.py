"""Tests for configuration loading."""

from pathlib import Path

import pytest

from jobpick import context
from jobpick.config import (
    DEFAULT_BENCHMARK_SIZES,
    BenchmarkConfig,
    UnifiedConfig,
    discover_config,
    load_unified_config,
)
from jobpick.selection import DEFAULT_EXHAUSTIVE_MAX_TASKS, AlgorithmType, SelectionConfig


def test_defaults() -> None:
    """Defaults: greedy, exhaustive gated at 25, the classic benchmark sizes."""
    config = UnifiedConfig()

    assert config.selection.algorithm == AlgorithmType.GREEDY
    assert config.selection.exhaustive.max_tasks == DEFAULT_EXHAUSTIVE_MAX_TASKS == 25
    assert config.benchmark.sizes == DEFAULT_BENCHMARK_SIZES
    assert config.benchmark.seed is None


def test_load_full_config(tmp_path: Path) -> None:
    """All sections are read from YAML."""
    path = tmp_path / "jobpick_config.yaml"
    path.write_text(
        """
selection:
  algorithm: exhaustive
  exhaustive:
    max_tasks: 18
benchmark:
  sizes: [4, 8]
  max_time: 50
  max_duration: 3
  seed: 7
"""
    )

    config = load_unified_config(path)

    assert config.selection.algorithm == AlgorithmType.EXHAUSTIVE
    assert config.selection.exhaustive.max_tasks == 18
    assert config.benchmark == BenchmarkConfig(sizes=[4, 8], max_time=50, max_duration=3, seed=7)


def test_null_limit_disables_gate(tmp_path: Path) -> None:
    """max_tasks: null turns the exhaustive size gate off."""
    path = tmp_path / "c.yaml"
    path.write_text("selection:\n  exhaustive:\n    max_tasks: null\n")

    assert load_unified_config(path).selection.exhaustive.max_tasks is None


def test_partial_and_empty_config(tmp_path: Path) -> None:
    """Omitted sections keep their defaults."""
    path = tmp_path / "c.yaml"
    path.write_text("benchmark:\n  seed: 3\n")
    assert load_unified_config(path).selection == SelectionConfig()

    path.write_text("")
    assert load_unified_config(path) == UnifiedConfig()


def test_missing_file(tmp_path: Path) -> None:
    """A missing config file is an error."""
    with pytest.raises(FileNotFoundError):
        load_unified_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "unknown_section: {}\n",
        "selection:\n  algorithm: simulated_annealing\n",
        "selection:\n  exhaustive:\n    max_tasks: -1\n",
        "benchmark:\n  sizes: [5, -2]\n",
        "benchmark:\n  max_time: 0\n",
    ],
    ids=["list-root", "unknown-section", "bad-algorithm", "negative-limit", "negative-size", "zero-time"],
)
def test_invalid_config(tmp_path: Path, text: str) -> None:
    """Invalid configs raise ValueError (pydantic errors included)."""
    path = tmp_path / "c.yaml"
    path.write_text(text)

    with pytest.raises(ValueError):
        load_unified_config(path)


def test_discover_order(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Explicit path beats the CLI context, which beats the working directory."""
    monkeypatch.chdir(tmp_path)
    assert discover_config() == UnifiedConfig()

    (tmp_path / "jobpick_config.yaml").write_text("benchmark:\n  seed: 1\n")
    assert discover_config().benchmark.seed == 1

    ctx_path = tmp_path / "ctx.yaml"
    ctx_path.write_text("benchmark:\n  seed: 2\n")
    context.set_config_path(ctx_path)
    assert discover_config().benchmark.seed == 2

    explicit = tmp_path / "explicit.yaml"
    explicit.write_text("benchmark:\n  seed: 3\n")
    assert discover_config(explicit).benchmark.seed == 3
