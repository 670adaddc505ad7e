"""Command-line interface for jobpick."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from . import context
from .bench import run_benchmark
from .compare import cross_check
from .config import UnifiedConfig, discover_config
from .exceptions import JobpickError
from .generator import generate_random_tasks
from .loader import load_task_file, write_task_file
from .logger import setup_logger
from .report import format_benchmark, format_comparison, format_result
from .selection import AlgorithmType, ExhaustiveConfig, create_selector, run_timed

app = typer.Typer(
    name="jobpick",
    help="Pick the largest set of non-overlapping delivery jobs for a driver",
    add_completion=False,
)

MaxTasksOption = Annotated[
    int | None,
    typer.Option(
        "--max-tasks",
        help="Refuse exhaustive search above this many tasks (overrides config)",
        min=0,
    ),
]


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=run summaries, 2=per-task decisions, 3=exhaustive search trace",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: jobpick_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for jobpick commands."""
    setup_logger(verbose)
    context.set_config_path(config)


def _load_config() -> UnifiedConfig:
    try:
        return discover_config()
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


def _exhaustive_config(config: UnifiedConfig, max_tasks: int | None) -> ExhaustiveConfig:
    if max_tasks is None:
        return config.selection.exhaustive
    return ExhaustiveConfig(max_tasks=max_tasks)


@app.command()
def select(
    file: Annotated[Path, typer.Argument(help="Path to the task file (YAML)")],
    *,
    algorithm: Annotated[
        AlgorithmType | None,
        typer.Option("--algorithm", "-a", help="Selector to run (default from config: greedy)"),
    ] = None,
    show_tasks: Annotated[
        bool, typer.Option("--show-tasks", help="List the selected tasks (up to 10)")
    ] = False,
    max_tasks: MaxTasksOption = None,
) -> None:
    """Select the largest set of non-overlapping tasks from a task file."""
    config = _load_config()
    selection_config = config.selection.model_copy(
        update={"exhaustive": _exhaustive_config(config, max_tasks)}
    )
    algorithm_type = algorithm or selection_config.algorithm

    try:
        tasks = load_task_file(file)
        result = run_timed(create_selector(algorithm_type, selection_config), tasks)
    except JobpickError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(format_result(result, show_tasks=show_tasks))


@app.command()
def compare(
    file: Annotated[Path, typer.Argument(help="Path to the task file (YAML)")],
    *,
    show_tasks: Annotated[
        bool, typer.Option("--show-tasks", help="List the selected tasks (up to 10)")
    ] = False,
    max_tasks: MaxTasksOption = None,
) -> None:
    """Run both selectors on a task file and check they agree.

    Exits with status 1 if the selection sizes differ or either selection
    contains overlapping tasks.
    """
    config = _load_config()
    limit = _exhaustive_config(config, max_tasks).max_tasks

    try:
        tasks = load_task_file(file)
        report = cross_check(tasks, max_tasks=limit)
    except JobpickError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(format_result(report.first, show_tasks=show_tasks))
    typer.echo(format_result(report.second, show_tasks=show_tasks))
    typer.echo(format_comparison(report))
    if not report.ok:
        raise typer.Exit(1)


@app.command()
def generate(
    count: Annotated[int, typer.Argument(help="Number of tasks to generate", min=0)],
    *,
    seed: Annotated[int | None, typer.Option("--seed", help="Random seed")] = None,
    max_time: Annotated[
        int, typer.Option("--max-time", help="Starts are drawn from [0, max-time)", min=1)
    ] = 100,
    max_duration: Annotated[
        int, typer.Option("--max-duration", help="Longest task duration", min=1)
    ] = 10,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Generate a random task file."""
    tasks = generate_random_tasks(count, max_time=max_time, max_duration=max_duration, seed=seed)

    if output:
        write_task_file(output, tasks)
        typer.echo(f"Wrote {len(tasks)} tasks to {output}")
    else:
        for task in tasks:
            typer.echo(f"- [{task.start}, {task.end}]")


def _parse_sizes(sizes: str) -> list[int]:
    try:
        parsed = [int(part) for part in sizes.split(",") if part.strip()]
    except ValueError:
        typer.echo(f"Error: Invalid --sizes '{sizes}'. Expected comma-separated integers.", err=True)
        raise typer.Exit(1) from None
    if any(size < 0 for size in parsed):
        typer.echo("Error: --sizes must be non-negative", err=True)
        raise typer.Exit(1)
    return parsed


@app.command()
def bench(
    *,
    sizes: Annotated[
        str | None,
        typer.Option("--sizes", help="Comma-separated input sizes (default from config)"),
    ] = None,
    seed: Annotated[int | None, typer.Option("--seed", help="Random seed")] = None,
    max_tasks: MaxTasksOption = None,
) -> None:
    """Compare selector run times across input sizes on random task sets."""
    config = _load_config()
    bench_config = config.benchmark
    if seed is not None:
        bench_config = bench_config.model_copy(update={"seed": seed})

    size_list = _parse_sizes(sizes) if sizes is not None else None
    try:
        rows = run_benchmark(
            size_list,
            config=bench_config,
            exhaustive=_exhaustive_config(config, max_tasks),
        )
    except JobpickError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    typer.echo(format_benchmark(rows))
    if any(row.counts_match is False for row in rows):
        typer.echo("Error: selectors disagreed on at least one size", err=True)
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
