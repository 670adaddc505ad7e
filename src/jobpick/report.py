"""Plain-text rendering of selection results, comparisons and benchmarks."""

from __future__ import annotations

from collections.abc import Sequence

from .bench import BenchmarkRow
from .compare import ComparisonReport
from .selection import SelectionResult

RULE_WIDTH = 70


def _ms(seconds: float) -> str:
    return f"{seconds * 1000:.4f} ms"


def format_result(result: SelectionResult, *, show_tasks: bool = False, max_listed: int = 10) -> str:
    """Render one selector run.

    Selected tasks are listed only when show_tasks is set and there are at
    most max_listed of them.
    """
    complexity = result.metadata.get("complexity", {})
    lines = [
        "-" * RULE_WIDTH,
        f"Algorithm          : {result.display_name}",
        "-" * RULE_WIDTH,
        f"Selected tasks     : {result.count}",
        f"Elapsed            : {_ms(result.elapsed)}",
        f"Comparisons        : {result.comparisons:,}",
    ]
    if result.max_depth is not None:
        lines.append(f"Max depth          : {result.max_depth}")
    if complexity:
        lines.append(f"Time complexity    : {complexity.get('time', '?')}")
        lines.append(f"Space complexity   : {complexity.get('space', '?')}")

    if show_tasks and result.count <= max_listed:
        lines.append("")
        lines.append("Selected:")
        for index, task in enumerate(result.selected, start=1):
            lines.append(f"  {index}. {task}")
    lines.append("-" * RULE_WIDTH)
    return "\n".join(lines)


def format_comparison(report: ComparisonReport) -> str:
    """Render a side-by-side comparison of two runs."""
    first, second = report.first, report.second
    width = max(len(first.display_name), len(second.display_name))
    mark = "OK" if report.same_count else "MISMATCH"

    lines = [
        "=" * RULE_WIDTH,
        "Comparison",
        "=" * RULE_WIDTH,
        "Correctness:",
        f"  {first.display_name:<{width}} : {first.count} tasks"
        f"{'' if report.first_valid else ' (INVALID: overlapping tasks)'}",
        f"  {second.display_name:<{width}} : {second.count} tasks"
        f"{'' if report.second_valid else ' (INVALID: overlapping tasks)'}",
        f"  Same number of tasks selected: {mark}",
        "",
        "Performance:",
        f"  {first.display_name:<{width}} : {_ms(first.elapsed)}",
        f"  {second.display_name:<{width}} : {_ms(second.elapsed)}",
    ]
    if report.faster is not None and report.speedup is not None:
        faster = first if report.faster == first.algorithm else second
        lines.append(f"  {faster.display_name} is {report.speedup:.2f}x faster")
    lines += [
        "",
        "Comparisons:",
        f"  {first.display_name:<{width}} : {first.comparisons:,}",
        f"  {second.display_name:<{width}} : {second.comparisons:,}",
        "=" * RULE_WIDTH,
    ]
    return "\n".join(lines)


def format_benchmark(rows: Sequence[BenchmarkRow]) -> str:
    """Render benchmark rows as a fixed-width table."""
    header = f"| {'Size (n)':<10} | {'Exhaustive (ms)':>16} | {'Greedy (ms)':>12} | {'Speedup':>10} | {'Count':>7} |"
    rule = "-" * len(header)
    lines = [rule, header, rule]
    for row in rows:
        brute = f"{row.exhaustive_elapsed * 1000:.4f}" if row.exhaustive_elapsed is not None else "N/A"
        speedup = f"{row.speedup:.2f}x" if row.speedup is not None else "N/A"
        count = str(row.greedy_count)
        if row.counts_match is False:
            count += "!"
        lines.append(
            f"| {row.size:<10} | {brute:>16} | {row.greedy_elapsed * 1000:>12.4f} | {speedup:>10} | {count:>7} |"
        )
    lines.append(rule)
    return "\n".join(lines)
