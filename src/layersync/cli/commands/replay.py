"""Replay command."""

from __future__ import annotations

import argparse
from itertools import zip_longest
from pathlib import Path

from rich.console import Console
from rich.table import Table

from layersync.scenario import ScenarioResult, ScenarioRunner, ScenarioStep, load_scenario


def build_collections_table(result: ScenarioResult) -> Table:
    table = Table(title=f"{result.name}: store vs layer collection")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Store entry", style="cyan")
    table.add_column("Layer", style="green")
    table.add_column("", justify="center")
    for index, (entry_title, layer_title) in enumerate(zip_longest(result.store_titles, result.target_titles)):
        matches = entry_title == layer_title
        table.add_row(
            str(index),
            "-" if entry_title is None else entry_title,
            "-" if layer_title is None else layer_title,
            "[green]=[/green]" if matches else "[red]![/red]",
        )
    return table


def format_replay_summary(result: ScenarioResult) -> str:
    lines = [
        "",
        f"layersync - replay complete ({result.name})",
        "",
        f"  Steps:     {result.steps_run}",
        f"  Bound:     {'yes' if result.bound else 'no'}",
        f"  Entries:   {len(result.store_titles)}",
        f"  Layers:    {len(result.target_titles)}",
    ]
    if result.in_sync:
        lines.append("  Status:    in sync")
    else:
        lines.append(f"  Status:    {len(result.mismatches)} mismatch(es)")
        lines.extend(f"    - {message}" for message in result.mismatches)
    lines.append("")
    return "\n".join(lines)


def run_replay(args: argparse.Namespace, *, console: Console | None = None) -> ScenarioResult:
    console = console or Console()
    scenario = load_scenario(Path(args.scenario))

    def on_step(number: int, step: ScenarioStep) -> None:
        if args.verbose:
            console.print(f"[dim]step {number}[/dim] {step.action.value}")

    result = ScenarioRunner(scenario, check=args.check, on_step=on_step).run()
    console.print(build_collections_table(result))
    console.print(format_replay_summary(result), markup=False, highlight=False)
    return result


__all__ = ["build_collections_table", "format_replay_summary", "run_replay"]
