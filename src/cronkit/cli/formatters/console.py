# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output formatter for cron results."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cronkit.core.constants import FIELD_LABELS, FIELD_ORDER

console = Console()


def _preview(values: list[int], limit: int = 12) -> str:
    shown = ", ".join(str(v) for v in values[:limit])
    if len(values) > limit:
        shown += f", ... ({len(values)} values)"
    return shown


def format_parse_result(result: dict[str, Any]) -> None:
    """Print a parse result: description banner plus a per-field table."""
    console.print()
    console.print(Panel(f"[bold]{result['description']}[/bold]", title=result["expression"]))

    table = Table(title="Fields")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Token", style="bold")
    table.add_column("Matches")

    for field in FIELD_ORDER:
        table.add_row(
            FIELD_LABELS[field],
            result["fields"][field.value],
            _preview(result["expanded"][field.value]),
        )
    console.print(table)


def format_validation_result(result: dict[str, Any], expression: str) -> None:
    if result["valid"]:
        console.print(f"[bold green]VALID[/bold green]  {expression}")
    else:
        console.print(f"[bold red]INVALID[/bold red]  {expression}")


def format_next_result(result: dict[str, Any]) -> None:
    table = Table(title=f"Next {result['count']} run(s) of {result['expression']}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Time", style="bold")

    for index, timestamp in enumerate(result["next_executions"], start=1):
        table.add_row(str(index), timestamp)
    console.print(table)


def format_generate_result(result: dict[str, Any]) -> None:
    info_table = Table(show_header=False, box=None, padding=(0, 2))
    info_table.add_column("key", style="dim")
    info_table.add_column("value")
    info_table.add_row("Description:", result["description"])
    info_table.add_row("Expression:", f"[bold cyan]{result['expression']}[/bold cyan]")
    info_table.add_row("Meaning:", result["explanation"])
    console.print(info_table)
