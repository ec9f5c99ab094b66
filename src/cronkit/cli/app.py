# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import sys
from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any

import typer

from cronkit.core.constants import Action

app = typer.Typer(
    name="cronkit",
    help="Parse, validate, predict and generate 5-field cron expressions",
    no_args_is_help=True,
)


class OutputFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format"),
]


@app.callback()
def main(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Log level (defaults to CRONKIT_LOG_LEVEL)"),
    ] = None,
) -> None:
    """Configure logging before any command runs."""
    from cronkit.core.config import get_settings
    from cronkit.core.logging import setup_logging

    settings = get_settings()
    setup_logging(log_level or settings.log_level, settings.log_format)


def _failed(result: dict[str, Any]) -> bool:
    return result.get("success") is False or result.get("valid") is False


def _emit(action: Action, result: dict[str, Any], fmt: OutputFormat, expression: str = "") -> None:
    if fmt == OutputFormat.JSON:
        from cronkit.cli.formatters.json_fmt import format_json

        sys.stdout.write(format_json(result) + "\n")
    elif action == Action.VALIDATE:
        from cronkit.cli.formatters.console import format_validation_result

        format_validation_result(result, expression)
    elif not _failed(result):
        from cronkit.cli.formatters import console

        if action == Action.PARSE:
            console.format_parse_result(result)
        elif action == Action.NEXT:
            console.format_next_result(result)
        elif action == Action.GENERATE:
            console.format_generate_result(result)

    if _failed(result):
        if fmt == OutputFormat.CONSOLE:
            typer.echo(f"Error: {result['error']}", err=True)
        raise typer.Exit(1)


def _run(action: Action, **kwargs: Any) -> dict[str, Any]:
    from cronkit.tool import CronTool

    return CronTool().execute(action=action.value, **kwargs)


@app.command(name="parse")
def parse_cmd(
    expression: Annotated[str, typer.Argument(help="Cron expression, quoted (e.g. '0 9 * * 1-5')")],
    fmt: FormatOption = OutputFormat.CONSOLE,
) -> None:
    """Explain a cron expression and list the values each field matches."""
    _emit(Action.PARSE, _run(Action.PARSE, expression=expression), fmt)


@app.command(name="validate")
def validate_cmd(
    expression: Annotated[str, typer.Argument(help="Cron expression, quoted")],
    fmt: FormatOption = OutputFormat.CONSOLE,
) -> None:
    """Check whether a cron expression is valid."""
    _emit(Action.VALIDATE, _run(Action.VALIDATE, expression=expression), fmt, expression)


@app.command(name="next")
def next_cmd(
    expression: Annotated[str, typer.Argument(help="Cron expression, quoted")],
    count: Annotated[
        int | None,
        typer.Option("--count", "-n", help="Number of run times (default 5, max 20)"),
    ] = None,
    now: Annotated[
        str | None,
        typer.Option("--now", help="Reference instant in ISO-8601 (defaults to the local clock)"),
    ] = None,
    fmt: FormatOption = OutputFormat.CONSOLE,
) -> None:
    """List the next run times of a cron expression."""
    reference: datetime | None = None
    if now:
        try:
            reference = datetime.fromisoformat(now)
        except ValueError as exc:
            raise typer.BadParameter(f"not an ISO-8601 datetime: {now}", param_hint="--now") from exc

    _emit(Action.NEXT, _run(Action.NEXT, expression=expression, count=count, now=reference), fmt)


@app.command(name="generate")
def generate_cmd(
    description: Annotated[str, typer.Argument(help="Schedule description, e.g. 'weekdays at 9am'")],
    fmt: FormatOption = OutputFormat.CONSOLE,
) -> None:
    """Build a cron expression from a plain-English schedule description."""
    _emit(Action.GENERATE, _run(Action.GENERATE, description=description), fmt)


@app.command()
def version() -> None:
    """Show version information."""
    from cronkit import __version__

    typer.echo(f"cronkit v{__version__}")
