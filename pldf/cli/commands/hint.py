from pathlib import Path

import typer
from loguru import logger
from rich.console import Console

from pldf.application.dto.hint_query import HintQuery
from pldf.application.dto.hint_result import HintResult
from pldf.application.use_cases.get_hint import GetHint
from pldf.application.use_cases.list_hints import ListHints
from pldf.cli.formatters.hint_formatter import (
    format_hint,
    format_hint_error,
    format_hint_json,
    format_hint_table,
)
from pldf.cli.theme import theme
from pldf.domain.errors import HintLookupError
from pldf.infrastructure.persistence.json_hint_source import JsonHintSource
from pldf.infrastructure.persistence.paths import get_default_hints_dir

console = Console()
err_console = Console(stderr=True)

HINTS_DIR_ENVVAR = "PLDF_HINTS_DIR"


def get_hint(
    stage: str = typer.Argument(
        ..., help="Stage: concept, design, tech, architecture, plan, implement, review"
    ),
    category: str | None = typer.Option(None, "--category", "-c", help="Error category"),
    error_key: str | None = typer.Option(None, "--error-key", "-k", help="Exact error key"),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON record"),
    hints_dir: Path | None = typer.Option(
        None, "--hints-dir", envvar=HINTS_DIR_ENVVAR, help="Directory with hints.json"
    ),
) -> None:
    """Show the hint for a stage, optionally narrowed by category or error key."""
    _get_hint(stage, category, error_key, as_json, hints_dir)


def _get_hint(
    stage: str,
    category: str | None,
    error_key: str | None,
    as_json: bool,
    hints_dir: Path | None,
) -> None:
    source = JsonHintSource(hints_dir or get_default_hints_dir())
    query = HintQuery(stage=stage, category=category, error_key=error_key)

    try:
        resolved = GetHint(source).execute(query)
    except HintLookupError as e:
        logger.warning(f"Hint lookup failed: {e}")
        if as_json:
            typer.echo(format_hint_json(HintResult.from_error(e)))
        else:
            format_hint_error(err_console, f"Error: {e}")
        raise typer.Exit(1) from None

    if as_json:
        typer.echo(format_hint_json(HintResult.from_resolved(resolved)))
    else:
        format_hint(console, resolved)


def list_hints(
    stage: str | None = typer.Option(None, "--stage", "-s", help="Only this stage"),
    hints_dir: Path | None = typer.Option(
        None, "--hints-dir", envvar=HINTS_DIR_ENVVAR, help="Directory with hints.json"
    ),
) -> None:
    """List available validation hints."""
    source = JsonHintSource(hints_dir or get_default_hints_dir())

    try:
        summaries = ListHints(source).execute(stage)
    except HintLookupError as e:
        format_hint_error(err_console, f"Error: {e}")
        raise typer.Exit(1) from None

    if not summaries:
        console.print(f"[{theme.DIM}]No hints found[/]")
        return

    format_hint_table(console, summaries)
