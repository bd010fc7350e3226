import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pldf.application.dto.hint_result import HintResult
from pldf.application.use_cases.list_hints import HintSummary
from pldf.cli.theme import theme
from pldf.domain.entities.hint import ResolvedHint
from pldf.domain.value_objects.hint_type import HintType


def format_hint(console: Console, resolved: ResolvedHint) -> None:
    console.print(f"[{theme.HINT_HEADER}]Hint for stage '{resolved.stage.value}'[/]")
    if resolved.hint_type == HintType.GENERAL:
        console.print(f"[{theme.HINT_GENERAL}](general hint)[/]")
    if resolved.message:
        console.print(f"[{theme.HINT_MESSAGE}]Error: {escape(resolved.message)}[/]")
    console.print(f"[{theme.HINT_TEXT}]Hint: {escape(resolved.hint)}[/]")

    if resolved.resources:
        console.print(f"\n[{theme.HINT_RESOURCES}]Additional resources:[/]")
        for resource in resolved.resources:
            console.print(f"  - {escape(resource.title)}: {escape(resource.url)}", soft_wrap=True)


def format_hint_error(console: Console, message: str) -> None:
    console.print(f"[{theme.ERROR}]{escape(message)}[/]", soft_wrap=True)


def format_hint_json(result: HintResult) -> str:
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)


def format_hint_table(console: Console, summaries: list[HintSummary]) -> None:
    table = Table(title="Validation Hints")
    table.add_column("Stage", style=theme.TABLE_ID)
    table.add_column("Key")
    table.add_column("Message", style=theme.TABLE_SECONDARY)

    for s in summaries:
        table.add_row(s.stage, s.key, s.message or "-")

    console.print(table)
