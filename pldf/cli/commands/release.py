import asyncio
from pathlib import Path

import typer
from rich.console import Console

from pldf.application.use_cases.build_release import BuildRelease
from pldf.cli.theme import theme
from pldf.domain.value_objects.release import (
    Agent,
    ReleaseVersion,
    ScriptVariant,
    parse_selection,
)
from pldf.infrastructure.packaging.release_packager import FsReleasePackager

console = Console()


def release(
    version: str = typer.Argument(..., help="Release version with v prefix, e.g. v1.2.3"),
    agents: str | None = typer.Option(
        None, "--agents", envvar="AGENTS", help="Subset of agents (comma or space separated)"
    ),
    scripts: str | None = typer.Option(
        None, "--scripts", envvar="SCRIPTS", help="Subset of script variants: sh ps"
    ),
    root: Path = typer.Option(Path("."), "--root", help="PLDF source tree"),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", help="Archive directory (default: <root>/.genreleases)"
    ),
) -> None:
    """Build per-agent release archives."""
    try:
        release_version = ReleaseVersion.parse(version)
        agent_list = parse_selection(agents, Agent)
        script_list = parse_selection(scripts, ScriptVariant)
    except ValueError as e:
        console.print(f"[{theme.ERROR_BOLD}]Error:[/] {e}")
        raise typer.Exit(1) from None

    console.print(f"Agents: {' '.join(a.value for a in agent_list)}")
    console.print(f"Scripts: {' '.join(s.value for s in script_list)}")

    packager = FsReleasePackager(root.resolve(), output_dir=output_dir)
    archives = asyncio.run(
        BuildRelease(packager).execute(release_version, agent_list, script_list)
    )

    console.print(f"\n[{theme.SUCCESS_BOLD}]Archives in {packager.output_dir}:[/]")
    for archive in archives:
        console.print(f"  {archive.name}")
