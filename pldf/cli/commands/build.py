import asyncio
from pathlib import Path

import typer
from rich.console import Console

from pldf.application.use_cases.build_workspace import BuildWorkspace
from pldf.cli.theme import theme
from pldf.domain.errors import PackagingError
from pldf.infrastructure.packaging.release_packager import FsReleasePackager

console = Console()


def build(
    root: Path = typer.Option(Path("."), "--root", help="PLDF source tree"),
) -> None:
    """Build build/.cursor (commands) and build/.pldf (everything else)."""
    packager = FsReleasePackager(root.resolve())

    try:
        build_dir = asyncio.run(BuildWorkspace(packager).execute())
    except PackagingError as e:
        console.print(f"[{theme.ERROR_BOLD}]Error:[/] {e}")
        raise typer.Exit(1) from None

    console.print(f"[{theme.SUCCESS_BOLD}]Build completed successfully![/]")
    console.print(f"  - {build_dir / '.cursor' / 'commands'} [{theme.DIM}]commands for Cursor[/]")
    console.print(f"  - {build_dir / '.pldf'} [{theme.DIM}]framework content[/]")
