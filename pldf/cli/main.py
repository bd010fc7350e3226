import sys
from pathlib import Path

import typer
from loguru import logger

from pldf.cli.commands import build, hint, release


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure loguru logging."""
    logger.remove()

    if log_file is not None:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
            rotation="10 MB",
            encoding="utf-8",
        )

    if verbose:
        logger.add(
            sys.stderr,
            format="{time:HH:mm:ss} | {level: <8} | {message}",
            level="DEBUG",
        )


app = typer.Typer(
    name="pldf",
    help="PLDF - hints and release packaging for the PLDF agent framework",
    no_args_is_help=True,
)

# Register commands
app.command(name="build")(build.build)
app.command(name="release")(release.release)

# Hint subcommand group
hint_app = typer.Typer(help="Hint lookup commands")
hint_app.command(name="get")(hint.get_hint)
hint_app.command(name="list")(hint.list_hints)
app.add_typer(hint_app, name="hint")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output", is_eager=True),
    log_file: Path | None = typer.Option(
        None, "--log-file", envvar="PLDF_LOG_FILE", help="Write a debug log to this file"
    ),
) -> None:
    """PLDF - hints and release packaging for the PLDF agent framework."""
    setup_logging(verbose=verbose, log_file=log_file)


if __name__ == "__main__":
    app()
