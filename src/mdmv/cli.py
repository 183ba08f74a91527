"""Command-line interface for mdmv."""

import sys
import click
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mdmv import __version__
from mdmv.document import MoveResult
from mdmv.engine import mv
from mdmv.errors import MdmvError
from mdmv.filesystem import Filesystem

console = Console(stderr=True)

# Color map for different levels
LEVEL_COLORS = {
    "DEBUG": "dim",
    "INFO": "blue",
    "SUCCESS": "green",
    "WARNING": "yellow",
    "ERROR": "red bold",
}


def custom_rich_sink(message):
    """Custom loguru sink with color-coded levels."""
    record = message.record
    level = record["level"].name
    time = record["time"].strftime("%H:%M:%S")
    msg = escape(record["message"])

    color = LEVEL_COLORS.get(level, "white")
    formatted = f"[green]{time}[/green] | [{color}]{level: <8}[/{color}] | {msg}"
    console.print(formatted, highlight=False)


def configure_logging(verbose: bool):
    """Send log records to stderr: warnings and errors, or everything if verbose."""
    logger.remove()  # Remove default handler
    logger.add(custom_rich_sink, level="DEBUG" if verbose else "WARNING")


def print_summary(result: MoveResult):
    """Show the moves performed by a batch."""
    table = Table(title="Moved files")
    table.add_column("Source", style="cyan")
    table.add_column("Destination", style="green")

    for src, dest in result.moved:
        table.add_row(escape(str(src)), escape(str(dest)))
    for src, dest in result.attachments:
        table.add_row(f"[dim]{escape(str(src))}[/dim]", f"[dim]{escape(str(dest))}[/dim]")

    console.print(table)
    if result.removed_dirs:
        console.print(f"[dim]Removed {len(result.removed_dirs)} empty directories[/dim]")


@click.command()
@click.argument('src')
@click.argument('dest')
@click.option('--verbose', '-v', is_flag=True, envvar='MDMV_VERBOSE', help='Enable debug logging')
@click.version_option(__version__, prog_name='mdmv')
def cli(src, dest, verbose):
    """
    Move markdown files together with the images they reference.

    SRC is a markdown file, a directory or a glob pattern. DEST is a file
    path, an existing directory, or a template where %title% is replaced
    with the first heading of each file.

    \b
    Examples:
        mdmv note.md archive/note.md
        mdmv drafts published
        mdmv 'inbox/*.md' 'notes/%title%/index.md'
    """
    configure_logging(verbose)
    logger.debug("Verbose logging enabled")

    try:
        result = mv(Filesystem(), src, dest)
    except (MdmvError, OSError) as e:
        logger.error("{}", e)
        sys.exit(1)

    if verbose:
        print_summary(result)


if __name__ == '__main__':
    cli()
