#!/usr/bin/env python3
"""
keyrecipe CLI - Keystroke recipe tooling

Main entrypoint for the keyrecipe command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import resolve
from keyrecipe.logging_config import setup_logging

app = typer.Typer(
    name="keyrecipe",
    help="Replayable keystroke recipes for multiple cursors",
    add_completion=False,
)

console = Console()

app.command(name="resolve")(resolve.resolve_command)


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from keyrecipe import __version__ as engine_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]keyrecipe CLI[/bold]", f"v{__version__}")
    table.add_row("Engine", f"v{engine_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    setup_logging()
    app()


if __name__ == "__main__":
    main()
