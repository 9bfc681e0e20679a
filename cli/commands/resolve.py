"""
Resolve command: run the resolver over hand-entered command phases
"""

import json
import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from keyrecipe.core import CommandRecord, KeyRecipeError, Slot, finalize, key_description, parse_keys

console = Console()

_KEYS_HELP = "Keys as typed (d2w) or space separated (C-a 3 w)"


def resolve_command(
    pre: str = typer.Option("", "--pre", help=f"Pre-command keys. {_KEYS_HELP}"),
    post: str = typer.Option("", "--post", help="Post-command keys"),
    motion_pre: str = typer.Option("", "--motion-pre", help="Keys captured before the motion"),
    motion_post: str = typer.Option("", "--motion-post", help="Keys captured after the motion"),
    operator_pre: str = typer.Option("", "--operator-pre", help="Keys captured before the operator range"),
    operator_post: str = typer.Option("", "--operator-post", help="Keys captured after the operator range"),
    show_record: bool = typer.Option(False, "--show-record", "-s", help="Show the finalized record"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Resolve captured key phases into a replayable key recipe.

    Examples:
        keyrecipe resolve --pre 3w
        keyrecipe resolve --pre d --operator-pre t --operator-post t
        keyrecipe resolve --pre d --operator-pre 2w --operator-post 2w --json
    """
    phases = {
        Slot.KEYS_PRE: pre,
        Slot.KEYS_POST: post,
        Slot.KEYS_MOTION_PRE: motion_pre,
        Slot.KEYS_MOTION_POST: motion_post,
        Slot.KEYS_OPERATOR_PRE: operator_pre,
        Slot.KEYS_OPERATOR_POST: operator_post,
    }
    record = CommandRecord({slot: parse_keys(text) for slot, text in phases.items() if text})

    try:
        resolution = finalize(record)
    except KeyRecipeError as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if json_output:
        output = {
            "keys": list(resolution.keys),
            "count": resolution.count,
            "description": key_description(resolution.keys),
        }
        if show_record:
            output["record"] = record.to_dict()
        print(json.dumps(output, indent=2))
        return

    table = Table(title="Key Recipe")
    table.add_column("Field", style="green")
    table.add_column("Value", style="cyan")
    table.add_row("keys", key_description(resolution.keys) or "(none)")
    table.add_row("count", str(resolution.count))
    console.print(table)

    if show_record:
        console.print("\n[bold]Finalized Record:[/bold]")
        syntax = Syntax(json.dumps(record.to_dict(), indent=2), "json", theme="monokai")
        console.print(syntax)
