"""
Inspection commands: list, find and has.

Thin wrappers around PipelineService that read a pipeline file and report
on its plugins.
"""
import json

import typer
from rich.markup import escape
from rich.table import Table

from babelhelpers.cli.commands._common import console_for, service_for
from babelhelpers.utils.exceptions import BabelHelpersError


def list_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Pipeline file (JSON or YAML)"),
):
    """List the plugins in a pipeline file with their resolved names."""
    console = console_for(ctx)
    try:
        rows = service_for(ctx).list_plugins(path)
    except BabelHelpersError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    table = Table(title=escape(path))
    table.add_column("#", justify="right")
    table.add_column("Entry")
    table.add_column("Resolved name", style="green")
    for row in rows:
        table.add_row(
            str(row.index),
            escape(json.dumps(row.entry, default=str)),
            escape(row.resolved_name) if row.resolved_name else "[dim]<unresolvable>[/dim]",
        )
    console.print(table)


def find_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Pipeline file (JSON or YAML)"),
    name: str = typer.Argument(..., help="Canonical plugin name"),
):
    """Print the configuration entry for a plugin."""
    console = console_for(ctx)
    try:
        entry = service_for(ctx).find(path, name)
    except BabelHelpersError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    if entry is None:
        console.print(f"Plugin {name} not found", markup=False)
        raise typer.Exit(code=1)

    console.print(json.dumps(entry, default=str), markup=False, highlight=False)


def has_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Pipeline file (JSON or YAML)"),
    name: str = typer.Argument(..., help="Canonical plugin name"),
):
    """Exit with status 0 when a plugin is present, 1 otherwise."""
    try:
        present = service_for(ctx).has(path, name)
    except BabelHelpersError as e:
        console_for(ctx).print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    if not present:
        raise typer.Exit(code=1)
