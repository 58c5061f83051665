"""
Add command implementation.

Thin wrapper around PipelineService.add that parses the plugin entry and
placement constraints from the command line.
"""
import json
from typing import List, Optional

import typer
from rich.markup import escape

from babelhelpers.cli.commands._common import console_for, service_for
from babelhelpers.core.pipeline import build_plugin_entry
from babelhelpers.utils.exceptions import BabelHelpersError


def add_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Pipeline file (JSON or YAML)"),
    plugin: str = typer.Argument(..., help="Plugin reference (name, scoped name or path)"),
    options: Optional[str] = typer.Option(None, "--options", help="Plugin options as JSON"),
    unique_id: Optional[str] = typer.Option(None, "--id", help="Unique id for multiple instances of a plugin"),
    before: List[str] = typer.Option([], "--before", "-b", help="Plugin this one must precede (repeatable)"),
    after: List[str] = typer.Option([], "--after", "-a", help="Plugin this one must follow (repeatable)"),
    skip_existing: Optional[bool] = typer.Option(
        None, "--skip-existing/--allow-duplicates", help="Leave the file unchanged if the plugin is present"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report the insertion index without writing"),
):
    """Insert a plugin into a pipeline file under placement constraints."""
    console = console_for(ctx)

    try:
        entry = build_plugin_entry(plugin, options=options, unique_id=unique_id)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"Invalid JSON: {e}", param_hint="--options")

    try:
        result = service_for(ctx).add(
            path,
            entry,
            before=before,
            after=after,
            skip_existing=skip_existing,
            dry_run=dry_run,
        )
    except BabelHelpersError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    name = result.plugin_name or "<unresolvable>"
    if result.skipped:
        console.print(f"Plugin {name} already present; nothing to do", markup=False)
    elif result.written:
        console.print(f"Added {name} at index {result.index}", markup=False)
    else:
        console.print(f"Would add {name} at index {result.index}", markup=False)
