"""
Main CLI application for babelhelpers.

Defines the Typer application structure and command routing,
keeping the CLI layer thin.
"""
from typing import Optional

import typer

from babelhelpers.cli.commands.add import add_command
from babelhelpers.cli.commands.inspect import find_command, has_command, list_command
from babelhelpers.cli.commands.normalize import normalize_command
from babelhelpers.core.config_manager import ConfigManager

app = typer.Typer(help="babelhelpers - inspect and edit Babel plugin pipelines")

app.command("normalize", help="Print the canonical form of Babel plugin names.")(normalize_command)
app.command("list", help="List the plugins in a pipeline file with their resolved names.")(list_command)
app.command("find", help="Print the configuration entry for a plugin.")(find_command)
app.command("has", help="Exit with status 0 when a plugin is present, 1 otherwise.")(has_command)
app.command("add", help="Insert a plugin into a pipeline file under placement constraints.")(add_command)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """babelhelpers - inspect and edit Babel plugin pipelines."""
    config_manager = ConfigManager()
    try:
        config = config_manager.discover_and_load_config(config_path)
    except FileNotFoundError as e:
        raise typer.BadParameter(str(e), param_hint="--config")

    config = config_manager.merge_config_and_args(config, verbose)
    config_manager.configure_logging(config)
    ctx.obj = config
