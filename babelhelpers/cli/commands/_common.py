"""Shared helpers for CLI commands."""
import typer

from babelhelpers.core.pipeline import PipelineService
from babelhelpers.rich_utils.ui_helpers import get_console


def service_for(ctx: typer.Context) -> PipelineService:
    return PipelineService(ctx.obj or {})


def console_for(ctx: typer.Context):
    config = ctx.obj or {}
    return get_console(color=config.get("output", {}).get("color", True))
