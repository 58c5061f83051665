"""
CLI module for babelhelpers.

Provides the command-line interface as a thin layer over the pipeline service.
"""
from babelhelpers.cli.app import app as _app


# Export app function for pyproject.toml entry point
def app():
    """Entry point function for pyproject.toml scripts."""
    _app()


__all__ = ['app']
