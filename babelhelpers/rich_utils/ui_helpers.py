import os
import sys

from rich.console import Console


def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stdout.isatty()
    )


def get_console(color: bool = True) -> Console:
    """Detect environment and create console."""
    if not color or is_ci_environment():
        # CI/automated environment - no colors, no interactive elements
        return Console(force_terminal=False, no_color=True, soft_wrap=True)

    # Interactive terminal - full Rich capabilities
    return Console(soft_wrap=True)
