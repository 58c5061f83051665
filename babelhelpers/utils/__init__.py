"""
Utility modules for babelhelpers.

This package contains shared utility classes used throughout
the babelhelpers codebase, including the exception hierarchy.
"""

from babelhelpers.utils.exceptions import (
    BabelHelpersError,
    InvalidConfigurationTargetError,
    PipelineFileError,
    PlacementConflictError,
)

__all__ = [
    "BabelHelpersError",
    "PlacementConflictError",
    "InvalidConfigurationTargetError",
    "PipelineFileError",
]
