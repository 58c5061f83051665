"""
Exception types raised by babelhelpers.

Each exception includes:
- Clear error message
- Context about the plugin or file involved
- Suggested user action
"""

from typing import Optional, Sequence


class BabelHelpersError(Exception):
    """
    Base exception for all babelhelpers errors.

    Unresolvable plugin names are never reported through this hierarchy;
    they surface as ``None`` from the name helpers.
    """

    def __init__(
        self,
        message: str,
        suggested_action: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize BabelHelpersError.

        Args:
            message: Human-readable error message
            suggested_action: Suggested action for the user to resolve the issue
            original_exception: The original exception that was caught, if any
        """
        self.message = message
        self.suggested_action = suggested_action
        self.original_exception = original_exception

        error_parts = [message]

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class PlacementConflictError(BabelHelpersError):
    """
    Raised when before/after constraints cannot all be satisfied.

    This indicates:
    - Some plugin named in ``after`` already sits behind a plugin named in ``before``
    - The constraints must change, or the list must be reordered, before retrying
    """

    UNRESOLVABLE_NAME = "<unresolvable name>"

    def __init__(
        self,
        plugin_name: Optional[str],
        before: Sequence[str] = (),
        after: Sequence[str] = (),
        earliest: Optional[int] = None,
        latest: Optional[int] = None,
    ):
        """
        Initialize PlacementConflictError.

        Args:
            plugin_name: Canonical name of the plugin being placed, if known
            before: Names the plugin was asked to precede
            after: Names the plugin was asked to follow
            earliest: First index allowed by the ``after`` constraints
            latest: Last index allowed by the ``before`` constraints
        """
        self.plugin_name = plugin_name or self.UNRESOLVABLE_NAME
        self.before = tuple(before)
        self.after = tuple(after)
        self.earliest = earliest
        self.latest = latest

        super().__init__(
            message=f"Unable to satisfy placement constraints for Babel plugin {self.plugin_name}",
            suggested_action=(
                f"Plugins required after ({', '.join(self.after)}) come later than "
                f"plugins required before ({', '.join(self.before)}); "
                "relax the constraints or reorder the existing plugins"
            ),
        )


class InvalidConfigurationTargetError(BabelHelpersError):
    """Raised when a target cannot hold an editable ``options.babel.plugins`` list."""

    def __init__(
        self,
        found_type: str,
        message: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.found_type = found_type
        super().__init__(
            message=message or f"Babel plugins must be stored in a list, found {found_type}",
            suggested_action="Pass a plugin list, or a host whose options.babel.plugins is a list",
            original_exception=original_exception,
        )


class PipelineFileError(BabelHelpersError):
    """
    Raised when a plugin pipeline file cannot be read or written.

    This typically indicates:
    - The file does not exist
    - The extension is not .json, .yaml or .yml
    - The content is not valid JSON/YAML
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.path = path

        if path:
            message = f"{message}: {path}"

        super().__init__(
            message=message,
            suggested_action="Pass a JSON or YAML file holding a plugin list or options.babel.plugins",
            original_exception=original_exception,
        )


__all__ = [
    "BabelHelpersError",
    "PlacementConflictError",
    "InvalidConfigurationTargetError",
    "PipelineFileError",
]
