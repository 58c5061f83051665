"""
babelhelpers - helpers for programmatically editing Babel plugin configuration.

Plugins are located by their normalised name and inserted with optional
``before``/``after`` placement constraints.
"""
from typing import Any, Iterable, Optional

from .configuration import get_plugins_array
from .models import BabelPlugin, BabelPluginConfig, PlacementConstraints
from .names import find_package_name, normalize_plugin_name, resolve_plugin_name
from .placement import PlacementEngine
from .utils.exceptions import (
    BabelHelpersError,
    InvalidConfigurationTargetError,
    PlacementConflictError,
)

_engine = PlacementEngine()


def find_plugin(config: Any, plugin: str) -> Optional[BabelPluginConfig]:
    """
    Locate the existing configuration, if any, for a given plugin.

    Args:
        config: A list of plugin configuration, or an ``EmberApp``/``Addon``-like
            host whose configuration should be checked
        plugin: The name of the plugin to be located

    Returns:
        The matching plugin configuration entry, or ``None``
    """
    plugins = get_plugins_array(config)
    index = _engine.find_index(plugins, plugin)
    return plugins[index] if index is not None else None


def has_plugin(config: Any, plugin: str) -> bool:
    """Indicate whether the given plugin is already present in the target's configuration."""
    return find_plugin(config, plugin) is not None


def add_plugin(
    config: Any,
    plugin: BabelPluginConfig,
    before: Optional[Iterable[str]] = None,
    after: Optional[Iterable[str]] = None,
) -> int:
    """
    Add a plugin to the Babel configuration for the given target.

    Args:
        config: A list of plugin configuration, or an ``EmberApp``/``Addon``-like
            host for which the plugin should be set up
        plugin: Configuration for the Babel plugin to add
        before: Plugins that the given one must appear *before*
        after: Plugins that the given one must appear *after*

    Returns:
        The index at which the plugin was inserted

    Raises:
        PlacementConflictError: If the constraints cannot be satisfied
    """
    plugins = get_plugins_array(config)
    constraints = PlacementConstraints.from_names(before=before, after=after)
    return _engine.insert(plugins, plugin, constraints)


__all__ = [
    "find_plugin",
    "has_plugin",
    "add_plugin",
    "get_plugins_array",
    "resolve_plugin_name",
    "normalize_plugin_name",
    "find_package_name",
    "PlacementEngine",
    "PlacementConstraints",
    "BabelPlugin",
    "BabelPluginConfig",
    "BabelHelpersError",
    "PlacementConflictError",
    "InvalidConfigurationTargetError",
]
