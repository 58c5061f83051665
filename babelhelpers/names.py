"""Name normalisation for Babel plugins.

Follows Babel's plugin name-normalisation convention
(https://babeljs.io/docs/options#name-normalization). Babel does not expose
the implementation, so the rules here reproduce its observable behaviour.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional

from .models import BabelPluginConfig, ScopedName

MODULE_PREFIX = "module:"

_PATH_SEPARATOR_RE = re.compile(r"[\\/]")

# Scope and remainder of a scoped package name
_SCOPE_RE = re.compile(r"(@[^\\/]+)(?:[\\/](.*))?")

_BABEL_PLUGIN_WORD_RE = re.compile(r"\bbabel-plugin\b")

# The separator after ``node_modules`` is matched by lookahead so that
# consecutive ``node_modules`` segments are all found.
_NODE_MODULES_RE = re.compile(r"[\\/]node_modules(?=[\\/])")

# Package name (optionally scoped) at the start of a ``require``-style path
_PACKAGE_NAME_RE = re.compile(r"(@[^\\/]+[\\/])?[^\\/]*")


def is_path(name: str) -> bool:
    return _PATH_SEPARATOR_RE.search(name) is not None


def extract_scope(raw_name: str) -> ScopedName:
    """Split ``raw_name`` into its scope and the remainder.

    A leading ``@`` that does not introduce a scope (``@`` alone, ``@/x``)
    leaves the whole string unscoped.
    """
    if raw_name.startswith("@"):
        match = _SCOPE_RE.fullmatch(raw_name)
        if match:
            return ScopedName(scope=match.group(1), name=match.group(2) or "")
    return ScopedName(scope=None, name=raw_name)


def normalize_plugin_name(raw_name: str) -> str:
    """Normalise a plugin name to the package name Babel would load.

    Examples:
        ``foo`` -> ``babel-plugin-foo``
        ``@babel/foo`` -> ``@babel/plugin-foo``
        ``@scope/foo`` -> ``@scope/babel-plugin-foo``
        ``@scope`` -> ``@scope/babel-plugin``
        ``module:foo/bar`` -> ``foo/bar``
    """
    if raw_name.startswith(MODULE_PREFIX):
        return raw_name[len(MODULE_PREFIX):]

    scoped = extract_scope(raw_name)
    scope, name = scoped.scope, scoped.name

    # Order matters: each check assumes the previous ones failed.
    if is_path(name):
        return raw_name
    if scope is None and name.startswith("babel-plugin-"):
        return raw_name
    if scope == "@babel" and name.startswith("plugin-"):
        return raw_name
    if scope is not None and _BABEL_PLUGIN_WORD_RE.search(name):
        return raw_name

    if scope == "@babel":
        return f"@babel/plugin-{name}"

    if scope is not None and not name:
        return f"{scope}/babel-plugin"

    if scope is not None:
        return f"{scope}/babel-plugin-{name}"

    return f"babel-plugin-{name}"


def find_package_name(module_path: str) -> str:
    """Return the package that contains ``module_path``.

    Paths outside any ``node_modules`` directory are returned unchanged. When
    several ``node_modules`` segments are present the innermost one wins.

    >>> find_package_name("/app/node_modules/@scope/pkg/lib/index.js")
    '@scope/pkg'
    """
    matches = list(_NODE_MODULES_RE.finditer(module_path))
    if not matches:
        return module_path

    # Skip the separator that follows ``node_modules``
    package_path = module_path[matches[-1].end() + 1:]
    package_name = _PACKAGE_NAME_RE.match(package_path).group(0)

    # Windows scoped packages: ``@scope\pkg`` -> ``@scope/pkg``
    return package_name.replace("\\", "/")


def _inline_plugin_name(plugin: Any) -> Optional[str]:
    if isinstance(plugin, Mapping):
        name = plugin.get("name")
    else:
        name = getattr(plugin, "name", None)
    return name if isinstance(name, str) and name else None


def resolve_plugin_name(plugin_config: BabelPluginConfig) -> Optional[str]:
    """Determine the normalised name of the plugin a configuration entry refers to.

    Args:
        plugin_config: A plugin reference string, an inline plugin object, or a
            ``(plugin, options, unique_id)`` tuple/list wrapping one of these

    Returns:
        The canonical plugin name, or ``None`` when the entry carries no usable
        name (for example an anonymous inline implementation)
    """
    if isinstance(plugin_config, (list, tuple)):
        if not plugin_config:
            return None
        plugin = plugin_config[0]
    else:
        plugin = plugin_config

    if isinstance(plugin, str):
        if is_path(plugin):
            return find_package_name(plugin)
        return normalize_plugin_name(plugin)

    name = _inline_plugin_name(plugin)
    if name is not None:
        return normalize_plugin_name(name)

    return None
