"""
Access to the Babel plugin list held by a configuration target.

A target is either the plugin list itself or an ``EmberApp``/``Addon``-like
host whose plugins live at ``options.babel.plugins``. Hosts may be plain
mappings or objects with attributes, at every level of the path.
"""
import logging
from collections.abc import MutableMapping
from typing import Any, Callable, List

from .utils.exceptions import InvalidConfigurationTargetError

logger = logging.getLogger(__name__)


def _child(container: Any, key: str, default_factory: Callable[[], Any]) -> Any:
    """Read ``key`` from a mapping or an attribute host, attaching a default when absent."""
    if isinstance(container, MutableMapping):
        value = container.get(key)
        if value is None:
            value = default_factory()
            container[key] = value
        return value

    try:
        value = getattr(container, key, None)
        if value is None:
            value = default_factory()
            setattr(container, key, value)
    except (AttributeError, TypeError) as e:
        raise InvalidConfigurationTargetError(
            type(container).__name__,
            message=f"Unable to attach '{key}' to a {type(container).__name__}",
            original_exception=e,
        )
    return value


def get_plugins_array(target: Any) -> List[Any]:
    """Return the mutable plugin list for ``target``, attaching an empty one if absent.

    Each level of ``options.babel.plugins`` may be a mapping or an object
    with attributes. Repeated calls against the same target return the same
    list object, so changes made to it are visible to the host.

    Raises:
        InvalidConfigurationTargetError: If the host cannot hold the nested
            configuration, or stores its plugins in something other than a list
    """
    if isinstance(target, list):
        return target

    options = _child(target, "options", dict)
    babel = _child(options, "babel", dict)

    def attach_empty_list():
        logger.debug("No Babel plugins configured on target; attaching an empty list")
        return []

    plugins = _child(babel, "plugins", attach_empty_list)
    if not isinstance(plugins, list):
        raise InvalidConfigurationTargetError(type(plugins).__name__)

    return plugins
