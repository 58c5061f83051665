"""
Ordered placement of Babel plugins.

Locates existing entries by canonical name and computes an insertion index
that honours "before" and "after" constraints.
"""
import logging
from typing import Any, Iterable, List, MutableSequence, Optional, Sequence

from .models import BabelPluginConfig, PlacementBounds, PlacementConstraints, indices_to_bounds
from .names import resolve_plugin_name
from .utils.exceptions import PlacementConflictError

logger = logging.getLogger(__name__)


class PlacementEngine:
    """Finds and inserts plugin entries in an ordered plugin list.

    The engine holds no state; the list passed to each call is owned by the
    caller and only ``insert`` mutates it.
    """

    def find_index(self, plugins: Sequence[BabelPluginConfig], name: str) -> Optional[int]:
        """Index of the first entry whose resolved name equals ``name``, or ``None``.

        ``name`` is compared as given; it is not normalised first.
        """
        for index, plugin in enumerate(plugins):
            if resolve_plugin_name(plugin) == name:
                return index
        return None

    def contains(self, plugins: Sequence[BabelPluginConfig], name: str) -> bool:
        return self.find_index(plugins, name) is not None

    def find_indices(self, plugins: Sequence[BabelPluginConfig], names: Iterable[str]) -> List[int]:
        """Indices of the named plugins that are present; empty and unknown names are skipped."""
        indices = []
        for name in names:
            if not name:
                continue
            index = self.find_index(plugins, name)
            if index is None:
                logger.debug(f"Placement constraint '{name}' not found in plugin list; ignoring")
                continue
            indices.append(index)
        return indices

    def compute_bounds(
        self,
        plugins: Sequence[BabelPluginConfig],
        constraints: PlacementConstraints,
    ) -> PlacementBounds:
        return indices_to_bounds(
            after_indices=self.find_indices(plugins, constraints.after),
            before_indices=self.find_indices(plugins, constraints.before),
        )

    def insert(
        self,
        plugins: MutableSequence[Any],
        plugin: BabelPluginConfig,
        constraints: Optional[PlacementConstraints] = None,
    ) -> int:
        """Insert ``plugin`` into ``plugins`` at a position satisfying ``constraints``.

        Existing entries with the same name are left alone; use ``contains``
        first to avoid duplicates.

        Args:
            plugins: The plugin list to modify in place
            plugin: The plugin configuration to insert
            constraints: Names the plugin must precede and follow

        Returns:
            The index at which the plugin was inserted

        Raises:
            PlacementConflictError: If every ``after`` plugin cannot be placed
                ahead of every ``before`` plugin
        """
        constraints = constraints or PlacementConstraints()
        bounds = self.compute_bounds(plugins, constraints)
        logger.debug(f"Placement bounds: earliest={bounds.earliest}, latest={bounds.latest}")

        if not bounds.is_satisfiable:
            raise PlacementConflictError(
                plugin_name=resolve_plugin_name(plugin),
                before=constraints.before,
                after=constraints.after,
                earliest=bounds.earliest,
                latest=bounds.latest,
            )

        target_index = bounds.target_index(len(plugins))
        plugins.insert(target_index, plugin)
        logger.debug(f"Inserted plugin {resolve_plugin_name(plugin)} at index {target_index}")
        return target_index
