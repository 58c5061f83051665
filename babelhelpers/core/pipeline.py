"""
Pipeline service for babelhelpers.

Applies the library helpers to plugin pipeline files on behalf of the CLI.
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from babelhelpers import add_plugin, find_plugin, get_plugins_array, has_plugin
from babelhelpers.models import BabelPluginConfig
from babelhelpers.names import normalize_plugin_name, resolve_plugin_name

from babelhelpers.core.file_manager import FileManager

logger = logging.getLogger(__name__)


@dataclass
class PluginRow:
    """One entry of a pipeline, as shown by ``list``."""
    index: int
    entry: BabelPluginConfig
    resolved_name: Optional[str]


@dataclass
class AddResult:
    """Outcome of adding a plugin to a pipeline file."""
    plugin_name: Optional[str]
    index: Optional[int]
    skipped: bool = False
    written: bool = False


def build_plugin_entry(plugin: str, options: Optional[str] = None, unique_id: Optional[str] = None) -> BabelPluginConfig:
    """Build a plugin configuration entry from command-line values.

    ``options`` is a JSON document. The bare plugin string is returned when
    neither options nor an id are given, otherwise a ``[plugin, options, id]``
    list (trimmed of a trailing missing id).
    """
    if options is None and unique_id is None:
        return plugin

    parsed_options = json.loads(options) if options is not None else {}
    entry: List[Any] = [plugin, parsed_options]
    if unique_id is not None:
        entry.append(unique_id)
    return entry


class PipelineService:
    """Concrete implementation of the pipeline editing service."""

    def __init__(self, config: Optional[dict] = None):
        self.config = config or {}
        indent = self.config.get("output", {}).get("indent", 2)
        self.file_manager = FileManager(indent=indent)

    def normalize_names(self, names: Iterable[str]) -> List[tuple]:
        return [(name, normalize_plugin_name(name)) for name in names]

    def list_plugins(self, path: str) -> List[PluginRow]:
        document = self.file_manager.load_document(path)
        plugins = get_plugins_array(document)
        return [
            PluginRow(index=index, entry=entry, resolved_name=resolve_plugin_name(entry))
            for index, entry in enumerate(plugins)
        ]

    def find(self, path: str, name: str) -> Optional[BabelPluginConfig]:
        document = self.file_manager.load_document(path)
        return find_plugin(document, name)

    def has(self, path: str, name: str) -> bool:
        document = self.file_manager.load_document(path)
        return has_plugin(document, name)

    def add(
        self,
        path: str,
        entry: BabelPluginConfig,
        before: Iterable[str] = (),
        after: Iterable[str] = (),
        skip_existing: Optional[bool] = None,
        dry_run: bool = False,
    ) -> AddResult:
        """Insert ``entry`` into the pipeline stored at ``path``.

        Raises:
            PlacementConflictError: If the constraints cannot be satisfied
            PipelineFileError: If the file cannot be read
        """
        if skip_existing is None:
            skip_existing = bool(self.config.get("placement", {}).get("skip_existing", False))

        document = self.file_manager.load_document(path)
        plugin_name = resolve_plugin_name(entry)

        if skip_existing and plugin_name is not None and has_plugin(document, plugin_name):
            logger.info(f"Plugin {plugin_name} already present in {path}; skipping")
            return AddResult(plugin_name=plugin_name, index=None, skipped=True)

        index = add_plugin(document, entry, before=before, after=after)

        if dry_run:
            return AddResult(plugin_name=plugin_name, index=index)

        self.file_manager.save_document(path, document)
        return AddResult(plugin_name=plugin_name, index=index, written=True)
