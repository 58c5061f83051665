"""
File management for babelhelpers.

Reads and writes plugin pipeline documents. A document is either a plugin
list or a host mapping holding ``options.babel.plugins``; JSON and YAML are
supported, chosen by file extension.
"""
import json
import logging
import os
from typing import Any

import yaml

from babelhelpers.utils.exceptions import PipelineFileError

logger = logging.getLogger(__name__)

JSON_EXTENSIONS = (".json",)
YAML_EXTENSIONS = (".yaml", ".yml")


class FileManager:
    """Manages pipeline file loading and saving."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def _format_for(self, path: str) -> str:
        extension = os.path.splitext(path)[1].lower()
        if extension in JSON_EXTENSIONS:
            return "json"
        if extension in YAML_EXTENSIONS:
            return "yaml"
        raise PipelineFileError(f"Unsupported pipeline file extension '{extension}'", path=path)

    def load_document(self, path: str) -> Any:
        """Load a pipeline document; an empty file yields an empty plugin list."""
        file_format = self._format_for(path)
        if not os.path.exists(path):
            raise PipelineFileError("Pipeline file not found", path=path)

        try:
            with open(path, "r", encoding="utf-8") as f:
                if file_format == "json":
                    content = f.read()
                    document = json.loads(content) if content.strip() else None
                else:
                    document = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise PipelineFileError("Unable to parse pipeline file", path=path, original_exception=e)
        except (UnicodeDecodeError, OSError) as e:
            raise PipelineFileError("Unable to read pipeline file", path=path, original_exception=e)

        if document is None:
            return []
        if not isinstance(document, (list, dict)):
            raise PipelineFileError("Pipeline file must hold a plugin list or a mapping", path=path)
        return document

    def save_document(self, path: str, document: Any) -> None:
        file_format = self._format_for(path)
        try:
            with open(path, "w", encoding="utf-8") as f:
                if file_format == "json":
                    json.dump(document, f, indent=self.indent)
                    f.write("\n")
                else:
                    yaml.safe_dump(document, f, sort_keys=False)
        except OSError as e:
            raise PipelineFileError("Unable to write pipeline file", path=path, original_exception=e)
        logger.info(f"Wrote pipeline file {path}")
