import logging
from pathlib import Path

import yaml

from llm_toolspec.normalize.types import FunctionDefinition

from .tool_definition import ToolDefinition

logger = logging.getLogger(__name__)


class ToolCatalog:
    """Function tool definitions loaded from a directory of YAML files.

    Each ``*.yaml`` file holds one definition. Files are loaded in name
    order, so the catalog order is stable across runs.
    """

    def __init__(self, directory: str) -> None:
        self._definitions: dict[str, ToolDefinition] = {}
        logger.info("Initializing ToolCatalog from directory: %s", directory)
        self._load_all(Path(directory))
        logger.info("Loaded %d tool definitions", len(self._definitions))

    def get(self, name: str) -> ToolDefinition:
        logger.debug("Getting tool definition: name=%s", name)
        try:
            return self._definitions[name]
        except KeyError:
            logger.error("Tool definition not found: name=%s", name)
            raise KeyError(f"Tool definition '{name}' not found")

    def function_definitions(self) -> list[FunctionDefinition]:
        """Definitions tagged for ``normalize_tool``, in catalog order."""
        return [
            FunctionDefinition(definition=definition.to_function_definition())
            for definition in self._definitions.values()
        ]

    def list(self) -> list[str]:
        return list(self._definitions.keys())

    def _load_all(self, directory: Path) -> None:
        for file_path in sorted(directory.glob("*.yaml")):
            definition = self._load_definition(file_path)
            if definition.name in self._definitions:
                raise ValueError(
                    f"Tool definition '{definition.name}' already registered"
                )
            self._definitions[definition.name] = definition
            logger.debug(
                "Loaded tool definition: %s from %s", definition.name, file_path
            )

    def _load_definition(self, file_path: Path) -> ToolDefinition:
        with open(file_path) as f:
            data = yaml.safe_load(f)
        return ToolDefinition(**data)
