from .tool_catalog import ToolCatalog
from .tool_definition import ToolDefinition

__all__ = [
    "ToolCatalog",
    "ToolDefinition",
]
