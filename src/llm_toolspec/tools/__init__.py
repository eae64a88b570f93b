from .schema_extraction import extract_schema, inline_refs
from .tool import Tool
from .tool_registry import ToolRegistry

__all__ = [
    "Tool",
    "ToolRegistry",
    "extract_schema",
    "inline_refs",
]
