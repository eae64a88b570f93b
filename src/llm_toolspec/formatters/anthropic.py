# src/llm_toolspec/formatters/anthropic.py

from typing import Any

from llm_toolspec.normalize.types import CanonicalTool, ToolChoice

from ._wire import to_anthropic_tool, to_anthropic_tool_choice
from .base import BaseToolFormatter


class AnthropicToolFormatter(BaseToolFormatter):
    """Anthropic tool formatter.

    Tools use the flat ``{name, description, input_schema}`` shape. The
    ``strict`` flag has no Anthropic counterpart and is dropped.
    """

    provider = "anthropic"

    def _serialize_tool(self, tool: CanonicalTool) -> Any:
        return to_anthropic_tool(tool)

    def _serialize_choice(self, choice: ToolChoice) -> Any:
        return to_anthropic_tool_choice(choice)
