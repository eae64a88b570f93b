# src/llm_toolspec/formatters/openai.py

from typing import Any

from llm_toolspec.normalize.types import CanonicalTool, ToolChoice

from ._wire import to_openai_tool, to_openai_tool_choice
from .base import BaseToolFormatter


class OpenAIToolFormatter(BaseToolFormatter):
    """OpenAI tool formatter.

    Emits ``{"type": "function", "function": {...}}`` tools and the
    ``"auto" | "none" | "required"`` choice strings.
    """

    provider = "openai"

    def _serialize_tool(self, tool: CanonicalTool) -> Any:
        return to_openai_tool(tool)

    def _serialize_choice(self, choice: ToolChoice) -> Any:
        return to_openai_tool_choice(choice)
