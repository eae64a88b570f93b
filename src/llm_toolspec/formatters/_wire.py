# src/llm_toolspec/formatters/_wire.py

"""Internal module for converting canonical tools to provider wire formats.

This is infrastructure, not behavior. Pure data transformation.
"""

import copy
from typing import Any

from llm_toolspec.normalize.types import BuiltinTool, CanonicalTool, ToolChoice


def to_openai_tool(tool: CanonicalTool) -> Any:
    """Convert a canonical tool to OpenAI function calling format.

    Built-in tools are returned as the caller supplied them.
    """
    if isinstance(tool, BuiltinTool):
        return tool.raw

    descriptor = tool.descriptor
    function: dict[str, Any] = {"name": descriptor.name}
    if descriptor.description is not None:
        function["description"] = descriptor.description
    function["parameters"] = copy.deepcopy(descriptor.parameters)
    if descriptor.strict is not None:
        function["strict"] = descriptor.strict

    return {"type": "function", "function": function}


def to_anthropic_tool(tool: CanonicalTool) -> Any:
    """Convert a canonical tool to Anthropic tool use format.

    Anthropic's format is flatter and has no ``strict`` flag.
    """
    if isinstance(tool, BuiltinTool):
        return tool.raw

    descriptor = tool.descriptor
    result: dict[str, Any] = {"name": descriptor.name}
    if descriptor.description is not None:
        result["description"] = descriptor.description
    result["input_schema"] = copy.deepcopy(descriptor.parameters)
    return result


def to_openai_tool_choice(choice: ToolChoice) -> Any:
    if choice.mode in ("auto", "none", "required"):
        return choice.mode
    if choice.mode == "named":
        return {"type": "function", "function": {"name": choice.name}}
    return choice.raw


def to_anthropic_tool_choice(choice: ToolChoice) -> Any:
    if choice.mode == "required":
        return {"type": "any"}
    if choice.mode in ("auto", "none"):
        return {"type": choice.mode}
    if choice.mode == "named":
        return {"type": "tool", "name": choice.name}
    return choice.raw
