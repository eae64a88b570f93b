# src/llm_toolspec/normalize/tools.py

"""Normalize tools of any supported shape into ``CanonicalTool`` values.

Supported inputs, checked in this order:

1. Structured callables (``Tool`` or anything exposing ``name``,
   ``description``, ``input_schema`` and a callable ``handler``).
2. Provider built-in tools: mappings whose ``type`` is not ``"function"``.
3. Function-shaped mappings, either wrapped
   (``{"type": "function", "function": {...}}``) or flat
   (``{"name": ..., "parameters": ...}``).

Callers that already know the shape can pass a tagged ``RawTool`` and skip
the probing entirely.
"""

import copy
import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from llm_toolspec.errors import InvalidToolShape
from llm_toolspec.tools.schema_extraction import extract_schema

from .types import (
    BuiltinTool,
    CanonicalTool,
    FunctionDefinition,
    FunctionTool,
    ProviderTool,
    RawTool,
    StructuredTool,
    ToolDescriptor,
)

logger = logging.getLogger(__name__)


def is_structured_tool(value: Any) -> bool:
    return (
        isinstance(getattr(value, "name", None), str)
        and isinstance(getattr(value, "description", None), str)
        and getattr(value, "input_schema", None) is not None
        and callable(getattr(value, "handler", None))
    )


def is_builtin_tool(value: Any) -> bool:
    """True for mappings tagged with a ``type`` other than ``"function"``."""
    return (
        isinstance(value, Mapping)
        and "type" in value
        and value["type"] != "function"
    )


def classify_tool(value: Any) -> RawTool:
    """Tag an untyped tool value with its shape.

    Raises:
        InvalidToolShape: If the value matches none of the supported shapes.
    """
    if isinstance(value, (FunctionDefinition, StructuredTool, ProviderTool)):
        return value
    if is_structured_tool(value):
        return StructuredTool(tool=value)
    if is_builtin_tool(value):
        return ProviderTool(raw=value)
    if isinstance(value, Mapping) and _function_body(value) is not None:
        return FunctionDefinition(definition=value)

    logger.error("Cannot classify tool of type %s", type(value).__name__)
    raise InvalidToolShape(
        f"Unsupported tool shape: {type(value).__name__} is not a structured "
        "tool, a built-in tool or a function definition"
    )


def normalize_tool(tool: Any, *, strict: bool | None = None) -> CanonicalTool:
    """Convert a tool into its canonical form.

    Args:
        tool: A tagged ``RawTool`` or any supported untagged value.
        strict: When a bool, replaces the descriptor's ``strict`` value.
            ``None`` keeps whatever the tool declared.

    Returns:
        ``FunctionTool`` for function tools, ``BuiltinTool`` holding the
        very same object for provider built-ins.

    Raises:
        InvalidToolShape: If the tool cannot be classified or has no name.
    """
    raw = classify_tool(tool)

    if isinstance(raw, ProviderTool):
        logger.debug("Passing through built-in tool: %r", raw.raw)
        return BuiltinTool(raw=raw.raw)

    if isinstance(raw, StructuredTool):
        descriptor = ToolDescriptor(
            name=raw.tool.name,
            description=raw.tool.description,
            parameters=extract_schema(raw.tool),
        )
    else:
        descriptor = _descriptor_from_definition(raw.definition)

    if isinstance(strict, bool):
        descriptor = replace(descriptor, strict=strict)
    elif strict is not None:
        logger.debug("Ignoring non-boolean strict override: %r", strict)

    logger.debug("Normalized function tool: %s", descriptor.name)
    return FunctionTool(descriptor=descriptor)


def normalize_tools(
    tools: Sequence[Any], *, strict: bool | None = None
) -> list[CanonicalTool]:
    """Normalize a list of tools, preserving order."""
    return [normalize_tool(tool, strict=strict) for tool in tools]


def to_assistant_tool(tool: Any) -> dict[str, Any]:
    """Format a structured tool as an assistant-API function tool.

    Unlike ``normalize_tool`` this never treats the value as a built-in.
    """
    if not is_structured_tool(tool):
        raise InvalidToolShape(
            f"Expected a structured tool, got {type(tool).__name__}"
        )
    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": tool.description,
            "parameters": extract_schema(tool),
        },
    }


def _function_body(value: Mapping[str, Any]) -> Mapping[str, Any] | None:
    function = value.get("function")
    if isinstance(function, Mapping):
        return function
    if "name" in value:
        return value
    return None


def _descriptor_from_definition(definition: Mapping[str, Any]) -> ToolDescriptor:
    body = _function_body(definition)
    if body is None:
        raise InvalidToolShape("Function definition has no 'function' body or name")

    description = body.get("description")
    parameters = body.get("parameters")
    strict = body.get("strict")

    return ToolDescriptor(
        name=body.get("name"),  # type: ignore[arg-type]  # validated by descriptor
        description=description if isinstance(description, str) else None,
        parameters=(
            copy.deepcopy(dict(parameters))
            if isinstance(parameters, Mapping)
            else {"type": "object", "properties": {}}
        ),
        strict=strict if isinstance(strict, bool) else None,
    )
