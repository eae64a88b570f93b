# src/llm_toolspec/normalize/__init__.py

"""Tool and tool-choice normalization.

Accepts tools in whatever shape callers have them and produces one
canonical representation per tool.

Example:
    >>> from llm_toolspec.normalize import normalize_tool, normalize_tool_choice
    >>>
    >>> tool = normalize_tool(
    ...     {"type": "function", "function": {"name": "get_weather"}},
    ...     strict=True,
    ... )
    >>> tool.descriptor.strict
    True
    >>> normalize_tool_choice("any").mode
    'required'
"""

from .choice import is_builtin_tool_choice, normalize_tool_choice
from .tools import (
    classify_tool,
    is_builtin_tool,
    is_structured_tool,
    normalize_tool,
    normalize_tools,
    to_assistant_tool,
)
from .types import (
    BuiltinTool,
    CanonicalTool,
    FunctionDefinition,
    FunctionTool,
    ProviderTool,
    RawTool,
    StructuredTool,
    ToolChoice,
    ToolChoiceMode,
    ToolDescriptor,
)

__all__ = [
    # Operations
    "classify_tool",
    "is_builtin_tool",
    "is_builtin_tool_choice",
    "is_structured_tool",
    "normalize_tool",
    "normalize_tool_choice",
    "normalize_tools",
    "to_assistant_tool",
    # Types
    "BuiltinTool",
    "CanonicalTool",
    "FunctionDefinition",
    "FunctionTool",
    "ProviderTool",
    "RawTool",
    "StructuredTool",
    "ToolChoice",
    "ToolChoiceMode",
    "ToolDescriptor",
]
