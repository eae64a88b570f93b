# src/llm_toolspec/formatters/__init__.py

"""Provider formatters for llm-toolspec.

Turns a mixed list of tools and a tool choice into the wire format a
provider expects, plus the rendered function namespace.

Design principles:
- Pure: No network calls, no model invocation
- Ordered: Tools keep the caller's order
- No leakage: Built-in tools pass through untouched

Example:
    >>> from llm_toolspec.formatters import create_tool_formatter, FormatterConfig
    >>>
    >>> formatter = create_tool_formatter(FormatterConfig(provider="openai"))
    >>> formatted = formatter.format(
    ...     [{"type": "function", "function": {"name": "ping"}}],
    ...     tool_choice="ping",
    ... )
    >>> formatted.tool_choice
    {'type': 'function', 'function': {'name': 'ping'}}
"""

from ._wire import (
    to_anthropic_tool,
    to_anthropic_tool_choice,
    to_openai_tool,
    to_openai_tool_choice,
)
from .anthropic import AnthropicToolFormatter
from .base import BaseToolFormatter, FormattedTools, ToolFormatter
from .config import FormatterConfig
from .factory import create_tool_formatter
from .openai import OpenAIToolFormatter

__all__ = [
    # Factory
    "create_tool_formatter",
    # Protocol
    "ToolFormatter",
    "BaseToolFormatter",
    "OpenAIToolFormatter",
    "AnthropicToolFormatter",
    # Config
    "FormatterConfig",
    # Types
    "FormattedTools",
    # Wire conversions
    "to_anthropic_tool",
    "to_anthropic_tool_choice",
    "to_openai_tool",
    "to_openai_tool_choice",
]
