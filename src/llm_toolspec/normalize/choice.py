# src/llm_toolspec/normalize/choice.py

import logging
from collections.abc import Mapping
from typing import Any

from llm_toolspec.errors import InvalidToolChoice

from .tools import is_builtin_tool
from .types import ToolChoice

logger = logging.getLogger(__name__)

# "any" is the caller-facing alias of the wire-level "required" mode
_REQUIRED_ALIASES = frozenset({"any", "required"})


def is_builtin_tool_choice(value: Any) -> bool:
    """True for choice mappings tagged with a ``type`` other than ``"function"``."""
    return is_builtin_tool(value)


def normalize_tool_choice(choice: Any = None) -> ToolChoice | None:
    """Map a user-supplied tool choice onto a ``ToolChoice``.

    Args:
        choice: ``None``, a sentinel string (``"auto"``, ``"none"``,
            ``"any"``, ``"required"``), a tool name, a ``ToolChoice`` or a
            provider choice mapping.

    Returns:
        The normalized directive, or ``None`` when no choice was given.

    Raises:
        InvalidToolChoice: For values of any other type, or function
            choices without a tool name.
    """
    if choice is None or choice == "":
        return None
    if isinstance(choice, ToolChoice):
        return choice

    if isinstance(choice, str):
        if choice in _REQUIRED_ALIASES:
            return ToolChoice.required()
        if choice == "auto":
            return ToolChoice.auto()
        if choice == "none":
            return ToolChoice.none()
        return ToolChoice.named(choice)

    if is_builtin_tool_choice(choice):
        logger.debug("Passing through built-in tool choice: %r", choice)
        return ToolChoice.builtin(choice)

    if isinstance(choice, Mapping):
        name = _function_choice_name(choice)
        if name:
            return ToolChoice.named(name)
        raise InvalidToolChoice(f"Function tool choice without a name: {choice!r}")

    raise InvalidToolChoice(
        f"Unsupported tool choice type: {type(choice).__name__}"
    )


def _function_choice_name(choice: Mapping[str, Any]) -> str | None:
    function = choice.get("function")
    if isinstance(function, Mapping):
        name = function.get("name")
    else:
        name = choice.get("name")
    return name if isinstance(name, str) else None
