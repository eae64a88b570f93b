# src/llm_toolspec/normalize/types.py

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, Union

from llm_toolspec.errors import InvalidToolShape
from llm_toolspec.tools.tool import Tool


def _empty_parameters() -> dict[str, Any]:
    return {"type": "object", "properties": {}}


@dataclass(frozen=True)
class ToolDescriptor:
    """Canonical function tool.

    Immutable. Provider-agnostic. ``parameters`` is an object-shaped
    JSON-Schema dict.
    """

    name: str
    description: str | None = None
    parameters: dict[str, Any] = field(default_factory=_empty_parameters)
    strict: bool | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidToolShape("Tool name must be a non-empty string")


# ============================================================================
# Canonical tools (normalizer output)
# ============================================================================


@dataclass(frozen=True)
class FunctionTool:
    descriptor: ToolDescriptor
    kind: Literal["function"] = field(default="function", init=False)


@dataclass(frozen=True)
class BuiltinTool:
    """Provider-defined tool. ``raw`` is the caller's value, never inspected."""

    raw: Any
    kind: Literal["builtin"] = field(default="builtin", init=False)


CanonicalTool = Union[FunctionTool, BuiltinTool]


# ============================================================================
# Tagged raw tools (normalizer input)
# ============================================================================


@dataclass(frozen=True)
class FunctionDefinition:
    """A function-shaped tool dict, wrapped or flat."""

    definition: Mapping[str, Any]


@dataclass(frozen=True)
class StructuredTool:
    """A structured callable whose schema comes from its input model."""

    tool: Tool


@dataclass(frozen=True)
class ProviderTool:
    """A provider built-in tool, passed through untouched."""

    raw: Any


RawTool = Union[FunctionDefinition, StructuredTool, ProviderTool]


# ============================================================================
# Tool choice
# ============================================================================

ToolChoiceMode = Literal["auto", "none", "required", "named", "builtin"]


@dataclass(frozen=True)
class ToolChoice:
    """Normalized tool-choice directive.

    ``name`` is set only for ``named``; ``raw`` only for ``builtin``.
    """

    mode: ToolChoiceMode
    name: str | None = None
    raw: Any = None

    @classmethod
    def auto(cls) -> "ToolChoice":
        return cls(mode="auto")

    @classmethod
    def none(cls) -> "ToolChoice":
        return cls(mode="none")

    @classmethod
    def required(cls) -> "ToolChoice":
        return cls(mode="required")

    @classmethod
    def named(cls, name: str) -> "ToolChoice":
        return cls(mode="named", name=name)

    @classmethod
    def builtin(cls, raw: Any) -> "ToolChoice":
        return cls(mode="builtin", raw=raw)
