# src/llm_toolspec/signatures/nodes.py

"""Typed view of the JSON-Schema subset the signature compiler understands.

Parsing is lenient: anything outside the subset becomes an ``UnknownSchema``
node instead of an error, so a single odd property never sinks a whole
render.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

EnumValue = Union[str, int, float, bool, None]


@dataclass(frozen=True)
class StringSchema:
    enum: tuple[EnumValue, ...] | None = None
    description: str | None = None


@dataclass(frozen=True)
class NumberSchema:
    enum: tuple[EnumValue, ...] | None = None
    integer: bool = False
    description: str | None = None


@dataclass(frozen=True)
class BooleanSchema:
    description: str | None = None


@dataclass(frozen=True)
class NullSchema:
    description: str | None = None


@dataclass(frozen=True)
class ArraySchema:
    items: "SchemaNode | None" = None
    description: str | None = None


@dataclass(frozen=True)
class ObjectSchema:
    properties: dict[str, "SchemaNode"] = field(default_factory=dict)
    required: frozenset[str] = frozenset()
    description: str | None = None


@dataclass(frozen=True)
class AnyOfSchema:
    variants: tuple["SchemaNode", ...]
    description: str | None = None


@dataclass(frozen=True)
class UnknownSchema:
    """A node outside the supported subset. Keeps the original value."""

    raw: Any
    description: str | None = None


SchemaNode = Union[
    StringSchema,
    NumberSchema,
    BooleanSchema,
    NullSchema,
    ArraySchema,
    ObjectSchema,
    AnyOfSchema,
    UnknownSchema,
]


def parse_schema(raw: Any, *, root: bool = True) -> SchemaNode:
    """Convert a JSON-Schema mapping into a ``SchemaNode`` tree.

    Args:
        raw: A JSON-Schema dict, or an already parsed node.
        root: Whether ``raw`` is the top of the tree. Only the root may omit
            ``"type"`` on an object that declares ``properties``.

    Returns:
        The root node. Unsupported shapes become ``UnknownSchema``.
    """
    if isinstance(raw, _NODE_TYPES):
        return raw
    if not isinstance(raw, Mapping):
        return UnknownSchema(raw=raw)

    description = _description(raw)

    any_of = raw.get("anyOf")
    if isinstance(any_of, list) and any_of:
        return AnyOfSchema(
            variants=tuple(parse_schema(variant, root=False) for variant in any_of),
            description=description,
        )

    kind = raw.get("type")
    if kind == "string":
        return StringSchema(enum=_enum(raw), description=description)
    if kind in ("number", "integer"):
        return NumberSchema(
            enum=_enum(raw), integer=kind == "integer", description=description
        )
    if kind == "boolean":
        return BooleanSchema(description=description)
    if kind == "null":
        return NullSchema(description=description)
    if kind == "array":
        items = raw.get("items")
        return ArraySchema(
            items=parse_schema(items, root=False) if items is not None else None,
            description=description,
        )
    # parameter objects often omit "type"; nested nodes must declare it
    implicit_object = (
        root and kind is None and isinstance(raw.get("properties"), Mapping)
    )
    if kind == "object" or implicit_object:
        properties = raw.get("properties")
        if not isinstance(properties, Mapping):
            properties = {}
        required = raw.get("required")
        if not isinstance(required, (list, tuple)):
            required = ()
        return ObjectSchema(
            properties={
                str(name): parse_schema(prop, root=False)
                for name, prop in properties.items()
            },
            required=frozenset(name for name in required if isinstance(name, str)),
            description=description,
        )

    return UnknownSchema(raw=raw, description=description)


def _description(raw: Mapping[str, Any]) -> str | None:
    description = raw.get("description")
    if isinstance(description, str) and description:
        return description
    return None


def _enum(raw: Mapping[str, Any]) -> tuple[EnumValue, ...] | None:
    # anything other than a list counts as no enum at all
    values = raw.get("enum")
    if isinstance(values, list):
        return tuple(values)
    return None


_NODE_TYPES = (
    StringSchema,
    NumberSchema,
    BooleanSchema,
    NullSchema,
    ArraySchema,
    ObjectSchema,
    AnyOfSchema,
    UnknownSchema,
)
