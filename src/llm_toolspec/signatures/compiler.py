# src/llm_toolspec/signatures/compiler.py

"""Render a JSON-Schema parameter definition as a pseudo-type signature.

Models see function declarations written as TypeScript-like types rather
than raw JSON Schema, so this module turns::

    {"type": "object",
     "properties": {"city": {"type": "string", "description": "City name"}},
     "required": ["city"]}

into::

    // City name
    city: string,

Pure data transformation. Unknown schema shapes render as an empty
fragment and are reported through ``CompiledSignature.diagnostics``.
String enum members are wrapped in double quotes as-is, without escaping,
and an empty ``enum`` renders as an empty type.
"""

import logging
from dataclasses import dataclass
from typing import Any

from .nodes import (
    AnyOfSchema,
    ArraySchema,
    BooleanSchema,
    EnumValue,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    SchemaNode,
    StringSchema,
    UnknownSchema,
    parse_schema,
)

logger = logging.getLogger(__name__)

INDENT_STEP = 2
# Property descriptions are only emitted above this indent.
DESCRIPTION_MAX_INDENT = 2


@dataclass(frozen=True)
class SchemaDiagnostic:
    """An unrecognized schema node that was rendered as an empty string."""

    path: str
    raw: Any


@dataclass(frozen=True)
class CompiledSignature:
    text: str
    diagnostics: tuple[SchemaDiagnostic, ...] = ()


def compile_schema(schema: Any, indent: int = 0) -> str:
    """Compile the properties of an object schema into signature lines.

    Args:
        schema: An object-shaped JSON-Schema dict or parsed ``ObjectSchema``.
        indent: Number of spaces prefixed to every property line.

    Returns:
        The property lines joined by newlines, without surrounding braces.
    """
    return compile_schema_with_diagnostics(schema, indent).text


def compile_schema_with_diagnostics(
    schema: Any, indent: int = 0
) -> CompiledSignature:
    """Same as ``compile_schema`` but also returns the skipped nodes."""
    node = parse_schema(schema)
    diagnostics: list[SchemaDiagnostic] = []

    if isinstance(node, ObjectSchema):
        text = _format_properties(node, indent, "", diagnostics)
    else:
        # a bare non-object node renders as its type expression
        text = _format_type(node, indent, "", diagnostics)

    return CompiledSignature(text=text, diagnostics=tuple(diagnostics))


def format_type(schema: Any, indent: int = 0) -> str:
    """Render a single schema node as a type expression, e.g. ``string[]``."""
    return _format_type(parse_schema(schema), indent, "", [])


def _format_properties(
    node: ObjectSchema,
    indent: int,
    path: str,
    diagnostics: list[SchemaDiagnostic],
) -> str:
    lines: list[str] = []
    for name, prop in node.properties.items():
        if prop.description and indent < DESCRIPTION_MAX_INDENT:
            lines.append(f"// {prop.description}")
        prop_type = _format_type(prop, indent, _join(path, name), diagnostics)
        if name in node.required:
            lines.append(f"{name}: {prop_type},")
        else:
            lines.append(f"{name}?: {prop_type},")
    return "\n".join(" " * indent + line for line in lines)


def _format_type(
    node: SchemaNode,
    indent: int,
    path: str,
    diagnostics: list[SchemaDiagnostic],
) -> str:
    if isinstance(node, AnyOfSchema):
        return " | ".join(
            _format_type(variant, indent, _join(path, f"anyOf[{i}]"), diagnostics)
            for i, variant in enumerate(node.variants)
        )
    if isinstance(node, StringSchema):
        if node.enum is not None:
            return " | ".join(_format_literal(value) for value in node.enum)
        return "string"
    if isinstance(node, NumberSchema):
        if node.enum is not None:
            return " | ".join(_format_literal(value) for value in node.enum)
        # integers have no keyword of their own
        return "number"
    if isinstance(node, BooleanSchema):
        return "boolean"
    if isinstance(node, NullSchema):
        return "null"
    if isinstance(node, ObjectSchema):
        body = _format_properties(node, indent + INDENT_STEP, path, diagnostics)
        # the closing brace is never indented
        return "\n".join(["{", body, "}"])
    if isinstance(node, ArraySchema):
        if node.items is not None:
            item_type = _format_type(
                node.items, indent, _join(path, "items"), diagnostics
            )
            return f"{item_type}[]"
        return "any[]"

    raw = node.raw if isinstance(node, UnknownSchema) else node
    logger.warning("Unrecognized schema node at '%s': %r", path or "<root>", raw)
    diagnostics.append(SchemaDiagnostic(path=path or "<root>", raw=raw))
    return ""


def _format_literal(value: EnumValue) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name
