# src/llm_toolspec/signatures/__init__.py

"""Schema-to-signature compilation.

Turns JSON-Schema parameter definitions into the compact pseudo-type
declarations models are prompted with.

Example:
    >>> from llm_toolspec.signatures import compile_schema
    >>>
    >>> print(compile_schema({
    ...     "type": "object",
    ...     "properties": {"unit": {"type": "string", "enum": ["c", "f"]}},
    ... }))
    unit?: "c" | "f",
"""

from .compiler import (
    CompiledSignature,
    SchemaDiagnostic,
    compile_schema,
    compile_schema_with_diagnostics,
    format_type,
)
from .namespace import (
    RenderedNamespace,
    render_function_namespace,
    render_function_namespace_with_diagnostics,
)
from .nodes import (
    AnyOfSchema,
    ArraySchema,
    BooleanSchema,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    SchemaNode,
    StringSchema,
    UnknownSchema,
    parse_schema,
)

__all__ = [
    # Compiler
    "compile_schema",
    "compile_schema_with_diagnostics",
    "format_type",
    "CompiledSignature",
    "SchemaDiagnostic",
    # Namespace
    "render_function_namespace",
    "render_function_namespace_with_diagnostics",
    "RenderedNamespace",
    # Nodes
    "parse_schema",
    "SchemaNode",
    "AnyOfSchema",
    "ArraySchema",
    "BooleanSchema",
    "NullSchema",
    "NumberSchema",
    "ObjectSchema",
    "StringSchema",
    "UnknownSchema",
]
