# src/llm_toolspec/tools/schema_extraction.py

"""Derive a parameter schema from a tool's attached type definition.

Pydantic emits nested models as ``$ref`` pointers into ``$defs``. The
signature compiler only understands inline nodes, so local references are
resolved here and ``$defs`` is dropped from the result.
"""

import copy
import logging
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)

_LOCAL_REF_PREFIXES = ("#/$defs/", "#/definitions/")


def extract_schema(tool: Any) -> dict[str, Any]:
    """Return the JSON-Schema dict describing ``tool.input_schema``.

    Args:
        tool: Any object with an ``input_schema`` attribute holding a
            pydantic model class or a JSON-Schema dict.

    Returns:
        A new dict; the tool's own schema is never mutated.

    Raises:
        TypeError: If the attached schema is neither a model nor a dict.
    """
    input_schema = tool.input_schema

    if isinstance(input_schema, type) and issubclass(input_schema, BaseModel):
        raw = input_schema.model_json_schema()
    elif isinstance(input_schema, dict):
        raw = copy.deepcopy(input_schema)
    else:
        raise TypeError(
            f"Unsupported input schema for tool '{tool.name}': "
            f"{type(input_schema).__name__}"
        )

    return inline_refs(raw)


def inline_refs(schema: dict[str, Any]) -> dict[str, Any]:
    """Replace local ``$ref`` pointers with the definitions they name."""
    definitions: dict[str, Any] = {}
    definitions.update(schema.get("definitions", {}))
    definitions.update(schema.get("$defs", {}))

    body = {k: v for k, v in schema.items() if k not in ("$defs", "definitions")}
    if not definitions:
        return body
    return _resolve(body, definitions, ())


def _resolve(node: Any, definitions: dict[str, Any], stack: tuple[str, ...]) -> Any:
    if isinstance(node, list):
        return [_resolve(item, definitions, stack) for item in node]
    if not isinstance(node, dict):
        return node

    # pydantic wraps a described reference as allOf: [{$ref}]
    all_of = node.get("allOf")
    if isinstance(all_of, list) and len(all_of) == 1 and "$ref" in all_of[0]:
        siblings = {k: v for k, v in node.items() if k != "allOf"}
        node = {**all_of[0], **siblings}

    ref = node.get("$ref")
    if isinstance(ref, str):
        name = _local_ref_name(ref)
        if name is None or name not in definitions:
            logger.warning("Unresolvable schema reference: %s", ref)
            return node
        if name in stack:
            # recursive model; the compiler reports it as an unknown node
            logger.debug("Leaving recursive reference in place: %s", ref)
            return node
        siblings = {k: v for k, v in node.items() if k != "$ref"}
        target = _resolve(definitions[name], definitions, stack + (name,))
        return {**target, **siblings}

    return {key: _resolve(value, definitions, stack) for key, value in node.items()}


def _local_ref_name(ref: str) -> str | None:
    for prefix in _LOCAL_REF_PREFIXES:
        if ref.startswith(prefix):
            return ref[len(prefix) :]
    return None
