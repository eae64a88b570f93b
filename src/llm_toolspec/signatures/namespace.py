# src/llm_toolspec/signatures/namespace.py

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Union

from llm_toolspec.normalize.types import BuiltinTool, FunctionTool, ToolDescriptor

from .compiler import (
    CompiledSignature,
    SchemaDiagnostic,
    compile_schema_with_diagnostics,
)

logger = logging.getLogger(__name__)

NAMESPACE_OPEN = "namespace functions {"
NAMESPACE_CLOSE = "} // namespace functions"

Renderable = Union[ToolDescriptor, FunctionTool, BuiltinTool]


@dataclass(frozen=True)
class RenderedNamespace:
    text: str
    diagnostics: tuple[SchemaDiagnostic, ...] = ()


def render_function_namespace(tools: Sequence[Renderable]) -> str:
    """Render tool descriptors as a ``namespace functions`` block.

    Args:
        tools: Descriptors (or normalized tools) in the order the model
            should see them. Built-in tools carry no schema and are skipped.

    Returns:
        The namespace text. Identical input always yields identical text.

    Example:
        >>> print(render_function_namespace([ToolDescriptor(name="ping")]))
        namespace functions {
        <BLANKLINE>
        type ping = () => any;
        <BLANKLINE>
        } // namespace functions
    """
    return render_function_namespace_with_diagnostics(tools).text


def render_function_namespace_with_diagnostics(
    tools: Sequence[Renderable],
) -> RenderedNamespace:
    lines = [NAMESPACE_OPEN, ""]
    diagnostics: list[SchemaDiagnostic] = []

    for tool in tools:
        if isinstance(tool, BuiltinTool):
            logger.debug("Skipping built-in tool in namespace: %r", tool.raw)
            continue
        descriptor = tool.descriptor if isinstance(tool, FunctionTool) else tool

        if descriptor.description:
            lines.append(f"// {descriptor.description}")

        properties = descriptor.parameters.get("properties")
        if isinstance(properties, Mapping) and len(properties) > 0:
            compiled = compile_schema_with_diagnostics(descriptor.parameters, 0)
            lines.append(f"type {descriptor.name} = (_: {{")
            lines.append(compiled.text)
            lines.append("}) => any;")
            diagnostics.extend(_scoped(descriptor.name, compiled))
        else:
            lines.append(f"type {descriptor.name} = () => any;")
        lines.append("")

    lines.append(NAMESPACE_CLOSE)
    return RenderedNamespace(text="\n".join(lines), diagnostics=tuple(diagnostics))


def _scoped(tool_name: str, compiled: CompiledSignature) -> list[SchemaDiagnostic]:
    return [
        SchemaDiagnostic(path=f"{tool_name}.{diagnostic.path}", raw=diagnostic.raw)
        for diagnostic in compiled.diagnostics
    ]
