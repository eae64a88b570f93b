# src/llm_toolspec/formatters/base.py

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from time import monotonic
from typing import Any, Protocol

from llm_toolspec.errors import InvalidToolShape
from llm_toolspec.normalize.choice import normalize_tool_choice
from llm_toolspec.normalize.tools import normalize_tool
from llm_toolspec.normalize.types import CanonicalTool, FunctionTool, ToolChoice
from llm_toolspec.observability import names
from llm_toolspec.observability.base import MetricsHook, NoOpMetricsHook
from llm_toolspec.signatures.compiler import SchemaDiagnostic
from llm_toolspec.signatures.namespace import (
    render_function_namespace_with_diagnostics,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormattedTools:
    """Tools and tool choice ready to be placed in a model request.

    ``tools`` and ``tool_choice`` are in the provider's wire format.
    ``namespace`` is the rendered signature block, or ``None`` when
    rendering is disabled.
    """

    tools: list[Any]
    tool_choice: Any
    namespace: str | None
    diagnostics: tuple[SchemaDiagnostic, ...] = ()


class ToolFormatter(Protocol):
    """Protocol for tool formatters.

    Design principles:
    - Pure: No I/O, no network, no shared mutable state
    - Ordered: Output tools keep the caller's order
    - No leakage: Built-in tools pass through exactly as given
    """

    metrics_hook: MetricsHook

    def format(
        self,
        tools: Sequence[Any],
        tool_choice: Any = None,
    ) -> FormattedTools:
        """Normalize and serialize tools for one model call.

        Args:
            tools: Tools in any shape accepted by ``normalize_tool``.
            tool_choice: Optional choice accepted by ``normalize_tool_choice``.

        Returns:
            FormattedTools in the provider's wire format.

        Raises:
            InvalidToolShape: If a tool cannot be classified.
            InvalidToolChoice: If the tool choice cannot be normalized.
        """
        ...


class BaseToolFormatter:
    """Shared normalize-serialize-render pipeline.

    Subclasses supply the provider name and the wire conversions.
    """

    provider: str = ""

    def __init__(
        self,
        strict: bool | None = None,
        render_namespace: bool = True,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._strict = strict
        self._render_namespace = render_namespace
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized %s with strict=%s, render_namespace=%s",
            type(self).__name__,
            strict,
            render_namespace,
        )

    def format(
        self,
        tools: Sequence[Any],
        tool_choice: Any = None,
    ) -> FormattedTools:
        start = monotonic()

        canonical = self._normalize(tools)
        choice = normalize_tool_choice(tool_choice)

        namespace: str | None = None
        diagnostics: tuple[SchemaDiagnostic, ...] = ()
        if self._render_namespace:
            functions = [tool for tool in canonical if isinstance(tool, FunctionTool)]
            rendered = render_function_namespace_with_diagnostics(functions)
            namespace = rendered.text
            diagnostics = rendered.diagnostics
            self.metrics_hook.record_gauge(
                names.NAMESPACE_TOOLS_RENDERED,
                len(functions),
                labels={"provider": self.provider},
            )
            if diagnostics:
                self.metrics_hook.increment(
                    names.SCHEMA_UNKNOWN_NODES_TOTAL,
                    len(diagnostics),
                    labels={"provider": self.provider},
                )

        result = FormattedTools(
            tools=[self._serialize_tool(tool) for tool in canonical],
            tool_choice=(
                self._serialize_choice(choice) if choice is not None else None
            ),
            namespace=namespace,
            diagnostics=diagnostics,
        )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.TOOL_FORMAT_DURATION, elapsed_ms, labels={"provider": self.provider}
        )

        logger.debug(
            "Formatted tools for %s: tools=%d, choice=%s, diagnostics=%d",
            self.provider,
            len(result.tools),
            choice.mode if choice else None,
            len(diagnostics),
        )
        return result

    def _normalize(self, tools: Sequence[Any]) -> list[CanonicalTool]:
        canonical: list[CanonicalTool] = []
        for tool in tools:
            try:
                normalized = normalize_tool(tool, strict=self._strict)
            except InvalidToolShape:
                self.metrics_hook.increment(
                    names.TOOL_SHAPE_ERRORS_TOTAL, labels={"provider": self.provider}
                )
                raise
            self.metrics_hook.increment(
                names.TOOLS_NORMALIZED_TOTAL,
                labels={"provider": self.provider, "kind": normalized.kind},
            )
            canonical.append(normalized)
        return canonical

    def _serialize_tool(self, tool: CanonicalTool) -> Any:
        raise NotImplementedError

    def _serialize_choice(self, choice: ToolChoice) -> Any:
        raise NotImplementedError
