# src/llm_toolspec/formatters/factory.py

from llm_toolspec.observability.base import MetricsHook, NoOpMetricsHook

from .base import ToolFormatter
from .config import FormatterConfig


def create_tool_formatter(
    config: FormatterConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ToolFormatter:
    """Create a tool formatter from config.

    Args:
        config: Formatter configuration specifying provider, strict mode, etc.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured ToolFormatter implementation.

    Raises:
        ValueError: If provider is unknown.

    Example:
        >>> config = FormatterConfig(provider="openai", strict=True)
        >>> formatter = create_tool_formatter(config)
        >>> formatted = formatter.format(tools=[...], tool_choice="any")
    """
    if config.provider == "openai":
        from .openai import OpenAIToolFormatter

        return OpenAIToolFormatter(
            strict=config.strict,
            render_namespace=config.render_namespace,
            metrics_hook=metrics_hook,
        )

    if config.provider == "anthropic":
        from .anthropic import AnthropicToolFormatter

        return AnthropicToolFormatter(
            strict=config.strict,
            render_namespace=config.render_namespace,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown tool provider: {config.provider}")
