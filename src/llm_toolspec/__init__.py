# Catalog
from .catalog import ToolCatalog, ToolDefinition

# Errors
from .errors import InvalidToolChoice, InvalidToolShape, ToolSpecError

# Formatters
from .formatters import (
    AnthropicToolFormatter,
    FormattedTools,
    FormatterConfig,
    OpenAIToolFormatter,
    ToolFormatter,
    create_tool_formatter,
)

# Normalization
from .normalize import (
    BuiltinTool,
    CanonicalTool,
    FunctionDefinition,
    FunctionTool,
    ProviderTool,
    StructuredTool,
    ToolChoice,
    ToolDescriptor,
    normalize_tool,
    normalize_tool_choice,
    normalize_tools,
)

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Signatures
from .signatures import (
    compile_schema,
    compile_schema_with_diagnostics,
    render_function_namespace,
    render_function_namespace_with_diagnostics,
)

# Tools
from .tools import Tool, ToolRegistry, extract_schema

__all__ = [
    # Catalog
    "ToolCatalog",
    "ToolDefinition",
    # Errors
    "InvalidToolChoice",
    "InvalidToolShape",
    "ToolSpecError",
    # Formatters
    "AnthropicToolFormatter",
    "FormattedTools",
    "FormatterConfig",
    "OpenAIToolFormatter",
    "ToolFormatter",
    "create_tool_formatter",
    # Normalization
    "BuiltinTool",
    "CanonicalTool",
    "FunctionDefinition",
    "FunctionTool",
    "ProviderTool",
    "StructuredTool",
    "ToolChoice",
    "ToolDescriptor",
    "normalize_tool",
    "normalize_tool_choice",
    "normalize_tools",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Signatures
    "compile_schema",
    "compile_schema_with_diagnostics",
    "render_function_namespace",
    "render_function_namespace_with_diagnostics",
    # Tools
    "Tool",
    "ToolRegistry",
    "extract_schema",
]
