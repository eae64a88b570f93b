# src/llm_toolspec/observability/names.py

"""Standard metric names for llm-toolspec observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Formatter Metrics
# ============================================================================

# Duration
TOOL_FORMAT_DURATION = "tool_format_duration"

# Counters
TOOLS_NORMALIZED_TOTAL = "tools_normalized_total"
TOOL_SHAPE_ERRORS_TOTAL = "tool_shape_errors_total"


# ============================================================================
# Signature Metrics
# ============================================================================

# Counters
SCHEMA_UNKNOWN_NODES_TOTAL = "schema_unknown_nodes_total"

# Gauges
NAMESPACE_TOOLS_RENDERED = "namespace_tools_rendered"
