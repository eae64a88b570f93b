# src/llm_toolspec/errors.py


class ToolSpecError(Exception):
    """Base class for llm-toolspec errors."""


class InvalidToolShape(ToolSpecError, ValueError):
    """Raised when a raw tool matches none of the supported shapes."""


class InvalidToolChoice(ToolSpecError, ValueError):
    """Raised when a tool choice value cannot be normalized."""
