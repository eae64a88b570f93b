# src/llm_toolspec/formatters/config.py

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class FormatterConfig:
    """Configuration for tool formatters.

    Immutable. Explicit. No magic defaults from environment.
    """

    provider: Literal["openai", "anthropic"]
    strict: bool | None = None  # Overrides each tool's own strict flag
    render_namespace: bool = True
