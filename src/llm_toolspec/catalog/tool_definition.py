from typing import Any

from pydantic import BaseModel


class ToolDefinition(BaseModel):
    name: str
    description: str | None = None
    parameters: dict[str, Any] = {"type": "object", "properties": {}}
    strict: bool | None = None

    class Config:
        extra = "forbid"

    def to_function_definition(self) -> dict[str, Any]:
        return {"type": "function", "function": self.model_dump(exclude_none=True)}
