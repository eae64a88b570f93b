from collections.abc import Callable
from typing import Any

from pydantic import BaseModel


class Tool:
    """A structured callable: name, description, input schema and handler.

    ``input_schema`` is either a pydantic model class or an already built
    JSON-Schema dict describing the handler's arguments.
    """

    def __init__(
        self,
        *,
        name: str,
        description: str,
        input_schema: type[BaseModel] | dict[str, Any],
        handler: Callable,
    ) -> None:
        self.name = name
        self.description = description
        self.input_schema = input_schema
        self.handler = handler

    def __repr__(self) -> str:
        return f"Tool(name={self.name!r})"
