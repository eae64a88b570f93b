from pydantic import BaseModel

from llm_toolspec.normalize.tools import is_structured_tool
from llm_toolspec.tools.tool import Tool


class EchoInput(BaseModel):
    text: str


def test_tool_is_structured() -> None:
    tool = Tool(
        name="echo",
        description="Echoes text",
        input_schema=EchoInput,
        handler=lambda args: args.text,
    )

    assert is_structured_tool(tool)
    assert repr(tool) == "Tool(name='echo')"


def test_duck_typed_object_is_structured() -> None:
    class LegacyTool:
        name = "legacy"
        description = "Old style tool"
        input_schema = {"type": "object", "properties": {}}

        def handler(self, args: dict) -> None:
            return None

    assert is_structured_tool(LegacyTool())


def test_object_without_handler_is_not_structured() -> None:
    class Incomplete:
        name = "incomplete"
        description = "No handler"
        input_schema = EchoInput

    assert not is_structured_tool(Incomplete())
