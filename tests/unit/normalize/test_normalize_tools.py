# tests/unit/normalize/test_normalize_tools.py

import pytest
from pydantic import BaseModel, Field

from llm_toolspec.errors import InvalidToolShape
from llm_toolspec.normalize.tools import (
    classify_tool,
    normalize_tool,
    normalize_tools,
    to_assistant_tool,
)
from llm_toolspec.normalize.types import (
    BuiltinTool,
    FunctionDefinition,
    FunctionTool,
    ProviderTool,
    StructuredTool,
    ToolDescriptor,
)
from llm_toolspec.tools.tool import Tool


class SearchInput(BaseModel):
    query: str = Field(description="The search query")
    limit: int = Field(default=10, description="Max results")


@pytest.fixture
def search_tool() -> Tool:
    return Tool(
        name="search",
        description="Search the knowledge base",
        input_schema=SearchInput,
        handler=lambda _: [],
    )


@pytest.fixture
def openai_definition() -> dict:
    return {
        "type": "function",
        "function": {
            "name": "get_weather",
            "description": "Get current weather",
            "parameters": {
                "type": "object",
                "properties": {"city": {"type": "string"}},
                "required": ["city"],
            },
            "strict": False,
        },
    }


class TestClassifyTool:
    def test_structured_tool(self, search_tool: Tool) -> None:
        assert classify_tool(search_tool) == StructuredTool(tool=search_tool)

    def test_builtin_tool(self) -> None:
        raw = {"type": "web_search_preview"}

        assert classify_tool(raw) == ProviderTool(raw=raw)

    def test_wrapped_function_definition(self, openai_definition: dict) -> None:
        assert isinstance(classify_tool(openai_definition), FunctionDefinition)

    def test_flat_function_definition(self) -> None:
        assert isinstance(classify_tool({"name": "ping"}), FunctionDefinition)

    def test_tagged_input_is_returned_as_is(self) -> None:
        tagged = ProviderTool(raw={"type": "function"})

        assert classify_tool(tagged) is tagged

    @pytest.mark.parametrize("value", [None, 42, "search", {"description": "nameless"}])
    def test_unmatched_shapes_raise(self, value: object) -> None:
        with pytest.raises(InvalidToolShape, match="Unsupported tool shape"):
            classify_tool(value)

    def test_structured_tool_wins_over_type_field(self) -> None:
        tool = Tool(
            name="x", description="y", input_schema={"type": "object"}, handler=print
        )
        tool.type = "code_interpreter"  # type: ignore[attr-defined]

        assert isinstance(classify_tool(tool), StructuredTool)


class TestNormalizeTool:
    def test_function_definition_fields_pass_through(
        self, openai_definition: dict
    ) -> None:
        result = normalize_tool(openai_definition)

        assert isinstance(result, FunctionTool)
        assert result.kind == "function"
        assert result.descriptor == ToolDescriptor(
            name="get_weather",
            description="Get current weather",
            parameters=openai_definition["function"]["parameters"],
            strict=False,
        )

    def test_does_not_mutate_input(self, openai_definition: dict) -> None:
        result = normalize_tool(openai_definition, strict=True)

        assert openai_definition["function"]["strict"] is False
        assert result.descriptor.parameters is not openai_definition["function"]["parameters"]

    def test_builtin_passthrough_identity(self) -> None:
        raw = {"type": "file_search", "vector_store_ids": ["vs_1"]}

        result = normalize_tool(raw, strict=True)

        assert isinstance(result, BuiltinTool)
        assert result.kind == "builtin"
        assert result.raw is raw

    def test_structured_tool_schema_is_extracted(self, search_tool: Tool) -> None:
        result = normalize_tool(search_tool)

        assert isinstance(result, FunctionTool)
        descriptor = result.descriptor
        assert descriptor.name == "search"
        assert descriptor.description == "Search the knowledge base"
        assert descriptor.parameters["required"] == ["query"]
        assert list(descriptor.parameters["properties"]) == ["query", "limit"]
        assert descriptor.strict is None

    def test_strict_override_replaces_existing_value(
        self, openai_definition: dict
    ) -> None:
        result = normalize_tool(openai_definition, strict=True)

        assert result.descriptor.strict is True

    def test_strict_override_can_disable(self) -> None:
        result = normalize_tool({"name": "ping", "strict": True}, strict=False)

        assert result.descriptor.strict is False

    def test_absent_override_keeps_existing_value(self) -> None:
        assert normalize_tool({"name": "ping", "strict": True}).descriptor.strict is True
        assert normalize_tool({"name": "ping"}).descriptor.strict is None

    def test_invalid_strict_values_are_treated_as_absent(self) -> None:
        result = normalize_tool({"name": "ping", "strict": "yes"}, strict="no")  # type: ignore[arg-type]

        assert result.descriptor.strict is None

    def test_missing_parameters_default_to_empty_object(self) -> None:
        result = normalize_tool({"type": "function", "function": {"name": "ping"}})

        assert result.descriptor.parameters == {"type": "object", "properties": {}}

    def test_empty_name_raises(self) -> None:
        with pytest.raises(InvalidToolShape, match="non-empty"):
            normalize_tool({"type": "function", "function": {"name": ""}})

    def test_tagged_function_definition(self) -> None:
        result = normalize_tool(FunctionDefinition(definition={"name": "ping"}))

        assert result.descriptor.name == "ping"

    def test_normalize_tools_preserves_order(
        self, search_tool: Tool, openai_definition: dict
    ) -> None:
        builtin = {"type": "web_search_preview"}

        results = normalize_tools([openai_definition, builtin, search_tool])

        assert [r.kind for r in results] == ["function", "builtin", "function"]
        assert results[2].descriptor.name == "search"


class TestToAssistantTool:
    def test_formats_structured_tool(self, search_tool: Tool) -> None:
        result = to_assistant_tool(search_tool)

        assert result["type"] == "function"
        assert result["function"]["name"] == "search"
        assert "query" in result["function"]["parameters"]["properties"]

    def test_rejects_non_structured_tool(self) -> None:
        with pytest.raises(InvalidToolShape):
            to_assistant_tool({"name": "ping"})
