import pytest
from pydantic import BaseModel

from llm_toolspec.normalize.tools import normalize_tools
from llm_toolspec.signatures.namespace import render_function_namespace
from llm_toolspec.tools.tool import Tool
from llm_toolspec.tools.tool_registry import ToolRegistry


class DummyInput(BaseModel):
    x: int


def dummy_handler(args: DummyInput) -> int:
    return args.x * 2


@pytest.fixture
def registry() -> ToolRegistry:
    return ToolRegistry()


@pytest.fixture
def sample_tool() -> Tool:
    return Tool(
        name="double",
        description="Doubles a number",
        input_schema=DummyInput,
        handler=dummy_handler,
    )


def test_register_and_get(registry: ToolRegistry, sample_tool: Tool) -> None:
    registry.register(sample_tool)
    assert registry.get("double") is sample_tool
    assert "double" in registry
    assert len(registry) == 1


def test_register_duplicate_raises(registry: ToolRegistry, sample_tool: Tool) -> None:
    registry.register(sample_tool)
    with pytest.raises(ValueError, match="already registered"):
        registry.register(sample_tool)


def test_get_unknown_raises(registry: ToolRegistry) -> None:
    with pytest.raises(KeyError, match="not found"):
        registry.get("nonexistent")


def test_remove(registry: ToolRegistry, sample_tool: Tool) -> None:
    registry.register(sample_tool)
    registry.remove("double")
    with pytest.raises(KeyError):
        registry.get("double")


def test_remove_unknown_raises(registry: ToolRegistry) -> None:
    with pytest.raises(KeyError, match="not found"):
        registry.remove("nonexistent")


def test_list_keeps_registration_order(registry: ToolRegistry) -> None:
    for name in ("c", "a", "b"):
        registry.register(
            Tool(name=name, description=name, input_schema=DummyInput, handler=print)
        )

    assert [tool.name for tool in registry.list()] == ["c", "a", "b"]


def test_registry_tools_render_in_order(
    registry: ToolRegistry, sample_tool: Tool
) -> None:
    registry.register(sample_tool)

    text = render_function_namespace(normalize_tools(registry.list()))

    assert "// Doubles a number\ntype double = (_: {\nx: number,\n}) => any;" in text
