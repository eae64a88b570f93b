# tests/unit/normalize/test_normalize_choice.py

import pytest

from llm_toolspec.errors import InvalidToolChoice
from llm_toolspec.normalize.choice import is_builtin_tool_choice, normalize_tool_choice
from llm_toolspec.normalize.tools import is_builtin_tool
from llm_toolspec.normalize.types import ToolChoice


class TestNormalizeToolChoice:
    @pytest.mark.parametrize("choice", [None, ""])
    def test_absent_choice(self, choice: object) -> None:
        assert normalize_tool_choice(choice) is None

    def test_default_is_absent(self) -> None:
        assert normalize_tool_choice() is None

    @pytest.mark.parametrize("choice", ["any", "required"])
    def test_required_aliases(self, choice: str) -> None:
        assert normalize_tool_choice(choice) == ToolChoice(mode="required")

    def test_auto(self) -> None:
        assert normalize_tool_choice("auto") == ToolChoice(mode="auto")

    def test_none(self) -> None:
        assert normalize_tool_choice("none") == ToolChoice(mode="none")

    def test_other_string_names_a_tool(self) -> None:
        assert normalize_tool_choice("pick_this_tool") == ToolChoice(
            mode="named", name="pick_this_tool"
        )

    def test_canonical_choice_passes_through(self) -> None:
        choice = ToolChoice.named("search")

        assert normalize_tool_choice(choice) is choice

    def test_builtin_choice_passes_through(self) -> None:
        raw = {"type": "file_search"}

        result = normalize_tool_choice(raw)

        assert result is not None
        assert result.mode == "builtin"
        assert result.raw is raw

    def test_function_choice_mapping(self) -> None:
        raw = {"type": "function", "function": {"name": "search"}}

        assert normalize_tool_choice(raw) == ToolChoice.named("search")

    def test_flat_function_choice_mapping(self) -> None:
        raw = {"type": "function", "name": "search"}

        assert normalize_tool_choice(raw) == ToolChoice.named("search")

    def test_function_choice_without_name_raises(self) -> None:
        with pytest.raises(InvalidToolChoice, match="without a name"):
            normalize_tool_choice({"type": "function"})

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(InvalidToolChoice, match="Unsupported tool choice type"):
            normalize_tool_choice(42)


class TestIsBuiltinToolChoice:
    def test_detects_builtin(self) -> None:
        assert is_builtin_tool_choice({"type": "web_search_preview"})

    @pytest.mark.parametrize(
        "choice",
        [None, "auto", {"type": "function", "function": {"name": "x"}}, {"name": "x"}],
    )
    def test_rejects_others(self, choice: object) -> None:
        assert not is_builtin_tool_choice(choice)

    @pytest.mark.parametrize(
        "value",
        [
            {"type": "web_search_preview"},
            {"type": "function", "function": {"name": "x"}},
            {"type": None},
            {"name": "x"},
            "auto",
            None,
        ],
    )
    def test_agrees_with_tool_detection(self, value: object) -> None:
        assert is_builtin_tool_choice(value) == is_builtin_tool(value)
