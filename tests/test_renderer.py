"""Tests for modifier conversion, rendering and ClassListBuilder."""

from bemcn import BemConfig, BlockContext, modifiers_to_list, render
from bemcn.classlist import ClassListBuilder


class TestModifiersToList:
    """Modifier spec to suffix conversion."""

    def test_flags_and_values(self) -> None:
        spec = {"color": "red", "big": True, "hidden": False}
        assert modifiers_to_list(spec) == ["_color_red", "_big"]

    def test_empty_separator(self) -> None:
        assert modifiers_to_list({"color": "red", "on": True}, "") == ["color_red", "on"]

    def test_pairs_input(self) -> None:
        assert modifiers_to_list((("a", True), ("b", 2))) == ["_a", "_b_2"]

    def test_config_separators(self) -> None:
        config = BemConfig(mod="--", mod_value="-")
        assert modifiers_to_list({"size": "l"}, config=config) == ["--size-l"]

    def test_one_is_a_value(self) -> None:
        assert modifiers_to_list({"n": 1}) == ["_n_1"]

    def test_falsy_values(self) -> None:
        assert modifiers_to_list({"a": 0, "b": "", "c": None, "d": False}) == []


class TestRender:
    """render() token order and separators."""

    def test_name_only(self) -> None:
        assert render(BlockContext("menu")) == "menu"

    def test_token_order(self) -> None:
        ctx = (
            BlockContext("menu")
            .with_states({"open": True})
            .with_mixes(["extra"])
            .with_mods({"theme": "dark"})
        )
        assert render(ctx) == "menu menu_theme_dark extra is-open"

    def test_explicit_config(self) -> None:
        ctx = BlockContext("menu").with_mods({"open": True})
        assert render(ctx, BemConfig(ns="ui-", mod="--")) == "ui-menu ui-menu--open"

    def test_namespace_not_applied_to_mixes_or_states(self) -> None:
        ctx = BlockContext("menu").with_mixes(["x"]).with_states({"on": True})
        assert render(ctx, BemConfig(ns="ui-")) == "ui-menu x is-on"

    def test_empty_spec_adds_nothing(self) -> None:
        ctx = BlockContext("menu").with_mods({"hidden": False})
        assert render(ctx) == "menu"


class TestBlockContext:
    """Copy-on-write context operations."""

    def test_with_element(self) -> None:
        ctx = BlockContext("a")
        assert ctx.with_element("b", "__").name == "a__b"
        assert ctx.name == "a"

    def test_with_states_merges(self) -> None:
        ctx = BlockContext().with_states({"a": True, "b": True}).with_states({"a": False})
        assert ctx.states == (("a", False), ("b", True))
        assert ctx.states_dict() == {"a": False, "b": True}


class TestClassListBuilder:
    """ClassListBuilder accumulation."""

    def test_build(self) -> None:
        cl = ClassListBuilder("a")
        cl.append("b").extend(["c", "d"])
        assert cl.build() == "a b c d"
        assert len(cl) == 4

    def test_keeps_empty_tokens(self) -> None:
        cl = ClassListBuilder("")
        cl.append("a")
        assert cl.build() == " a"

    def test_empty(self) -> None:
        cl = ClassListBuilder()
        assert not cl
        assert cl.build() == ""

    def test_custom_separator(self) -> None:
        assert ClassListBuilder("a").append("b").build(",") == "a,b"


class TestNonStringValues:
    """Values that are not strings are formatted, not concatenated."""

    def test_non_string_namespace(self) -> None:
        assert render(BlockContext("x"), BemConfig(ns=7)) == "7x"  # type: ignore[arg-type]

    def test_non_string_state_key(self) -> None:
        ctx = BlockContext("x").with_states({1: True})  # type: ignore[dict-item]
        assert render(ctx) == "x is-1"

    def test_float_value_uses_python_formatting(self) -> None:
        assert modifiers_to_list({"r": 1.0}) == ["_r_1.0"]
