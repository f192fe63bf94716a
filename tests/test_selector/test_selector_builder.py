"""Tests for the selector builder facade and combine."""

import logging

import pytest

from selectorkit import (
    DEFAULT_COMBINATORS,
    InvalidCombinatorError,
    OutOfOrderError,
    Selector,
    SelectorBuilder,
    SelectorConfig,
    SelectorError,
    combine,
    css_selector_builder,
)

builder = css_selector_builder


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------


class TestFacade:
    def test_id_and_classes(self):
        sel = builder.id("main").class_("container").class_("editable")
        assert sel.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        sel = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_each_entry_point_starts_empty(self):
        assert builder.element("div").stringify() == "div"
        assert builder.id("x").stringify() == "#x"
        assert builder.class_("c").stringify() == ".c"
        assert builder.attr("a").stringify() == "[a]"
        assert builder.pseudo_class("hover").stringify() == ":hover"
        assert builder.pseudo_element("after").stringify() == "::after"

    def test_calls_do_not_share_state(self):
        builder.element("div")
        # a second chain is independent of the first
        assert builder.element("span").stringify() == "span"

    def test_builder_stringify_is_empty(self):
        assert builder.stringify() == ""

    def test_entry_points_return_selectors(self):
        assert isinstance(builder.element("div"), Selector)

    def test_errors_surface_through_facade(self):
        with pytest.raises(OutOfOrderError):
            builder.pseudo_element("before").class_("x")


# ---------------------------------------------------------------------------
# Combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_adjacent_sibling(self):
        sel = builder.combine(
            builder.element("div").id("main"), "+", builder.element("table").id("data")
        )
        assert sel.stringify() == "div#main + table#data"

    def test_nested(self):
        sel = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert sel.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_left_nesting(self):
        left = combine(builder.element("ul"), ">", builder.element("li"))
        sel = combine(left, "+", builder.element("li"))
        assert sel.stringify() == "ul > li + li"

    def test_resets_tracking_state(self):
        sel = combine(builder.element("a").id("x"), ">", builder.pseudo_element("after"))
        assert sel == Selector(text=sel.text)
        assert sel.last_rank == 0
        assert not sel.seen_element

    def test_extension_after_combine(self):
        sel = combine(builder.element("ul"), ">", builder.element("li").class_("x"))
        assert sel.element("span").stringify() == "ul > li.xspan"

    def test_inputs_unchanged(self):
        a = builder.element("div")
        b = builder.element("p")
        combine(a, "~", b)
        assert a.stringify() == "div"
        assert b.stringify() == "p"

    def test_empty_operands(self):
        assert combine(Selector(), ">", Selector()).stringify() == " > "

    def test_default_builder_accepts_any_token(self):
        sel = builder.combine(builder.element("a"), "||", builder.element("b"))
        assert sel.stringify() == "a || b"


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfig:
    def test_defaults(self):
        config = SelectorConfig()
        assert config.combinators == DEFAULT_COMBINATORS == (" ", "+", "~", ">")
        assert config.strict_combinators is False

    def test_builder_default_config(self):
        assert SelectorBuilder().config == SelectorConfig()

    @pytest.mark.parametrize("token", [" ", "+", "~", ">"])
    def test_strict_accepts_known(self, token):
        strict = SelectorBuilder(SelectorConfig(strict_combinators=True))
        sel = strict.combine(strict.element("a"), token, strict.element("b"))
        assert sel.stringify() == f"a {token} b"

    def test_strict_rejects_unknown(self):
        strict = SelectorBuilder(SelectorConfig(strict_combinators=True))
        with pytest.raises(InvalidCombinatorError) as exc_info:
            strict.combine(strict.element("a"), "|", strict.element("b"))
        assert exc_info.value.combinator == "|"
        assert exc_info.value.allowed == DEFAULT_COMBINATORS
        assert isinstance(exc_info.value, SelectorError)

    def test_strict_custom_set(self):
        strict = SelectorBuilder(
            SelectorConfig(combinators=(">",), strict_combinators=True)
        )
        with pytest.raises(InvalidCombinatorError):
            strict.combine(strict.element("a"), "+", strict.element("b"))

    def test_repr(self):
        assert repr(SelectorBuilder()) == "SelectorBuilder(strict_combinators=False)"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class TestLogging:
    def test_rejected_part_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="selectorkit"):
            with pytest.raises(OutOfOrderError):
                builder.class_("a").id("b")
        assert any("out of order" in r.getMessage() for r in caplog.records)

    def test_combine_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="selectorkit"):
            combine(builder.element("a"), ">", builder.element("b"))
        assert any("a > b" in r.getMessage() for r in caplog.records)
