"""Builder facade for composing CSS selectors.

Usage:
    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
        # '#main.container.editable'
    builder.combine(
        builder.element("div").id("main"), "+", builder.element("table").id("data")
    ).stringify()
        # 'div#main + table#data'
"""

from __future__ import annotations

import logging

from selectorkit.config import SelectorConfig
from selectorkit.errors import InvalidCombinatorError
from selectorkit.selector.model import EMPTY, Selector

__all__ = ["SelectorBuilder", "combine", "css_selector_builder"]

logger = logging.getLogger(__name__)


def combine(first: Selector, combinator: str, second: Selector) -> Selector:
    """Join two selectors with *combinator*, one space on each side.

    The result starts fresh grammar tracking: its flags and rank are those
    of the empty selector.
    """
    text = f"{first.text} {combinator} {second.text}"
    logger.debug("Combined selector %r", text)
    return Selector(text=text)


class SelectorBuilder:
    """Entry point whose part methods start from the empty selector."""

    def __init__(self, config: SelectorConfig | None = None) -> None:
        self.config = config or SelectorConfig()

    def element(self, value: str) -> Selector:
        return EMPTY.element(value)

    def id(self, value: str) -> Selector:
        return EMPTY.id(value)

    def class_(self, value: str) -> Selector:
        return EMPTY.class_(value)

    def attr(self, value: str) -> Selector:
        return EMPTY.attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return EMPTY.pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return EMPTY.pseudo_element(value)

    def combine(self, first: Selector, combinator: str, second: Selector) -> Selector:
        if self.config.strict_combinators and combinator not in self.config.combinators:
            raise InvalidCombinatorError(combinator, self.config.combinators)
        return combine(first, combinator, second)

    def stringify(self) -> str:
        return EMPTY.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder(strict_combinators={self.config.strict_combinators})"


css_selector_builder = SelectorBuilder()
