"""selectorkit -- immutable CSS selector builder and small object helpers."""
from __future__ import annotations

from selectorkit.config import DEFAULT_COMBINATORS, SelectorConfig
from selectorkit.errors import (
    DuplicatePartError,
    InvalidCombinatorError,
    OutOfOrderError,
    SelectorError,
)
from selectorkit.selector import (
    EMPTY,
    PartKind,
    Selector,
    SelectorBuilder,
    combine,
    css_selector_builder,
)
from selectorkit.serialization import from_json, to_json
from selectorkit.shapes import Rectangle

__all__ = [
    # Config
    "DEFAULT_COMBINATORS",
    "SelectorConfig",
    # Errors
    "SelectorError",
    "DuplicatePartError",
    "OutOfOrderError",
    "InvalidCombinatorError",
    # Selector
    "EMPTY",
    "PartKind",
    "Selector",
    "SelectorBuilder",
    "combine",
    "css_selector_builder",
    # Helpers
    "Rectangle",
    "to_json",
    "from_json",
]
