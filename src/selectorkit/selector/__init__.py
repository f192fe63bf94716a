from selectorkit.selector.model import EMPTY, FRAGMENTS, RANKS, PartKind, Selector
from selectorkit.selector.builder import SelectorBuilder, combine, css_selector_builder

__all__ = [
    "EMPTY",
    "FRAGMENTS",
    "RANKS",
    "PartKind",
    "Selector",
    "SelectorBuilder",
    "combine",
    "css_selector_builder",
]
