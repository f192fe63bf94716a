"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import PartKind


DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)

OUT_OF_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selectorkit builder errors."""

    def __init__(self, message: str, *, part: PartKind | None = None) -> None:
        super().__init__(message)
        self.part = part


class DuplicatePartError(SelectorError):
    """An element, id or pseudo-element was added twice to one chain."""

    def __init__(self, part: PartKind, message: str = DUPLICATE_PART_MESSAGE) -> None:
        super().__init__(message, part=part)


class OutOfOrderError(SelectorError):
    """A part was added after a part that must follow it."""

    def __init__(
        self,
        part: PartKind,
        *,
        rank: int,
        last_rank: int,
        message: str = OUT_OF_ORDER_MESSAGE,
    ) -> None:
        super().__init__(message, part=part)
        self.rank = rank
        self.last_rank = last_rank


class InvalidCombinatorError(SelectorError):
    """Raised by a strict builder for a combinator outside its known set."""

    def __init__(self, combinator: str, allowed: tuple[str, ...]) -> None:
        super().__init__(
            f"Unknown combinator {combinator!r}; expected one of {list(allowed)!r}"
        )
        self.combinator = combinator
        self.allowed = allowed
