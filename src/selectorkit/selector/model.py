"""Selector model: part kinds, grammar ranks, and the immutable Selector value."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import StrEnum

from selectorkit.errors import DuplicatePartError, OutOfOrderError

logger = logging.getLogger(__name__)


class PartKind(StrEnum):
    """Simple-selector categories of a compound selector."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"


# Grammar position of each part: element#id.class[attr]:pseudo-class::pseudo-element
RANKS: dict[PartKind, int] = {
    PartKind.ELEMENT: 1,
    PartKind.ID: 2,
    PartKind.CLASS: 3,
    PartKind.ATTRIBUTE: 4,
    PartKind.PSEUDO_CLASS: 5,
    PartKind.PSEUDO_ELEMENT: 6,
}

FRAGMENTS: dict[PartKind, str] = {
    PartKind.ELEMENT: "{}",
    PartKind.ID: "#{}",
    PartKind.CLASS: ".{}",
    PartKind.ATTRIBUTE: "[{}]",
    PartKind.PSEUDO_CLASS: ":{}",
    PartKind.PSEUDO_ELEMENT: "::{}",
}

# Parts allowed at most once, mapped to the flag that records them.
_SEEN_FLAGS: dict[PartKind, str] = {
    PartKind.ELEMENT: "seen_element",
    PartKind.ID: "seen_id",
    PartKind.PSEUDO_ELEMENT: "seen_pseudo_element",
}


@dataclass(frozen=True)
class Selector:
    """An immutable, chainable CSS selector.

    Every part method returns a new Selector; the receiver is never changed,
    so a partial selector can be reused as the base of several extensions::

        base = Selector().element("a")
        base.class_("nav").stringify()          # 'a.nav'
        base.pseudo_class("hover").stringify()  # 'a:hover'

    Attributes:
        text: The selector text accumulated so far.
        seen_element: Whether an element part has been added.
        seen_id: Whether an id part has been added.
        seen_pseudo_element: Whether a pseudo-element part has been added.
        last_rank: Grammar rank of the most recently added part (0 if none).
    """

    text: str = ""
    seen_element: bool = False
    seen_id: bool = False
    seen_pseudo_element: bool = False
    last_rank: int = 0

    # --- parts ----------------------------------------------------------------

    def element(self, value: str) -> Selector:
        return self.append(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.append(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.append(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.append(PartKind.PSEUDO_ELEMENT, value)

    def append(self, kind: PartKind, value: str) -> Selector:
        """Return a new selector with a *kind* part holding *value* appended.

        Raises DuplicatePartError if *kind* is single-occurrence and already
        present, and OutOfOrderError if *kind* ranks below the last part.
        """
        rank = RANKS[kind]
        flag = _SEEN_FLAGS.get(kind)
        if flag is not None and getattr(self, flag):
            logger.debug("Rejected repeated %s %r after %r", kind, value, self.text)
            raise DuplicatePartError(kind)
        if rank < self.last_rank:
            logger.debug("Rejected %s %r out of order after %r", kind, value, self.text)
            raise OutOfOrderError(kind, rank=rank, last_rank=self.last_rank)

        changes: dict[str, object] = {
            "text": self.text + FRAGMENTS[kind].format(value),
            "last_rank": rank,
        }
        if flag is not None:
            changes[flag] = True
        return replace(self, **changes)

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


EMPTY = Selector()
