"""Simple geometric value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle with a width and height.

    >>> r = Rectangle(10, 20)
    >>> r.area
    200
    """

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height
