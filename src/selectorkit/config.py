from __future__ import annotations

from dataclasses import dataclass

DEFAULT_COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


@dataclass(frozen=True)
class SelectorConfig:
    combinators: tuple[str, ...] = DEFAULT_COMBINATORS
    strict_combinators: bool = False  # reject tokens outside `combinators`
