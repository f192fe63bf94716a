"""JSON helpers: encode plain values and objects, decode onto a template type."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

__all__ = ["to_json", "from_json"]

T = TypeVar("T")


def _encode_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Dataclass instances are encoded as their fields, other objects as their
    public attributes. Keys keep field/insertion order.

    >>> to_json([1, 2, 3])
    '[1,2,3]'
    """
    return json.dumps(obj, separators=(",", ":"), default=_encode_default)


def from_json(template: type[T] | T, text: str) -> T:
    """Decode a JSON object from *text* into a new instance of *template*.

    *template* is a class, or an instance whose class is used. The instance
    is created without calling ``__init__`` and the decoded fields are set
    as attributes, so it keeps the template's methods and properties while
    missing fields fall back to class-level defaults.
    """
    cls = template if isinstance(template, type) else type(template)
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    obj = cls.__new__(cls)
    for key, value in data.items():
        # object.__setattr__ so frozen dataclasses can be populated too
        object.__setattr__(obj, key, value)
    return obj
