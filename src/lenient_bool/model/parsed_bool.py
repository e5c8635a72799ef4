from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(order=True)
class ParsedBool:
    """Single-field wrapper around a native ``bool``.

    ``value`` is readable and writable, but only ever holds ``True`` or
    ``False``; anything else is rejected with :class:`TypeError`.
    """

    value: bool = False

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "value" and not isinstance(value, bool):
            raise TypeError(f"ParsedBool value must be a bool but got {type(value).__name__}")
        super().__setattr__(name, value)

    def __bool__(self) -> bool:
        return self.value

    @classmethod
    def from_bool(cls, value: bool) -> "ParsedBool":
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> "ParsedBool":
        """Shorthand for :func:`lenient_bool.utils.casting.parse` with the default vocabulary."""
        from lenient_bool.utils.casting import parse

        return parse(text)
