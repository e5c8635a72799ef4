"""Token tables consulted by :func:`lenient_bool.utils.casting.parse`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def ascii_fold(text: str) -> str:
    """Lowercase ``A``-``Z`` only, leaving every other character untouched.

    :param text: Token to fold.
    :return: ``text`` with ASCII capitals mapped to their lowercase forms.
    """

    return text.translate(_ASCII_LOWER)


def _normalise(tokens: Iterable[str], label: str) -> frozenset[str]:
    """Validate a token collection and return its folded frozenset form."""

    if isinstance(tokens, str):
        raise ValueError(f"{label} tokens must be a collection of strings, not a single string")

    folded = set()
    for token in tokens:
        if not isinstance(token, str):
            raise ValueError(f"Invalid {label} token; expected str but got {type(token)}")
        if not token:
            raise ValueError(f"Invalid {label} token; tokens must not be empty")
        if not token.isascii():
            raise ValueError(f"Invalid {label} token {token!r}; tokens must be ASCII")
        folded.add(ascii_fold(token))

    if not folded:
        raise ValueError(f"At least one {label} token is required")
    return frozenset(folded)


@dataclass(frozen=True)
class BoolVocabulary:
    """Pair of disjoint token sets recognised as ``True`` and ``False``."""

    truthy: frozenset[str]
    falsy: frozenset[str]

    def __post_init__(self) -> None:
        truthy = _normalise(self.truthy, "truthy")
        falsy = _normalise(self.falsy, "falsy")

        overlap = truthy & falsy
        if overlap:
            raise ValueError(f"Tokens cannot be both truthy and falsy: {', '.join(sorted(overlap))}")

        object.__setattr__(self, "truthy", truthy)
        object.__setattr__(self, "falsy", falsy)

    def classify(self, folded: str) -> Optional[bool]:
        """Look up an already ASCII-folded token.

        :param folded: Token passed through :func:`ascii_fold`.
        :return: ``True`` or ``False`` for known tokens, ``None`` otherwise.
        """

        if folded in self.truthy:
            return True
        if folded in self.falsy:
            return False
        return None


DEFAULT_VOCABULARY = BoolVocabulary(
    truthy=frozenset({"true", "t", "yes", "y", "1"}),
    falsy=frozenset({"false", "f", "no", "n", "0"}),
)
