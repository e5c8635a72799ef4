"""Lenient string-to-boolean parsing.

Accepts ``true``/``false``, ``t``/``f``, ``yes``/``no``, ``y``/``n`` and
``1``/``0``, matching ASCII letters case-insensitively, and raises
:class:`UnrecognizedTokenError` for anything else::

    >>> from lenient_bool import parse
    >>> bool(parse("YES"))
    True
"""

from lenient_bool.errors import UnrecognizedTokenError
from lenient_bool.model import DEFAULT_VOCABULARY, BoolVocabulary, ParsedBool
from lenient_bool.utils.casting import parse, to_bool

__all__ = [
    "parse",
    "to_bool",
    "ParsedBool",
    "BoolVocabulary",
    "DEFAULT_VOCABULARY",
    "UnrecognizedTokenError",
]
