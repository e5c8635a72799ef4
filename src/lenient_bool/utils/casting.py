"""Strict casting helpers for parsing boolean tokens."""

from typing import Any, Union

from lenient_bool.errors import UnrecognizedTokenError
from lenient_bool.model.parsed_bool import ParsedBool
from lenient_bool.model.vocabulary import DEFAULT_VOCABULARY, BoolVocabulary, ascii_fold


def _decode_token(text: Union[str, bytes, bytearray]) -> str:
    """Return ``text`` as ``str``, mapping raw bytes through latin-1.

    Latin-1 is a one-to-one byte mapping, so non-ASCII bytes survive as
    non-ASCII characters and can never equal an ASCII token.
    """

    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("latin-1")
    raise TypeError(f"Cannot parse bool from {type(text).__name__}; expected str or bytes")


def parse(
    text: Union[str, bytes, bytearray],
    vocabulary: BoolVocabulary = DEFAULT_VOCABULARY,
) -> ParsedBool:
    """Parse a boolean token, matching ASCII letters case-insensitively.

    No whitespace is trimmed and no numeric parsing happens, so ``" yes"``,
    ``"01"`` and ``"1.0"`` are all rejected.

    :param text: Token to classify.
    :param vocabulary: Token table to consult.
    :return: :class:`ParsedBool` holding the recognised value.
    :raises UnrecognizedTokenError: If ``text`` is in neither token set.
    :raises TypeError: If ``text`` is not ``str``, ``bytes`` or ``bytearray``.
    """
    result = vocabulary.classify(ascii_fold(_decode_token(text)))
    if result is None:
        raise UnrecognizedTokenError()
    return ParsedBool(result)


def to_bool(value: Any, vocabulary: BoolVocabulary = DEFAULT_VOCABULARY) -> bool:
    """Parse booleans from tokens while passing native booleans through.

    :param value: Value to convert; accepts bools or recognised tokens.
    :param vocabulary: Token table to consult for non-bool values.
    :return: Parsed boolean value.
    :raises UnrecognizedTokenError: If ``value`` is not a recognised token.
    """
    if isinstance(value, bool):
        return value
    return bool(parse(value, vocabulary))
