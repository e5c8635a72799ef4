import copy
import pickle

import pytest

from lenient_bool import BoolVocabulary, ParsedBool, UnrecognizedTokenError, parse, to_bool


def test_truthy_tokens_parse_true(truthy_token):
    assert parse(truthy_token) == ParsedBool(True)


def test_falsy_tokens_parse_false(falsy_token):
    assert parse(falsy_token) == ParsedBool(False)


def test_rejected_tokens_raise(rejected_token):
    with pytest.raises(UnrecognizedTokenError):
        parse(rejected_token)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("YES", True),
        ("N", False),
        ("1", True),
        ("0", False),
        ("True", True),
    ],
)
def test_parse_scenarios(text, expected):
    assert parse(text) == ParsedBool(expected)


def test_parse_empty_string_raises_error_without_payload():
    with pytest.raises(UnrecognizedTokenError) as excinfo:
        parse("")

    assert excinfo.value == UnrecognizedTokenError()
    assert isinstance(excinfo.value, ValueError)


def test_error_does_not_echo_input():
    with pytest.raises(UnrecognizedTokenError) as excinfo:
        parse("secret-value")

    assert "secret-value" not in str(excinfo.value)


def test_unicode_case_folding_is_not_applied():
    # "ſ".casefold() == "s", so only ASCII-only folding rejects this
    assert "falſe".casefold() == "false"
    with pytest.raises(UnrecognizedTokenError):
        parse("falſe")


def test_parse_is_repeatable():
    assert parse("Yes") == parse("Yes")
    assert parse("yes") is not parse("yes")


@pytest.mark.parametrize(
    "raw, expected",
    [
        (b"YES", True),
        (b"f", False),
        (bytearray(b"1"), True),
        (b"No", False),
    ],
)
def test_parse_accepts_bytes(raw, expected):
    assert bool(parse(raw)) is expected


@pytest.mark.parametrize("raw", [b"", b"falsch", "yes".encode("utf-16"), "ｙｅｓ".encode("utf-8")])
def test_parse_rejects_unknown_bytes(raw):
    with pytest.raises(UnrecognizedTokenError):
        parse(raw)


@pytest.mark.parametrize("value", [None, 1, 0, 1.0, ["yes"]])
def test_parse_rejects_non_text(value):
    with pytest.raises(TypeError):
        parse(value)


def test_parse_with_custom_vocabulary():
    vocabulary = BoolVocabulary(truthy={"on", "enabled"}, falsy={"off", "disabled"})

    assert parse("ON", vocabulary) == ParsedBool(True)
    assert parse("Disabled", vocabulary) == ParsedBool(False)
    with pytest.raises(UnrecognizedTokenError):
        parse("yes", vocabulary)


def test_to_bool_passes_native_bools_through():
    assert to_bool(True) is True
    assert to_bool(False) is False


def test_to_bool_parses_tokens():
    assert to_bool("Y") is True
    assert to_bool("no") is False


def test_to_bool_does_not_trim_or_accept_on_off():
    with pytest.raises(UnrecognizedTokenError):
        to_bool(" true ")
    with pytest.raises(UnrecognizedTokenError):
        to_bool("on")


def test_error_survives_pickle_and_copy():
    error = UnrecognizedTokenError()

    restored = pickle.loads(pickle.dumps(error))

    assert restored == error
    assert str(restored) == "input is not a recognized boolean token"
    assert copy.copy(error) == error
    assert copy.deepcopy(error) == error
