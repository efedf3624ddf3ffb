import pytest

from obj_utils import MissingArgumentError, ObjectTypeError, capitalise_first, capitalize_first
from obj_utils.config import settings


def test_capitalise_first_letter():
    assert capitalise_first("hello world") == "Hello world"
    assert capitalise_first("hELLO") == "HELLO"
    assert capitalise_first(" hello") == " hello"


def test_lowercase_and_after_punctuation():
    assert capitalise_first("HELLO. world", True, True) == "Hello. World"
    sentence = "this function, its so good! the function can change the entire capitalisation of this sentence."
    assert capitalise_first(sentence, True, True) == (
        "This function, its so good! The function can change the entire capitalisation of this sentence."
    )


@pytest.mark.parametrize(
    "text, expected",
    [
        ("wow! really? yes.  okay", "Wow! Really? Yes.  Okay"),
        ("hi.\nthere", "Hi.\nThere"),
        ("a.b", "A.b"),
        ("one. two three", "One. Two three"),
        ("end. 1 two", "End. 1 two"),
    ],
)
def test_after_punctuation_only(text, expected):
    assert capitalise_first(text, capitalise_after_punct=True) == expected


def test_after_punctuation_keeps_case_without_lowercase():
    assert capitalise_first("ONE. two", capitalise_after_punct=True) == "ONE. Two"
    assert capitalise_first("ONE. two", lowercase=True) == "One. two"


def test_sentence_endings_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "sentence_endings", ";")
    assert capitalise_first("a; b. c", capitalise_after_punct=True) == "A; B. c"


def test_errors():
    for missing in ((), (None,), ("",)):
        result = capitalise_first(*missing)
        assert isinstance(result, MissingArgumentError)
        assert result.kind == "MissingArgument"
    for bad in (5, b"bytes", ["a"]):
        result = capitalise_first(bad)
        assert isinstance(result, ObjectTypeError)
        assert result.kind == "TypeError"


def test_alias():
    assert capitalize_first is capitalise_first
