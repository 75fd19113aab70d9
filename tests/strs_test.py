import pytest

from reggie_case.errors import InputTypeError, NullInputError
from reggie_case.strs import split_camel_case, split_into_words, split_separators, tokenize


@pytest.mark.parametrize(
    "value, expected",
    [
        ("HelloWorld", ["hello", "world"]),
        ("hello_world", ["hello", "world"]),
        ("helloWorld", ["hello", "world"]),
        ("Hello World-test_case", ["hello", "world", "test", "case"]),
        ("--foo__bar--", ["foo", "bar"]),
        ("first   name", ["first", "name"]),
        ("hello123world", ["hello123world"]),
        ("foo!bar baz", ["foobar", "baz"]),
        ("camel.case.text", ["camel", "case", "text"]),
        ("SCREEN_NAME", ["screen", "name"]),
    ],
)
def test_tokenize(value, expected):
    assert tokenize(value) == expected


def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize("!!! ???") == []
    assert tokenize("ÉÈ") == []


def test_tokenize_dots_disabled_strips_periods():
    assert tokenize("a.b.c", dots=False) == ["abc"]
    assert tokenize("a.b c", dots=False) == ["ab", "c"]


def test_tokenize_strict_drops_digit_only_words():
    assert tokenize("v2 1999", strict=True) == ["v2"]
    assert tokenize("v2 1999") == ["v2", "1999"]
    assert tokenize("03", strict=True) == []


def test_split_camel_case():
    assert list(split_camel_case("camelCaseText")) == ["camel", "Case", "Text"]
    assert list(split_camel_case("APIKey", None, "")) == ["APIKey"]


def test_split_separators():
    assert list(split_separators("a--b", "  c_d ")) == ["a", "b", "c", "d"]
    assert list(split_separators("a.b", dots=False)) == ["a.b"]


def test_split_into_words():
    assert split_into_words("firstName") == ["first", "name"]
    assert split_into_words("  SCREEN NAME ") == ["screen", "name"]
    assert split_into_words("   ") == []
    assert split_into_words("1999") == ["1999"]


def test_split_into_words_rejects_non_strings():
    with pytest.raises(NullInputError):
        split_into_words(None)
    with pytest.raises(InputTypeError):
        split_into_words(3)
    with pytest.raises(TypeError):
        split_into_words(["a"])


def test_tokenize_digit_to_upper_boundary():
    assert tokenize("v2Beta") == ["v2", "beta"]
    assert tokenize("hello2World") == ["hello2", "world"]
    assert tokenize("APIKey") == ["apikey"]
