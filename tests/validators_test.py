import pytest

from reggie_case.errors import (
    CaseError,
    InputTypeError,
    NoAlphabeticContentError,
    NullInputError,
)
from reggie_case.validators import Policy, validate, validate_string_input


def test_validate_strips():
    assert validate("  hi ") == "hi"
    assert validate("hello123world") == "hello123world"


def test_validate_whitespace_is_empty():
    assert validate("") == ""
    assert validate("   ") == ""
    assert validate("\t\n", Policy.LENIENT) == ""


def test_validate_none():
    with pytest.raises(NullInputError) as exc_info:
        validate(None)
    assert exc_info.value.value is None
    assert "None" in str(exc_info.value)


def test_validate_type():
    with pytest.raises(InputTypeError) as exc_info:
        validate(42)
    error = exc_info.value
    assert isinstance(error, TypeError)
    assert isinstance(error, CaseError)
    assert error.actual_type == "int"
    assert "received int" in str(error)


@pytest.mark.parametrize("value", ["03", "123", "!@#", " 4 - 2 "])
def test_validate_strict_requires_letter(value):
    with pytest.raises(NoAlphabeticContentError) as exc_info:
        validate(value, Policy.STRICT)
    assert repr(value) in str(exc_info.value)


def test_validate_lenient_allows_no_letters():
    assert validate("03", Policy.LENIENT) == "03"
    assert validate(" !@# ", Policy.LENIENT) == "!@#"


def test_validate_style_in_message():
    with pytest.raises(NoAlphabeticContentError, match="style:dot"):
        validate("03", style="dot")


def test_validate_string_input():
    result = validate_string_input(None)
    assert not result
    assert result.message == "Input cannot be null"
    result = validate_string_input([])
    assert not result.is_valid
    assert result.message == "Input must be a string, received list"
    result = validate_string_input("03")
    assert result
    assert result.message == ""
