"""Input checks applied before a value is split into words."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from reggie_case.errors import InputTypeError, NoAlphabeticContentError, NullInputError


class Policy(Enum):
    """
    How strictly input is checked before conversion.

    LENIENT accepts any string. STRICT also requires at least one letter and
    drops digit-only words during tokenization.
    """

    LENIENT = "lenient"
    STRICT = "strict"


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: str = ""

    def __bool__(self) -> bool:
        return self.is_valid


def validate_string_input(value: Any) -> ValidationResult:
    """Check only the None and type rules, returning a result instead of raising."""
    if value is None:
        return ValidationResult(False, "Input cannot be null")
    if not isinstance(value, str):
        return ValidationResult(
            False, f"Input must be a string, received {type(value).__name__}"
        )
    return ValidationResult(True)


def validate(value: Any, policy: Policy = Policy.STRICT, style: str | None = None) -> str:
    """
    Return ``value`` stripped of surrounding whitespace or raise a ``CaseError``.

    Whitespace only input is valid under both policies and yields ``""``.

    Raises:
        NullInputError: value is None
        InputTypeError: value is not a ``str``
        NoAlphabeticContentError: STRICT policy and no character is a letter
    """
    if value is None:
        raise NullInputError(value, style)
    if not isinstance(value, str):
        raise InputTypeError(value, style)
    value_str = value.strip()
    if not value_str:
        return ""
    if policy is Policy.STRICT and not has_alpha(value_str):
        raise NoAlphabeticContentError(value, style)
    return value_str


def has_alpha(value: str) -> bool:
    return any(c.isalpha() for c in value)
