"""Errors raised when an input cannot be converted to a case style."""

from typing import Any


class CaseError(ValueError):
    """
    Base error for rejected conversion input.

    Stores the offending ``value`` and, when known, the ``style`` being rendered.
    The message always names the value and the rule it violated.
    """

    rule: str = "invalid input"

    def __init__(self, value: Any, style: str | None = None, detail: str | None = None):
        self.value = value
        self.style = style
        super().__init__(self._message(detail))

    def _message(self, detail: str | None) -> str:
        msg = f"Invalid input: {self.value!r} - {detail or self.rule}"
        if self.style:
            msg += f" (style:{self.style})"
        return msg


class NullInputError(CaseError):
    rule = "input cannot be None"


class InputTypeError(CaseError, TypeError):
    """Raised for non ``str`` input. ``actual_type`` holds the observed type name."""

    def __init__(self, value: Any, style: str | None = None):
        self.actual_type = type(value).__name__
        super().__init__(
            value, style, f"input must be a string, received {self.actual_type}"
        )


class NoAlphabeticContentError(CaseError):
    rule = "contains no alphabetic characters, at least one letter is required"


class EmptyTokenSequenceError(CaseError):
    rule = "does not contain any valid words"
