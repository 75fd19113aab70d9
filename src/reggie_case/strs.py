"""Utilities for splitting arbitrary text into normalized word tokens.

Words are separated by whitespace, hyphens, underscores and (optionally)
periods, and by lowercase or digit to uppercase transitions inside camelCase or
PascalCase runs. Tokens are lowercase ASCII letters and digits only.

    >>> tokenize("Hello World-test_case")
    ['hello', 'world', 'test', 'case']
    >>> tokenize("PascalCaseText")
    ['pascal', 'case', 'text']
    >>> tokenize("hello123world")
    ['hello123world']
    >>> tokenize("v2 1999", strict=True)
    ['v2']
"""

import re
from itertools import chain
from typing import Any, Iterable

from reggie_case import validators
from reggie_case.errors import InputTypeError, NullInputError

_SPLIT_CAMEL_CASE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_SPLIT_SEPARATORS = re.compile(r"[\s_.\-]+")
_SPLIT_SEPARATORS_NO_DOTS = re.compile(r"[\s_\-]+")
_NON_ALPHA_NUMERIC = re.compile(r"[^a-z0-9]+")
_ALPHA = re.compile(r"[a-z]")


def tokenize(value: str, dots: bool = True, strict: bool = False) -> list[str]:
    """Return the ordered word tokens of an already validated string.

    Args:
        value: Text to split. Empty text yields no tokens.
        dots: Treat periods as word separators. When false they are stripped.
        strict: Drop tokens that contain no letter, such as ``"1999"``.

    Returns:
        Non-empty tokens in left to right order.
    """
    if not value:
        return []
    camel_parts = split_camel_case(value)
    words = split_separators(" ".join(camel_parts).lower(), dots=dots)
    tokens = []
    for word in words:
        word = _NON_ALPHA_NUMERIC.sub("", word)
        if not word:
            continue
        if strict and not _ALPHA.search(word):
            continue
        tokens.append(word)
    return tokens


def split_into_words(value: Any) -> list[str]:
    """Validate ``value`` as a string and return its lenient tokenization.

    Raises:
        NullInputError: value is None
        InputTypeError: value is not a ``str``
    """
    result = validators.validate_string_input(value)
    if not result:
        raise NullInputError(value) if value is None else InputTypeError(value)
    return tokenize(value.strip())


def split_camel_case(*inputs: Any) -> Iterable[str]:
    """Split inputs on camelCase boundaries."""
    return chain.from_iterable(_SPLIT_CAMEL_CASE.split(s) for s in _strings(*inputs))


def split_separators(*inputs: Any, dots: bool = True) -> Iterable[str]:
    """Split inputs on runs of separator characters, skipping empty fragments."""
    pattern = _SPLIT_SEPARATORS if dots else _SPLIT_SEPARATORS_NO_DOTS
    for part in chain.from_iterable(pattern.split(s) for s in _strings(*inputs)):
        if part:
            yield part


def _strings(*inputs: Any) -> Iterable[str]:
    """Yield non-empty string representations for inputs."""
    for value in inputs:
        value_str = str(value) if value is not None else None
        if value_str:
            yield value_str
