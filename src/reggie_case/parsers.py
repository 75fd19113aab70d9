"""Parsing helpers for environment, config and command line value coercions."""

from enum import Enum
from typing import Any, TypeVar

E = TypeVar("E", bound=Enum)

_BOOL_STRS = {
    True: ("true", "t", "yes", "y", "on", "1"),
    False: ("false", "f", "no", "n", "off", "0"),
}


def to_bool(value: str | bool | None, default: bool = False) -> bool:
    """Coerce an env or flag string to a boolean, falling back to ``default``."""
    if isinstance(value, bool):
        return value
    value = value.strip().casefold() if value is not None else ""
    for bool_value, bool_strs in _BOOL_STRS.items():
        if value in bool_strs:
            return bool_value
    return default


def to_enum(enum_type: type[E], value: Any, default: E | None = None) -> E:
    """
    Resolve a member of ``enum_type`` from a member, name or value.

    Accepts
    - a member of ``enum_type``: returned as is
    - str: matches member names then values, case insensitive, then an
      unambiguous case insensitive name prefix

    If default is provided and resolution fails, including an ambiguous
    prefix, default is returned.

    Raises
    - ValueError on invalid or ambiguous values when default is not given
    """
    if isinstance(value, enum_type):
        return value
    matched: list[E] = []
    if value is not None:
        value_str = str(value).strip().casefold()
        if value_str:
            for member in enum_type:
                if member.name.casefold() == value_str:
                    return member
                if str(member.value).casefold() == value_str:
                    return member
            matched = [m for m in enum_type if m.name.casefold().startswith(value_str)]
            if len(matched) == 1:
                return matched[0]
    if default is not None:
        return default
    if len(matched) > 1:
        raise ValueError(f"Ambiguous {enum_type.__name__}: {value}")
    raise ValueError(f"Invalid {enum_type.__name__}: {value}")
