"""
Case conversion entry points.

Each conversion runs validate -> tokenize -> render. camelCase and dot.case
use the STRICT policy by default, kebab-case uses LENIENT.

    >>> to_camel_case("SCREEN_NAME")
    'screenName'
    >>> to_kebab_case("firstName")
    'first-name'
    >>> to_dot_case("PascalCaseText")
    'pascal.case.text'
"""

from typing import Any

from lfp_logging import logs

from reggie_case import parsers, renderers, strs, validators
from reggie_case.errors import EmptyTokenSequenceError
from reggie_case.renderers import Style
from reggie_case.validators import Policy

LOG = logs.logger()

DEFAULT_POLICIES = {
    Style.CAMEL: Policy.STRICT,
    Style.KEBAB: Policy.LENIENT,
    Style.DOT: Policy.STRICT,
}


def default_policy(style: Style | str) -> Policy:
    return DEFAULT_POLICIES[parsers.to_enum(Style, style)]


def words(
    value: Any,
    policy: Policy | str = Policy.LENIENT,
    dots: bool = True,
    style: Style | str | None = None,
) -> list[str]:
    """
    Validate ``value`` and return its word tokens.

    Returns ``[]`` for empty or whitespace only strings. Under LENIENT, input
    with no surviving tokens also returns ``[]``.

    Raises:
        NullInputError, InputTypeError, NoAlphabeticContentError: see ``validators.validate``
        EmptyTokenSequenceError: STRICT policy and no token survived tokenization
    """
    policy = parsers.to_enum(Policy, policy)
    style_name = parsers.to_enum(Style, style).value if style is not None else None
    value_str = validators.validate(value, policy, style_name)
    if not value_str:
        return []
    strict = policy is Policy.STRICT
    tokens = strs.tokenize(value_str, dots=dots, strict=strict)
    if not tokens and strict:
        raise EmptyTokenSequenceError(value, style_name)
    return tokens


def convert(
    value: Any,
    style: Style | str,
    policy: Policy | str | None = None,
    dots: bool = True,
) -> str:
    """
    Convert ``value`` to ``style``.

    Args:
        value: Any value. Only ``str`` input converts, everything else raises.
        style: A ``Style`` or its name, e.g. ``"camel"``.
        policy: A ``Policy`` or its name. Defaults to the style's policy.
        dots: Treat periods as word separators.

    Returns:
        The rendered string, ``""`` when there are no words.
    """
    style = parsers.to_enum(Style, style)
    policy = (
        DEFAULT_POLICIES[style] if policy is None else parsers.to_enum(Policy, policy)
    )
    tokens = words(value, policy, dots=dots, style=style)
    LOG.debug(
        f"Converting - style:{style.value} policy:{policy.value} tokens:{len(tokens)}"
    )
    return renderers.render(tokens, style)


def to_camel_case(value: Any, policy: Policy | str | None = None) -> str:
    return convert(value, Style.CAMEL, policy)


def to_kebab_case(value: Any, policy: Policy | str | None = None) -> str:
    return convert(value, Style.KEBAB, policy)


def to_dot_case(value: Any, policy: Policy | str | None = None) -> str:
    return convert(value, Style.DOT, policy)


def validate_split_kebab(value: Any) -> str:
    """Validate, split into words and join with hyphens, never rejecting letterless input."""
    return convert(value, Style.KEBAB, Policy.LENIENT)
