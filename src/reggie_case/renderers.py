"""Render word tokens into a case style."""

from enum import Enum
from typing import Callable, Sequence


def camel(tokens: Sequence[str]) -> str:
    """First token unchanged, later tokens with an uppercase first character."""
    out = []
    for idx, token in enumerate(tokens):
        if idx == 0:
            out.append(token)
        else:
            out.append(token[:1].upper() + token[1:])
    return "".join(out)


def kebab(tokens: Sequence[str]) -> str:
    return "-".join(tokens)


def dot(tokens: Sequence[str]) -> str:
    return ".".join(tokens)


class Style(Enum):
    CAMEL = "camel"
    KEBAB = "kebab"
    DOT = "dot"

    @property
    def renderer(self) -> Callable[[Sequence[str]], str]:
        return _RENDERERS[self]


_RENDERERS: dict[Style, Callable[[Sequence[str]], str]] = {
    Style.CAMEL: camel,
    Style.KEBAB: kebab,
    Style.DOT: dot,
}


def render(tokens: Sequence[str], style: Style) -> str:
    """Join ``tokens`` in ``style``. An empty sequence renders as ``""``."""
    return style.renderer(tokens)
