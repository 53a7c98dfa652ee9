"""Leaf documents: text, characters, numbers, punctuation and marks."""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Final

from markpretty.doc.model import EMPTY, Chr, Doc, Empty, Mark, Str, TextBeside

empty: Final[Empty] = EMPTY
"""The empty document: identity for `beside`, `beside_space`, `above` and `above_strict`,
and absorbed anywhere in the argument list of `sep`, `hcat`, `vcat`, `fsep` etc."""


def is_empty(doc: Doc[Any]) -> bool:
    """Check if the document is the empty document."""
    return isinstance(doc, Empty)


def char(c: str) -> Doc[Any]:
    """A document of height and width 1 containing a literal character."""
    if len(c) != 1:
        raise ValueError(f"char expects a single character, got {c!r}")
    return TextBeside(Chr(c), 1, EMPTY)


def text(s: str) -> Doc[Any]:
    """A document of height 1 containing a literal string.

    Satisfies `text(s) <> text(t) == text(s + t)` and, for non-empty `x`,
    `text("") <> x == x`. `text("")` is one line high while `empty` has no
    height, hence the side condition.
    """
    return TextBeside(Str(s), len(s), EMPTY)


def sized_text(width: int, s: str) -> Doc[Any]:
    """Some text occupying `width` columns regardless of its length."""
    return TextBeside(Str(s), width, EMPTY)


def zero_width_text(s: str) -> Doc[Any]:
    """Some text without any width, e.g. HTML or LaTeX tags."""
    return sized_text(0, s)


def mark[M](payload: M) -> Doc[M]:
    """Insert a zero-width mark carrying `payload` into the document."""
    return TextBeside(Mark(payload), 0, EMPTY)


def integer(n: int) -> Doc[Any]:
    return text(str(n))


def float_(x: float) -> Doc[Any]:
    return text(str(x))


def rational(q: Fraction) -> Doc[Any]:
    return text(str(q))


semi: Final = char(";")
comma: Final = char(",")
colon: Final = char(":")
space: Final = char(" ")
equals: Final = char("=")
lparen: Final = char("(")
rparen: Final = char(")")
lbrack: Final = char("[")
rbrack: Final = char("]")
lbrace: Final = char("{")
rbrace: Final = char("}")
