"""Wrapping documents in delimiters."""

from __future__ import annotations

from markpretty.combinators.compose import beside
from markpretty.doc.model import Doc
from markpretty.doc.values import char


def _wrap[M](left: str, doc: Doc[M], right: str) -> Doc[M]:
    return beside(beside(char(left), doc), char(right))


def parens[M](doc: Doc[M]) -> Doc[M]:
    """Wrap document in `(...)`."""
    return _wrap("(", doc, ")")


def brackets[M](doc: Doc[M]) -> Doc[M]:
    """Wrap document in `[...]`."""
    return _wrap("[", doc, "]")


def braces[M](doc: Doc[M]) -> Doc[M]:
    """Wrap document in `{...}`."""
    return _wrap("{", doc, "}")


def quotes[M](doc: Doc[M]) -> Doc[M]:
    """Wrap document in `'...'`."""
    return _wrap("'", doc, "'")


def double_quotes[M](doc: Doc[M]) -> Doc[M]:
    """Wrap document in `"..."`."""
    return _wrap('"', doc, '"')


def maybe_parens[M](flag: bool, doc: Doc[M]) -> Doc[M]:
    return parens(doc) if flag else doc


def maybe_brackets[M](flag: bool, doc: Doc[M]) -> Doc[M]:
    return brackets(doc) if flag else doc


def maybe_braces[M](flag: bool, doc: Doc[M]) -> Doc[M]:
    return braces(doc) if flag else doc


def maybe_quotes[M](flag: bool, doc: Doc[M]) -> Doc[M]:
    return quotes(doc) if flag else doc


def maybe_double_quotes[M](flag: bool, doc: Doc[M]) -> Doc[M]:
    return double_quotes(doc) if flag else doc
