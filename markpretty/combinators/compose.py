"""Binary and list composition of documents."""

from __future__ import annotations

from collections.abc import Iterable

from markpretty.doc.model import EMPTY, Above, Beside, Doc, Empty, force
from markpretty.reduce.lists import reduce_horiz, reduce_vert
from markpretty.reduce.rules import mk_nest, reduce_doc


def _beside[M](p: Doc[M], space: bool, q: Doc[M]) -> Doc[M]:
    if isinstance(q, Empty):
        return p
    if isinstance(p, Empty):
        return q
    return Beside(p, space, q)


def _above[M](p: Doc[M], no_overlap: bool, q: Doc[M]) -> Doc[M]:
    if isinstance(q, Empty):
        return p
    if isinstance(p, Empty):
        return q
    return Above(p, no_overlap, q)


def beside[M](p: Doc[M], q: Doc[M]) -> Doc[M]:
    """`p <> q`: associative, with identity `empty`."""
    return _beside(p, False, q)


def beside_space[M](p: Doc[M], q: Doc[M]) -> Doc[M]:
    """`p <+> q`: beside, separated by a space unless one side is empty."""
    return _beside(p, True, q)


def above[M](p: Doc[M], q: Doc[M]) -> Doc[M]:
    """`p $$ q`: `q` below `p`.

    If the last line of `p` stops at least one column before the first line of
    `q` begins, the two lines are overlapped:

        above(text("hi"), nest(5, text("there")))

    lays out as `hi   there` rather than on two lines.
    """
    return _above(p, False, q)


def above_strict[M](p: Doc[M], q: Doc[M]) -> Doc[M]:
    """`p $+$ q`: above, without overlapping."""
    return _above(p, True, q)


def hcat[M](docs: Iterable[Doc[M]]) -> Doc[M]:
    """List version of `beside`."""
    chain: Doc[M] = EMPTY
    for doc in reversed(list(docs)):
        chain = Beside(doc, False, chain)
    return reduce_horiz(chain)


def hsep[M](docs: Iterable[Doc[M]]) -> Doc[M]:
    """List version of `beside_space`."""
    chain: Doc[M] = EMPTY
    for doc in reversed(list(docs)):
        chain = Beside(doc, True, chain)
    return reduce_horiz(chain)


def vcat[M](docs: Iterable[Doc[M]]) -> Doc[M]:
    """List version of `above`."""
    chain: Doc[M] = EMPTY
    for doc in reversed(list(docs)):
        chain = Above(doc, False, chain)
    return reduce_vert(chain)


def nest[M](k: int, doc: Doc[M]) -> Doc[M]:
    """Indent a document by `k` columns (which may be negative).

    `nest(0, x) == x`, `nest(k, nest(k2, x)) == nest(k + k2, x)` and
    `nest(k, empty) == empty`. `x <> nest(k, y) == x <> y` when `x` is
    non-empty, which is what keeps `empty` a left identity for `<>`.
    """
    return force(mk_nest(k, reduce_doc(doc)))


def punctuate[M](separator: Doc[M], items: Iterable[Doc[M]]) -> list[Doc[M]]:
    """`[d1 <> p, d2 <> p, ... dn-1 <> p, dn]`."""
    docs = list(items)
    if not docs:
        return []
    return [beside(doc, separator) for doc in docs[:-1]] + [docs[-1]]