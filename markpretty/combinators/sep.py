"""`sep` and `cat`: everything on one line, or everything stacked.

`sep(ps) == one_liner(hsep(ps)) | vcat(ps)`; the union is built so that the
selector sees the one-line layout as the wide alternative.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from markpretty.combinators.compose import hcat, hsep, nest, vcat
from markpretty.doc.model import (
    EMPTY,
    NO_DOC,
    Above,
    Beside,
    Delay,
    Doc,
    Empty,
    Nest,
    NilAbove,
    NoDoc,
    RDoc,
    TextBeside,
    Union,
    force,
    resolved,
    unreduced,
)
from markpretty.reduce.rules import (
    above_nest,
    mk_nest,
    mk_union,
    nil_above_nest,
    nil_beside,
    one_liner,
    reduce_doc,
)


def sep[M](docs: Iterable[Doc[M]]) -> Doc[M]:
    """Either `hsep` or `vcat`."""
    return force(_sep_x(True, tuple(docs), 0))


def cat[M](docs: Iterable[Doc[M]]) -> Doc[M]:
    """Either `hcat` or `vcat`."""
    return force(_sep_x(False, tuple(docs), 0))


def hang[M](head: Doc[M], k: int, body: Doc[M]) -> Doc[M]:
    """`sep([head, nest(k, body)])`."""
    return sep([head, nest(k, body)])


def _sep_x[M](space: bool, items: Sequence[Doc[M]], start: int) -> RDoc[M]:
    """`sep` of `items[start:]`; leading items that reduce to `Empty` are skipped."""
    for index in range(start, len(items)):
        head = force(reduce_doc(items[index]))
        if not isinstance(head, Empty):
            return _sep1(space, head, 0, items, index + 1)
    return EMPTY


def _sep1[M](space: bool, p: RDoc[M], k: int, items: Sequence[Doc[M]], start: int) -> RDoc[M]:
    """`sep(p : map(nest(k), items[start:]))` for a reduced first item `p`."""
    head = resolved(p)
    if head is None:
        return Delay(p, lambda side: _sep1(space, side, k, items, start))
    match head:
        case NoDoc():
            return NO_DOC
        case Union():
            return Union(
                Delay(head.wide, lambda side: _sep1(space, side, k, items, start)),
                Delay(head.narrow, lambda side: above_nest(side, False, k, _stacked(items, start))),
            )
        case Empty():
            return mk_nest(k, Delay.call(lambda: _sep_x(space, items, start)))
        case Nest(indent=n, tail=rest):
            return Nest(n, Delay(rest, lambda side: _sep1(space, side, k - n, items, start)))
        case NilAbove(tail=rest):
            return NilAbove(above_nest(rest, False, k, _stacked(items, start)))
        case TextBeside(details=details, width=width, tail=rest):
            return TextBeside(details, width, Delay(rest, lambda side: _sep_nb(space, side, k - width, items, start)))
        case Above() | Beside():
            raise unreduced("sep1", head)


def _stacked[M](items: Sequence[Doc[M]], start: int) -> RDoc[M]:
    return Delay.call(lambda: reduce_doc(vcat(items[start:])))


def _sep_nb[M](space: bool, p: RDoc[M], k: int, items: Sequence[Doc[M]], start: int) -> RDoc[M]:
    """`_sep1` once some text of the first item has been seen; nests are eaten."""
    while True:
        head = resolved(p)
        if head is None:
            return Delay(p, lambda side: _sep_nb(space, side, k, items, start))
        if not isinstance(head, Nest):
            break
        p = head.tail
    if not isinstance(head, Empty):
        return _sep1(space, head, k, items, start)

    ys = items[start:]
    rest = hsep(ys) if space else hcat(ys)
    return mk_union(
        one_liner(nil_beside(space, reduce_doc(rest))),
        lambda: nil_above_nest(False, k, reduce_doc(vcat(ys))),
    )
