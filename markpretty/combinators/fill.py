"""Paragraph fill: as many items per line as fit, then continue below.

    fill g docs = fill_indent 0 docs

    fill_indent k [] = []
    fill_indent k [p] = p
    fill_indent k (p1:p2:ps) =
        one_liner p1 <g> fill_indent (k + length p1 + (1 if g else 0))
                                     (remove_nests (one_liner p2) : ps)
        `union`
        (p1 $*$ nest (-k) (fill_indent 0 ps))

where `$*$` is `$$` when the first layout has more than one line and `$+$`
otherwise.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

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
from markpretty.reduce.rules import above_nest, mk_nest, nil_above_nest, nil_beside, one_liner, reduce_doc


def fcat[M](docs: Iterable[Doc[M]]) -> Doc[M]:
    """Paragraph-fill version of `cat`."""
    return fill(False, docs)


def fsep[M](docs: Iterable[Doc[M]]) -> Doc[M]:
    """Paragraph-fill version of `sep`."""
    return fill(True, docs)


def fill[M](space: bool, docs: Iterable[Doc[M]]) -> Doc[M]:
    return force(_fill(space, tuple(docs), 0))


def _fill[M](space: bool, items: Sequence[Doc[M]], start: int) -> RDoc[M]:
    """Fill `items[start:]`; leading items that reduce to `Empty` are skipped."""
    for index in range(start, len(items)):
        head = force(reduce_doc(items[index]))
        if not isinstance(head, Empty):
            return _fill1(space, head, 0, items, index + 1)
    return EMPTY


def _fill_rest[M](space: bool, items: Sequence[Doc[M]], start: int) -> RDoc[M]:
    return Delay.call(lambda: _fill(space, items, start))


def _fill1[M](space: bool, p: RDoc[M], k: int, items: Sequence[Doc[M]], start: int) -> RDoc[M]:
    head = resolved(p)
    if head is None:
        return Delay(p, lambda side: _fill1(space, side, k, items, start))
    match head:
        case NoDoc():
            return NO_DOC
        case Union():
            return Union(
                Delay(head.wide, lambda side: _fill1(space, side, k, items, start)),
                Delay(head.narrow, lambda side: above_nest(side, False, k, _fill_rest(space, items, start))),
            )
        case Empty():
            return mk_nest(k, _fill_rest(space, items, start))
        case Nest(indent=n, tail=rest):
            return Nest(n, Delay(rest, lambda side: _fill1(space, side, k - n, items, start)))
        case NilAbove(tail=rest):
            return NilAbove(above_nest(rest, False, k, _fill_rest(space, items, start)))
        case TextBeside(details=details, width=width, tail=rest):
            return TextBeside(
                details, width, Delay(rest, lambda side: _fill_nb(space, side, k - width, items, start))
            )
        case Above() | Beside():
            raise unreduced("fill1", head)


def _fill_nb[M](space: bool, p: RDoc[M], k: int, items: Sequence[Doc[M]], start: int) -> RDoc[M]:
    while True:
        head = resolved(p)
        if head is None:
            return Delay(p, lambda side: _fill_nb(space, side, k, items, start))
        if not isinstance(head, Nest):
            break
        p = head.tail
    if not isinstance(head, Empty):
        return _fill1(space, head, k, items, start)

    for index in range(start, len(items)):
        y = force(reduce_doc(items[index]))
        if not isinstance(y, Empty):
            return _fill_nbe(space, k, y, items, index + 1)
    return EMPTY


def _fill_nbe[M](space: bool, k: int, y: Doc[M], items: Sequence[Doc[M]], start: int) -> RDoc[M]:
    """Either `y` joins the current line, or a new line starts with `y`.

    `y` is reduced and non-empty, so the wide side can never be empty.
    """
    k_after = k - 1 if space else k
    return Union(
        lambda: nil_beside(space, _fill1(space, _elide_nest(one_liner(y)), k_after, items, start)),
        lambda: nil_above_nest(False, k, _fill1(space, y, 0, items, start)),
    )


def _elide_nest[M](doc: RDoc[M]) -> RDoc[M]:
    head = resolved(doc)
    if head is None:
        return Delay(doc, _elide_nest)
    if isinstance(head, Nest):
        return head.tail
    return head
