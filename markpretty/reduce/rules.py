"""Rewrite rules turning composed documents into reduced documents.

Every rule is head-strict: it computes the head node of its result and leaves
the rest as `Delay` tails, so each call does a bounded amount of work no
matter how large its operands are. A rule whose operand head is still pending
returns a `Delay` instead of forcing it.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import Any

from markpretty.doc.model import (
    EMPTY,
    NO_DOC,
    SPACE_TEXT,
    Above,
    Beside,
    Delay,
    Doc,
    DocThunk,
    Empty,
    Nest,
    NilAbove,
    NoDoc,
    RDoc,
    Str,
    TextBeside,
    Union,
    resolved,
    unreduced,
)


def reduce_doc[M](doc: RDoc[M]) -> RDoc[M]:
    """Push every top-level `Beside`/`Above` down its left operand."""
    pending: list[Beside[M] | Above[M]] = []
    while isinstance(doc, Beside | Above):
        pending.append(doc)
        doc = doc.right if isinstance(doc, Beside) else doc.bottom

    result = doc
    for node in reversed(pending):
        if isinstance(node, Beside):
            result = reduce_beside(node.left, node.space, result)
        else:
            result = reduce_above(node.top, node.no_overlap, result)
    return result


def _reduced_later[M](doc: Doc[M]) -> RDoc[M]:
    """`reduce_doc(doc)`, postponed until its head is needed when `doc` is a composition."""
    if isinstance(doc, Beside | Above):
        return Delay.call(partial(reduce_doc, doc))
    return doc


def mk_nest[M](k: int, doc: RDoc[M]) -> RDoc[M]:
    """`Nest` that never wraps `Empty`, `NoDoc`, another `Nest` or a zero shift."""
    while True:
        head = resolved(doc)
        if head is None:
            return Delay(doc, partial(mk_nest, k))
        if not isinstance(head, Nest):
            break
        k += head.indent
        doc = head.tail
    if isinstance(head, Empty | NoDoc) or k == 0:
        return head
    return Nest(k, head)


def mk_union[M](left: RDoc[M], right: RDoc[M] | DocThunk[M]) -> RDoc[M]:
    """`Union` collapsing to `EMPTY` when the wide side is empty."""
    head = resolved(left)
    if head is None:
        return Delay(left, partial(mk_union, right=right))
    if isinstance(head, Empty):
        return EMPTY
    return Union(head, right)


def split_union[M](union: Union[M], build: Callable[..., RDoc[M]], *args: Any) -> Union[M]:
    """Apply `build(side, *args)` to both sides of `union` without forcing either."""
    return Union(
        Delay(union.wide, lambda side: build(side, *args)),
        Delay(union.narrow, lambda side: build(side, *args)),
    )


def _after_text[M](
    tail: RDoc[M],
    at_end: Callable[[], RDoc[M]],
    more: Callable[[Doc[M]], RDoc[M]],
) -> RDoc[M]:
    """Continue after a text fragment: `at_end()` when `tail` is `Empty`, else `more(tail)`."""
    if isinstance(resolved(tail), Empty):
        return at_end()
    return Delay(tail, lambda head: at_end() if isinstance(head, Empty) else more(head))


# ---------------------------------------------------------------------------
# Horizontal composition


def _beside_leaves[M](doc: Beside[M], space: bool) -> list[Doc[M]]:
    """Operands of a tree of `Beside` nodes sharing the gap `space`, left to right."""
    leaves: list[Doc[M]] = []
    stack: list[Doc[M]] = [doc]
    while stack:
        node = stack.pop()
        if isinstance(node, Beside) and node.space == space:
            stack.append(node.right)
            stack.append(node.left)
        else:
            leaves.append(node)
    return leaves


def reduce_beside[M](p: RDoc[M], space: bool, q: RDoc[M]) -> RDoc[M]:
    """`p <> q` (or `p <+> q` when `space`) for a reduced `q`."""
    while True:
        head = resolved(p)
        if head is None:
            return Delay(p, lambda side: reduce_beside(side, space, q))
        match head:
            case NoDoc():
                return NO_DOC
            case Union():
                return split_union(head, reduce_beside, space, q)
            case Empty():
                return q
            case Nest(indent=k, tail=rest):
                return Nest(k, Delay(rest, lambda side: reduce_beside(side, space, q)))
            case NilAbove(tail=rest):
                return NilAbove(Delay(rest, lambda side: reduce_beside(side, space, q)))
            case TextBeside(details=details, width=width, tail=rest):
                return TextBeside(
                    details,
                    width,
                    _after_text(
                        rest,
                        lambda: nil_beside(space, q),
                        lambda side: reduce_beside(side, space, q),
                    ),
                )
            case Beside(space=inner_space) if inner_space == space:
                # (p1 <g> q1) <g> q == p1 <g> (q1 <g> q)
                leaves = _beside_leaves(head, space)
                for leaf in reversed(leaves[1:]):
                    q = reduce_beside(leaf, space, q)
                p = leaves[0]
            case Beside() | Above():
                p = _reduced_later(head)


def nil_beside[M](space: bool, q: RDoc[M]) -> RDoc[M]:
    """`text "" <g> q` without the leading empty text; nests of `q` are eaten."""
    while True:
        head = resolved(q)
        if head is None:
            return Delay(q, partial(nil_beside, space))
        if not isinstance(head, Nest):
            break
        q = head.tail
    if isinstance(head, Empty):
        return EMPTY
    if space:
        return TextBeside(SPACE_TEXT, 1, head)
    return head


# ---------------------------------------------------------------------------
# Vertical composition


def _above_items[M](doc: Doc[M], no_overlap: bool) -> list[tuple[Doc[M], bool]]:
    """Operands of a tree of `Above` nodes, top to bottom, with the gap below each."""
    items: list[tuple[Doc[M], bool]] = []
    stack: list[tuple[Doc[M], bool]] = [(doc, no_overlap)]
    while stack:
        node, gap = stack.pop()
        if isinstance(node, Above):
            # (p1 $g1$ q1) $g$ q == p1 $g1$ (q1 $g$ q)
            stack.append((node.bottom, gap))
            stack.append((node.top, node.no_overlap))
        else:
            items.append((node, gap))
    return items


def reduce_above[M](p: Doc[M], no_overlap: bool, q: RDoc[M]) -> RDoc[M]:
    """`p $$ q` (or `p $+$ q` when `no_overlap`)."""
    result = reduce_doc(q)
    for top, gap in reversed(_above_items(p, no_overlap)):
        result = above_nest(_reduced_later(top), gap, 0, result)
    return result


def above_nest[M](p: RDoc[M], no_overlap: bool, k: int, q: RDoc[M]) -> RDoc[M]:
    """`p $g$ nest k q` for reduced `p` and `q`."""
    head = resolved(p)
    if head is None:
        return Delay(p, lambda side: above_nest(side, no_overlap, k, q))
    match head:
        case NoDoc():
            return NO_DOC
        case Union():
            return split_union(head, above_nest, no_overlap, k, q)
        case Empty():
            return mk_nest(k, q)
        case Nest(indent=indent, tail=rest):
            # rest cannot be Empty, so no mk_nest needed
            return Nest(indent, Delay(rest, lambda side: above_nest(side, no_overlap, k - indent, q)))
        case NilAbove(tail=rest):
            return NilAbove(Delay(rest, lambda side: above_nest(side, no_overlap, k, q)))
        case TextBeside(details=details, width=width, tail=rest):
            k1 = k - width
            return TextBeside(
                details,
                width,
                _after_text(
                    rest,
                    lambda: nil_above_nest(no_overlap, k1, q),
                    lambda side: above_nest(side, no_overlap, k1, q),
                ),
            )
        case Above() | Beside():
            raise unreduced("above_nest", head)


def nil_above_nest[M](no_overlap: bool, k: int, q: RDoc[M]) -> RDoc[M]:
    """`text s <> (text "" $g$ nest k q)` without the leading text.

    When overlapping is allowed and `q` starts right of the current column the
    first line of `q` is pulled up onto the current line, padded with spaces.
    """
    while True:
        head = resolved(q)
        if head is None:
            return Delay(q, partial(nil_above_nest, no_overlap, k))
        if not isinstance(head, Nest):
            break
        k += head.indent
        q = head.tail
    if isinstance(head, Empty):
        return EMPTY
    if not no_overlap and k > 0:
        return TextBeside(Str(" " * k), k, head)
    return NilAbove(mk_nest(k, head))


# ---------------------------------------------------------------------------
# Single-line projection


def one_liner[M](doc: RDoc[M]) -> RDoc[M]:
    """Keep only the one-line members of the layout set."""
    head = resolved(doc)
    if head is None:
        return Delay(doc, one_liner)
    match head:
        case NoDoc() | Empty():
            return head
        case NilAbove():
            return NO_DOC
        case TextBeside(details=details, width=width, tail=rest):
            return TextBeside(details, width, Delay(rest, one_liner))
        case Nest(indent=k, tail=rest):
            return Nest(k, Delay(rest, one_liner))
        case Union():
            return Delay(head.wide, one_liner)
        case Above() | Beside():
            raise unreduced("one_liner", head)
