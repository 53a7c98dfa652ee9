"""Selecting the best layout."""

from __future__ import annotations

from collections import deque
from functools import partial
from typing import Any

from markpretty.doc.model import (
    Above,
    Beside,
    Doc,
    DocThunk,
    Empty,
    Frame,
    Nest,
    NilAbove,
    NoDoc,
    RDoc,
    TextBeside,
    Union,
    force,
    rebuild,
    unreduced,
)

type Choice[M] = tuple[Union[M], bool]
"""A union met on a first line, and whether its wide side was kept."""


def best[M](line_length: int, ribbon_length: int, doc: RDoc[M]) -> Doc[M]:
    """Resolve every union of a reduced document; the result has no `Union`.

    A union keeps its wide side when that side's first line fits within
    `min(w, ribbon_length)` minus the columns already used on the line, `w`
    being `line_length` less the enclosing nesting. Only the chosen side of a
    union is ever descended.

    Deciding one union settles every union after it on the same line, so
    those choices are replayed rather than measured again.
    """
    frames: list[Frame[M]] = []
    width = line_length
    used = 0
    in_line = False
    choices: deque[Choice[M]] = deque()
    current = force(doc)
    while True:
        match current:
            case Empty() | NoDoc():
                break
            case NilAbove(rest):
                frames.append(NilAbove)
                if in_line:
                    # the next line starts under the current column
                    width -= used
                    in_line = False
                choices.clear()
                current = rest
            case TextBeside(details, text_width, rest):
                frames.append(partial(TextBeside, details, text_width))
                used = used + text_width if in_line else text_width
                in_line = True
                current = rest
            case Nest(k, rest):
                if not in_line:
                    frames.append(partial(Nest, k))
                    width -= k
                current = rest
            case Union():
                if in_line and choices and choices[0][0] is current:
                    _, wide = choices.popleft()
                else:
                    budget = min(width, ribbon_length) - (used if in_line else 0)
                    path = fitting_choices(budget, current)
                    wide = path is not None and path[0][1]
                    choices = deque(path[1:] if path is not None else ())
                current = current.left if wide else current.right
            case Above() | Beside():
                raise unreduced("best", current)
    return rebuild(frames, current)


def fitting_choices[M](available: int, doc: RDoc[M]) -> list[Choice[M]] | None:
    """Union choices leading to the first layout whose first line fits in `available`.

    Wide sides are tried before narrow ones; `None` means no layout fits. The
    search runs on an explicit stack of untried narrow sides.
    """
    path: list[Choice[M]] = []
    untried: list[tuple[int, Union[M], int]] = []
    current = force(doc)
    while True:
        if available >= 0:
            match current:
                case Empty() | NilAbove():
                    return path
                case TextBeside(_, width, rest):
                    available -= width
                    current = rest
                    continue
                case Nest(_, rest):
                    current = rest
                    continue
                case Union():
                    untried.append((available, current, len(path)))
                    path.append((current, True))
                    current = current.left
                    continue
                case Above() | Beside():
                    raise unreduced("fits", current)
        # out of room, or NoDoc: fall back to the latest untried narrow side
        if not untried:
            return None
        available, union, depth = untried.pop()
        del path[depth:]
        path.append((union, False))
        current = union.right


def fits(available: int, doc: RDoc[Any]) -> bool:
    """Whether the *first line* of the best layout of `doc` fits in `available` columns."""
    return fitting_choices(available, doc) is not None


def non_empty_set(doc: RDoc[Any]) -> bool:
    """Whether the document holds at least one layout."""
    current = force(doc)
    while True:
        match current:
            case NoDoc():
                return False
            case Union() | Empty() | NilAbove():
                return True
            case TextBeside(_, _, rest) | Nest(_, rest):
                current = rest
            case Above() | Beside():
                raise unreduced("non_empty_set", current)


def first[M](p: RDoc[M], q: RDoc[M] | DocThunk[M]) -> RDoc[M]:
    """Return `p` if it is a non-empty layout set, otherwise `q`."""
    if non_empty_set(p):
        return p
    return q if not callable(q) else q()


def first_of[M](union: Union[M]) -> Doc[M]:
    """Resolve a union with `first` without building the narrow side unless needed."""
    return force(first(union.left, lambda: union.right))
