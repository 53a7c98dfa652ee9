"""General rendering: fold a caller callback over the tokens of the chosen layout."""

from __future__ import annotations

import sys
from collections.abc import Callable

from markpretty.doc.model import (
    NL_TEXT,
    SPACE_TEXT,
    Above,
    Beside,
    Doc,
    Empty,
    Nest,
    NilAbove,
    NoDoc,
    RDoc,
    Str,
    TextBeside,
    TextDetails,
    Union,
    force,
    unreduced,
)
from markpretty.reduce.rules import reduce_doc
from markpretty.render.style import Mode
from markpretty.select.best import best, first_of

type TextFolder[M, A] = Callable[[TextDetails[M], A], A]
"""`txt(fragment, rest)`: combine one fragment with the result for everything after it."""


def full_render[M, A](
    mode: Mode,
    line_length: int,
    ribbons_per_line: float,
    txt: TextFolder[M, A],
    end: A,
    doc: Doc[M],
) -> A:
    """Right fold of `txt` over the fragments of the best layout of `doc`, starting from `end`.

    `ribbons_per_line` must be positive, as in `Style`.
    """
    if ribbons_per_line <= 0:
        raise ValueError("ribbons_per_line must be positive")
    if mode == Mode.ONE_LINE:
        return _easy_display(SPACE_TEXT, txt, end, reduce_doc(doc))
    if mode == Mode.NO_INDENT:
        return _easy_display(NL_TEXT, txt, end, reduce_doc(doc))

    ribbon_length = round(line_length / ribbons_per_line)
    best_line_length = sys.maxsize if mode == Mode.ZIG_ZAG else line_length
    selected = best(best_line_length, ribbon_length, reduce_doc(doc))
    return _display(mode, line_length, ribbon_length, txt, end, selected)


def fold_right[M, A](tokens: list[TextDetails[M]], txt: TextFolder[M, A], end: A) -> A:
    result = end
    for details in reversed(tokens):
        result = txt(details, result)
    return result


def _easy_display[M, A](
    line_break: TextDetails[M],
    txt: TextFolder[M, A],
    end: A,
    doc: RDoc[M],
) -> A:
    """Unions resolved with `first`, indentation dropped, breaks rendered as `line_break`."""
    tokens: list[TextDetails[M]] = []
    doc = force(doc)
    while True:
        match doc:
            case Empty():
                break
            case Union():
                doc = first_of(doc)
            case Nest(_, rest):
                doc = rest
            case NilAbove(rest):
                tokens.append(line_break)
                doc = rest
            case TextBeside(details, _, rest):
                tokens.append(details)
                doc = rest
            case NoDoc():
                raise RuntimeError("easy_display: document has no layout")
            case Above() | Beside():
                raise unreduced("easy_display", doc)
    return fold_right(tokens, txt, end)


def _display[M, A](
    mode: Mode,
    page_width: int,
    ribbon_width: int,
    txt: TextFolder[M, A],
    end: A,
    doc: RDoc[M],
) -> A:
    """Lay out a union-free document with real indentation and line breaks."""
    gap_width = page_width - ribbon_width
    # truncates towards zero when the ribbon is wider than the page
    shift = int(gap_width / 2)

    tokens: list[TextDetails[M]] = []
    # indentation of the line at line start, current column inside a line
    column = 0
    in_line = False
    while True:
        match doc:
            case Empty():
                break
            case Nest(k, rest):
                if not in_line:
                    column += k
                doc = rest
            case NilAbove(rest):
                tokens.append(NL_TEXT)
                in_line = False
                doc = rest
            case TextBeside(details, width, rest):
                if not in_line:
                    if mode == Mode.ZIG_ZAG and column >= gap_width:
                        tokens.extend((NL_TEXT, Str("/" * shift), NL_TEXT))
                        column -= shift
                    elif mode == Mode.ZIG_ZAG and column < 0:
                        tokens.extend((NL_TEXT, Str("\\" * shift), NL_TEXT))
                        column += shift
                    if column > 0:
                        tokens.append(Str(" " * column))
                    in_line = True
                tokens.append(details)
                column += width
                doc = rest
            case NoDoc() | Union():
                raise RuntimeError(f"display: unexpected {type(doc).__name__} in selected layout")
            case Above() | Beside():
                raise unreduced("display", doc)
    return fold_right(tokens, txt, end)
