"""String rendering entrypoints."""

from __future__ import annotations

from typing import Any

from markpretty.doc.model import Chr, Doc, Mark, Str, TextDetails
from markpretty.render.display import TextFolder, full_render
from markpretty.render.style import DEFAULT_STYLE, Style


def txt_printer(details: TextDetails[Any], rest: str) -> str:
    """Default fragment printer: text is prepended, marks are dropped."""
    match details:
        case Chr(c):
            return c + rest
        case Str(s):
            return s + rest
        case Mark():
            return rest


def _collect_text(details: TextDetails[Any], pieces: list[str]) -> list[str]:
    # pieces arrive last-first; render_style reverses them once at the end
    match details:
        case Chr(c):
            pieces.append(c)
        case Str(s):
            pieces.append(s)
        case Mark():
            pass
    return pieces


def render_fold[M, A](style: Style, txt: TextFolder[M, A], end: A, doc: Doc[M]) -> A:
    """`full_render` with the mode and widths taken from `style`."""
    return full_render(style.mode, style.line_length, style.ribbons_per_line, txt, end, doc)


def render_style(style: Style, doc: Doc[Any]) -> str:
    """Render the document to a string using the given style."""
    pieces = render_fold(style, _collect_text, [], doc)
    pieces.reverse()
    return "".join(pieces)


def render(doc: Doc[Any]) -> str:
    """Render the document to a string using the default style."""
    return render_style(DEFAULT_STYLE, doc)


def docs_equal(left: Doc[Any], right: Doc[Any], style: Style | None = None) -> bool:
    """Whether two documents render to the same string under `style` (default style if omitted)."""
    resolved = style or DEFAULT_STYLE
    return render_style(resolved, left) == render_style(resolved, right)
