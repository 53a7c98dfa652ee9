"""Structural dumps of document trees for debugging."""

from __future__ import annotations

from typing import Any

from markpretty.doc.model import (
    Above,
    Beside,
    Chr,
    Doc,
    Empty,
    Mark,
    Nest,
    NilAbove,
    NoDoc,
    RDoc,
    Str,
    TextBeside,
    TextDetails,
    Union,
    force,
)


def details_repr(details: TextDetails[Any]) -> str:
    match details:
        case Chr(c):
            return f"Chr({c!r})"
        case Str(s):
            return f"Str({s!r})"
        case Mark(payload):
            return f"Mark({payload!r})"


def dump_doc(doc: RDoc[Any], *, force_unions: bool = True) -> str:
    """Return one line per node, indented by depth.

    With `force_unions=False` union sides that were never built are shown as
    `<pending>` instead of being computed.
    """
    lines: list[str] = []
    stack: list[tuple[Doc[Any] | None, int]] = [(force(doc), 0)]
    while stack:
        current, depth = stack.pop()
        indent = "  " * depth
        match current:
            case None:
                lines.append(f"{indent}<pending>")
            case Empty():
                lines.append(f"{indent}Empty")
            case NoDoc():
                lines.append(f"{indent}NoDoc")
            case NilAbove(rest):
                lines.append(f"{indent}NilAbove")
                stack.append((rest, depth + 1))
            case TextBeside(details, width, rest):
                lines.append(f"{indent}TextBeside {details_repr(details)} width={width}")
                stack.append((rest, depth + 1))
            case Nest(k, rest):
                lines.append(f"{indent}Nest {k}")
                stack.append((rest, depth + 1))
            case Union():
                lines.append(f"{indent}Union")
                left, right = (current.left, current.right) if force_unions else current.peek()
                stack.append((right, depth + 1))
                stack.append((left, depth + 1))
            case Beside(left, space, right):
                lines.append(f"{indent}Beside space={space}")
                stack.append((right, depth + 1))
                stack.append((left, depth + 1))
            case Above(top, no_overlap, bottom):
                lines.append(f"{indent}Above no_overlap={no_overlap}")
                stack.append((bottom, depth + 1))
                stack.append((top, depth + 1))
    return "\n".join(lines)
