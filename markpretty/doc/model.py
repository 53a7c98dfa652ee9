"""Document calculus: immutable layout-set nodes and text fragments.

A document represents a *set* of layouts. A document without any `Union` or
`NoDoc` represents exactly one layout.

Invariants of reduced documents (held by construction, never checked):

1) The argument of `NilAbove` is never `Empty`, so a `NilAbove` occupies at
   least two lines.
2) The argument of `TextBeside` is never `Nest`.
3) The layouts of both sides of a `Union` flatten to the same string.
4) Both sides of a `Union` are `TextBeside` or `NilAbove`.
5) `NoDoc` may only appear on the first line of the left side of a `Union`;
   the right side can never be equivalent to `NoDoc`.
6) The empty document is always `EMPTY`; it is never hidden inside a `Nest`
   or a `Union` of two empties.
7) The first line of every layout on the left side of a `Union` is longer
   than the first line of any layout on its right side.

Notice the difference between `NoDoc` (no layouts at all), `EMPTY` (one layout
with no height and no width) and `text("")` (one line high, no width).

Reduction is lazy: the `tail` of a spine node and both sides of a `Union` may
be a pending `Delay`. Reading `rest`, `left` or `right` forces it; the rewrite
rules read the raw fields so they never force more than one head node.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final


@dataclass(frozen=True, slots=True)
class Chr:
    """A single character fragment."""

    char: str


@dataclass(frozen=True, slots=True)
class Str:
    """A whole string fragment."""

    text: str


@dataclass(frozen=True, slots=True)
class Mark[M]:
    """A zero-width caller payload travelling through layout untouched."""

    payload: M


type TextDetails[M] = Chr | Str | Mark[M]


class DocOps:
    """Rendering-based protocol shared by every document node."""

    __slots__ = ()

    def __str__(self) -> str:
        from markpretty.render.printer import render

        return render(self)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocOps):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __add__(self, other: Doc[Any]) -> Doc[Any]:
        from markpretty.combinators.compose import beside

        return beside(self, other)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True, eq=False)
class Empty(DocOps):
    """The unique layout with no height and no width."""


@dataclass(frozen=True, slots=True, eq=False)
class NoDoc(DocOps):
    """The empty set of layouts."""


@dataclass(frozen=True, slots=True, eq=False)
class NilAbove[M](DocOps):
    """`text "" $$ rest`: a line break, `rest` starts on the next line."""

    __match_args__ = ("rest",)

    tail: RDoc[M]

    @property
    def rest(self) -> Doc[M]:
        return force(self.tail)


@dataclass(frozen=True, slots=True, eq=False)
class TextBeside[M](DocOps):
    """`text s <> rest` where `s` occupies `width` columns."""

    __match_args__ = ("details", "width", "rest")

    details: TextDetails[M]
    width: int
    tail: RDoc[M]

    @property
    def rest(self) -> Doc[M]:
        return force(self.tail)


@dataclass(frozen=True, slots=True, eq=False)
class Nest[M](DocOps):
    """Every line of `rest` shifted right by `indent` (may be negative)."""

    __match_args__ = ("indent", "rest")

    indent: int
    tail: RDoc[M]

    @property
    def rest(self) -> Doc[M]:
        return force(self.tail)


@dataclass(frozen=True, slots=True, eq=False)
class Beside[M](DocOps):
    """Unreduced horizontal composition; `space` inserts a gap between non-empty sides."""

    left: Doc[M]
    space: bool
    right: Doc[M]


@dataclass(frozen=True, slots=True, eq=False)
class Above[M](DocOps):
    """Unreduced vertical composition; `no_overlap` forbids merging the seam lines."""

    top: Doc[M]
    no_overlap: bool
    bottom: Doc[M]


class Delay[M](DocOps):
    """A reduced document whose head node is computed on first demand.

    `Delay(source, step)` stands for `step(head)`, where `head` is the head
    node of `source`; `Delay(None, thunk)` stands for `thunk()`. A step may
    return another `Delay`. The head is computed at most once and forcing runs
    on an explicit stack, so tails layered by deeply nested combinators never
    grow the Python call stack.
    """

    __slots__ = ("_source", "_step", "_value")

    def __init__(self, source: RDoc[M] | None, step: Step[M] | None) -> None:
        self._source = source
        self._step = step
        self._value: Doc[M] | None = None

    @classmethod
    def call(cls, thunk: DocThunk[M]) -> Delay[M]:
        return cls(None, thunk)

    def peek(self) -> Doc[M] | None:
        """Return the head node if it has been computed, `None` otherwise."""
        return self._value

    def force(self) -> Doc[M]:
        stack: list[Delay[M]] = [self]
        while stack:
            top = stack[-1]
            if top._value is not None:
                stack.pop()
                continue
            source = top._source
            if isinstance(source, Delay):
                if source._value is None:
                    stack.append(source)
                    continue
                source = source._value
            step = top._step
            if step is None:
                result = source
            elif source is None:
                result = step()
            else:
                result = step(source)
            if isinstance(result, Delay):
                if result._value is None:
                    # wait on the returned delay instead of recursing into it
                    top._source = result
                    top._step = None
                    continue
                result = result._value
            top._value = result
            top._source = None
            top._step = None
            stack.pop()
        return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        return "Delay(<pending>)" if self._value is None else f"Delay({self._value!r})"


def force[M](doc: RDoc[M]) -> Doc[M]:
    """Return the head node of `doc`, computing it if needed."""
    if isinstance(doc, Delay):
        return doc.force()
    return doc


def resolved[M](doc: RDoc[M]) -> Doc[M] | None:
    """Return the head node of `doc` if known without computing anything."""
    if isinstance(doc, Delay):
        return doc.peek()
    return doc


def _suspend[M](side: RDoc[M] | DocThunk[M]) -> RDoc[M]:
    if isinstance(side, DocOps):
        return side
    return Delay.call(side)


class Union[M](DocOps):
    """Choice between a wide (`left`) and a narrow (`right`) layout set.

    Each side may be given as a document, a `Delay` or a zero-argument
    callable that builds it. Sides are built at most once, on first access, so
    alternatives that the selector never looks at are never built. The raw
    sides are kept in `wide` and `narrow`.
    """

    __slots__ = ("narrow", "wide")

    __match_args__ = ("left", "right")

    def __init__(self, left: RDoc[M] | DocThunk[M], right: RDoc[M] | DocThunk[M]) -> None:
        self.wide = _suspend(left)
        self.narrow = _suspend(right)

    @property
    def left(self) -> Doc[M]:
        return force(self.wide)

    @property
    def right(self) -> Doc[M]:
        return force(self.narrow)

    def peek(self) -> tuple[Doc[M] | None, Doc[M] | None]:
        """Return the sides built so far, `None` for a side still pending."""
        return resolved(self.wide), resolved(self.narrow)

    def __repr__(self) -> str:
        left, right = self.peek()
        left_text = "<pending>" if left is None else repr(left)
        right_text = "<pending>" if right is None else repr(right)
        return f"Union({left_text}, {right_text})"


type Doc[M] = Empty | NoDoc | NilAbove[M] | TextBeside[M] | Nest[M] | Union[M] | Beside[M] | Above[M]

type RDoc[M] = Doc[M] | Delay[M]
"""A reduced document, possibly with its head node still pending.

Guaranteed not to have a top-level `Above` or `Beside` once forced.
"""

type DocThunk[M] = Callable[[], RDoc[M]]

type Step[M] = Callable[..., RDoc[M]]
"""Either a `DocThunk` or a function of the head node of a `Delay` source."""


type Frame[M] = Callable[[Doc[M]], Doc[M]]
"""Rebuilds one spine node (`NilAbove`, `TextBeside`, `Nest`) around a new tail."""


def rebuild[M](frames: list[Frame[M]], tail: Doc[M]) -> Doc[M]:
    for frame in reversed(frames):
        tail = frame(tail)
    return tail


EMPTY: Final[Empty] = Empty()
NO_DOC: Final[NoDoc] = NoDoc()

SPACE_TEXT: Final[Chr] = Chr(" ")
NL_TEXT: Final[Chr] = Chr("\n")


def unreduced(where: str, doc: Doc[Any]) -> RuntimeError:
    """Build the error raised when `where` meets a node reduction should have removed."""
    return RuntimeError(f"{where}: unexpected {type(doc).__name__} node in reduced document")
