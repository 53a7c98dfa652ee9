"""Rendering modes and styles."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final


class Mode(StrEnum):
    """Rendering mode."""

    NORMAL = "normal"
    ZIG_ZAG = "zig_zag"  # normal, with zig-zag cuts where lines leave the page
    NO_INDENT = "no_indent"  # no indentation, infinitely long lines
    ONE_LINE = "one_line"  # all on one line


@dataclass(frozen=True, slots=True)
class Style:
    """A rendering style: mode, line length in columns and ribbons per line."""

    mode: Mode = Mode.NORMAL
    line_length: int = 100
    ribbons_per_line: float = 1.5

    def __post_init__(self) -> None:
        if self.ribbons_per_line <= 0:
            raise ValueError("ribbons_per_line must be positive")

    @property
    def ribbon_width(self) -> int:
        """Preferred text width per line, not counting indentation."""
        return round(self.line_length / self.ribbons_per_line)

    @staticmethod
    def for_mode(mode: Mode) -> "Style":
        return Style(mode=mode)


DEFAULT_STYLE: Final[Style] = Style()
"""`mode=NORMAL, line_length=100, ribbons_per_line=1.5`."""
