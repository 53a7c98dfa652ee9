"""Rendering."""

from markpretty.render.display import TextFolder, fold_right, full_render
from markpretty.render.printer import docs_equal, render, render_fold, render_style, txt_printer
from markpretty.render.style import DEFAULT_STYLE, Mode, Style

__all__ = [
    "DEFAULT_STYLE",
    "Mode",
    "Style",
    "TextFolder",
    "docs_equal",
    "fold_right",
    "full_render",
    "render",
    "render_fold",
    "render_style",
    "txt_printer",
]
