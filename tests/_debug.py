"""Shared debug printers for document/render tests."""

from __future__ import annotations

import os
from typing import Any

from markpretty import Doc, Style, dump_doc, render_style

PRINT_DOC = os.getenv("PRINT_DOC", "0").lower() in {"1", "true", "yes", "on"}
PRINT_RENDER = os.getenv("PRINT_RENDER", "0").lower() in {"1", "true", "yes", "on"}


def debug_dump_doc(test_name: str, doc: Doc[Any], *, force_unions: bool = False) -> None:
    if not PRINT_DOC:
        return
    print(f"\n===== {test_name} DOC =====")
    print(dump_doc(doc, force_unions=force_unions))


def debug_dump_render(test_name: str, doc: Doc[Any], style: Style) -> None:
    if not PRINT_RENDER:
        return
    print(f"\n===== {test_name} RENDER mode={style.mode} width={style.line_length} =====")
    for line in render_style(style, doc).split("\n"):
        print(f"|{line}")
