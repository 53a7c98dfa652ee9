"""Empty-element elimination for list compositions."""

from __future__ import annotations

from markpretty.doc.model import Above, Beside, Doc, Empty


def reduce_horiz[M](doc: Doc[M]) -> Doc[M]:
    """Drop `Empty` operands from a right-nested `Beside` chain."""
    spine: list[Beside[M]] = []
    while isinstance(doc, Beside):
        spine.append(doc)
        doc = doc.right

    result = doc
    for node in reversed(spine):
        if isinstance(node.left, Empty):
            continue
        result = node.left if isinstance(result, Empty) else Beside(node.left, node.space, result)
    return result


def reduce_vert[M](doc: Doc[M]) -> Doc[M]:
    """Drop `Empty` operands from a right-nested `Above` chain."""
    spine: list[Above[M]] = []
    while isinstance(doc, Above):
        spine.append(doc)
        doc = doc.bottom

    result = doc
    for node in reversed(spine):
        if isinstance(node.top, Empty):
            continue
        result = node.top if isinstance(result, Empty) else Above(node.top, node.no_overlap, result)
    return result
