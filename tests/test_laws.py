from collections.abc import Callable
from typing import Any

import pytest

from markpretty import (
    Doc,
    Style,
    above,
    above_strict,
    beside,
    beside_space,
    cat,
    docs_equal,
    empty,
    fcat,
    fsep,
    hcat,
    hsep,
    nest,
    render_style,
    sep,
    text,
    vcat,
)
from tests._debug import debug_dump_render
from tests._shared_cases import LAW_OPERANDS, DocCase, case_id

STYLES: tuple[Style, ...] = (
    Style(),
    Style(line_length=20, ribbons_per_line=1.0),
    Style(line_length=8),
)

BINARY_OPS: dict[str, Callable[[Doc[Any], Doc[Any]], Doc[Any]]] = {
    "beside": beside,
    "beside_space": beside_space,
    "above": above,
    "above_strict": above_strict,
}

LIST_OPS: dict[str, Callable[[list[Doc[Any]]], Doc[Any]]] = {
    "hcat": hcat,
    "hsep": hsep,
    "vcat": vcat,
    "sep": sep,
    "cat": cat,
    "fsep": fsep,
    "fcat": fcat,
}


def _assert_same_layout(left: Doc[Any], right: Doc[Any]) -> None:
    for style in STYLES:
        debug_dump_render("left", left, style)
        debug_dump_render("right", right, style)
        assert render_style(style, left) == render_style(style, right)


@pytest.mark.parametrize("op_name", sorted(BINARY_OPS))
@pytest.mark.parametrize("case", LAW_OPERANDS, ids=case_id)
def test_empty_is_left_and_right_identity(case: DocCase, op_name: str) -> None:
    op = BINARY_OPS[op_name]
    doc = case.build()

    _assert_same_layout(op(empty, doc), doc)
    _assert_same_layout(op(doc, empty), doc)


@pytest.mark.parametrize("op_name", sorted(BINARY_OPS))
@pytest.mark.parametrize("case", LAW_OPERANDS, ids=case_id)
def test_binary_composition_is_associative(case: DocCase, op_name: str) -> None:
    op = BINARY_OPS[op_name]
    x = text("head")
    y = case.build()
    z = vcat([text("tail"), nest(2, text("end"))])

    _assert_same_layout(op(op(x, y), z), op(x, op(y, z)))


@pytest.mark.parametrize("case", LAW_OPERANDS, ids=case_id)
def test_nest_laws(case: DocCase) -> None:
    doc = case.build()

    _assert_same_layout(nest(0, doc), doc)
    _assert_same_layout(nest(3, nest(-1, doc)), nest(2, doc))
    _assert_same_layout(beside(text("x"), nest(7, doc)), beside(text("x"), doc))
    _assert_same_layout(nest(4, above(text("x"), doc)), above(nest(4, text("x")), nest(4, doc)))


def test_nest_of_empty_is_empty() -> None:
    assert nest(5, empty) is empty


@pytest.mark.parametrize(
    ("left", "right"),
    [("", "abc"), ("abc", ""), ("foo", "bar"), ("a b", " c")],
)
def test_text_concatenation_merges(left: str, right: str) -> None:
    _assert_same_layout(beside(text(left), text(right)), text(left + right))


def test_empty_text_is_not_the_empty_document() -> None:
    # text("") is one line high, so stacking it adds a line
    assert render_style(Style(), above_strict(text(""), text("x"))) == "\nx"
    assert render_style(Style(), above_strict(empty, text("x"))) == "x"


@pytest.mark.parametrize("op_name", sorted(LIST_OPS))
@pytest.mark.parametrize("case", LAW_OPERANDS, ids=case_id)
def test_list_combinators_absorb_empty(case: DocCase, op_name: str) -> None:
    op = LIST_OPS[op_name]
    doc = case.build()
    words = [text("alpha"), text("beta")]

    expected = op([words[0], doc, words[1]])
    _assert_same_layout(op([empty, words[0], empty, doc, words[1], empty]), expected)
    assert docs_equal(op([empty, empty]), empty)
    assert docs_equal(op([]), empty)


@pytest.mark.parametrize("op_name", ["hcat", "hsep", "vcat"])
def test_list_combinators_fold_binary_composition(op_name: str) -> None:
    items = [text("a"), nest(2, text("b")), text("c")]
    binary = {"hcat": beside, "hsep": beside_space, "vcat": above}[op_name]

    _assert_same_layout(LIST_OPS[op_name](items), binary(binary(items[0], items[1]), items[2]))
