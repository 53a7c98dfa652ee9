import time
from typing import Any

from markpretty import (
    Mark,
    Str,
    Style,
    TextDetails,
    cat,
    empty,
    fcat,
    fsep,
    hcat,
    mark,
    render,
    render_fold,
    render_style,
    sep,
    text,
    vcat,
)
from tests._debug import debug_dump_render


def _tokens(details: TextDetails[Any], rest: list[TextDetails[Any]]) -> list[TextDetails[Any]]:
    return [details, *rest]


def _nested_calls(depth: int):
    doc = text("x")
    for _ in range(depth):
        doc = cat([text("f("), doc, text(")")])
    return doc


def test_fsep_of_many_multi_line_items() -> None:
    count = 400
    doc = fsep([vcat([text("a"), text("b")]) for _ in range(count)])
    assert render(doc).split("\n") == ["a", "b"] * count


def test_fcat_of_many_zero_width_items() -> None:
    count = 2000
    doc = fcat([mark(n) for n in range(count)] + [text("x")])

    assert render(doc) == "x"
    tokens = render_fold(Style(), _tokens, [], doc)
    assert tokens == [Mark(n) for n in range(count)] + [Str("x")]


def test_separators_skip_long_runs_of_empty_items() -> None:
    padding = [empty] * 1500
    assert render(sep([*padding, text("x"), text("y")])) == "x y"
    assert render(cat([*padding, text("x"), text("y")])) == "xy"
    assert render(fsep([*padding, text("x"), *padding, text("y")])) == "x y"


def test_long_compositions_nested_inside_compositions() -> None:
    count = 5000
    row = hcat([text("x") for _ in range(count)])
    column = vcat([text("y") for _ in range(count)])

    assert render(hcat([row, text("!")])) == "x" * count + "!"
    assert render(vcat([column, text("end")])).split("\n") == ["y"] * count + ["end"]


def test_deeply_alternating_compositions() -> None:
    depth = 500
    doc = text("x")
    for _ in range(depth):
        doc = vcat([hcat([doc, text("a")]), text("b")])

    assert render(doc).split("\n") == ["xa"] + ["ba"] * (depth - 1) + ["b"]


def test_deeply_nested_cat_renders_quickly() -> None:
    depth = 150
    doc = _nested_calls(depth)
    style = Style(line_length=30, ribbons_per_line=1.0)

    started = time.perf_counter()
    rendered = render_style(style, doc)
    elapsed = time.perf_counter() - started

    debug_dump_render("nested_calls", _nested_calls(3), style)
    assert elapsed < 10
    assert "".join(rendered.split()) == "f(" * depth + "x" + ")" * depth
    assert all(len(line) <= 30 for line in rendered.split("\n"))
