import pytest

from markpretty import (
    Style,
    above,
    above_strict,
    beside,
    beside_space,
    braces,
    brackets,
    cat,
    comma,
    double_quotes,
    empty,
    fcat,
    fsep,
    hang,
    hcat,
    hsep,
    maybe_braces,
    maybe_brackets,
    maybe_double_quotes,
    maybe_parens,
    maybe_quotes,
    nest,
    parens,
    punctuate,
    quotes,
    render,
    render_style,
    sep,
    text,
    vcat,
)
from tests._debug import debug_dump_render
from tests._shared_cases import DOC_CASES, DocCase, case_id


def _words(sentence: str):
    return [text(word) for word in sentence.split()]


def test_parens_around_spaced_pair() -> None:
    assert render(parens(beside_space(text("a"), text("b")))) == "(a b)"


@pytest.mark.parametrize(
    ("wrap", "expected"),
    [
        (parens, "(x)"),
        (brackets, "[x]"),
        (braces, "{x}"),
        (quotes, "'x'"),
        (double_quotes, '"x"'),
    ],
)
def test_delimiters(wrap, expected: str) -> None:
    assert render(wrap(text("x"))) == expected


@pytest.mark.parametrize(
    ("wrap", "expected"),
    [
        (maybe_parens, "(x)"),
        (maybe_brackets, "[x]"),
        (maybe_braces, "{x}"),
        (maybe_quotes, "'x'"),
        (maybe_double_quotes, '"x"'),
    ],
)
def test_maybe_delimiters(wrap, expected: str) -> None:
    assert render(wrap(True, text("x"))) == expected
    assert render(wrap(False, text("x"))) == "x"


def test_punctuate_then_hcat() -> None:
    items = punctuate(comma, _words("a b c"))
    assert len(items) == 3
    assert render(hcat(items)) == "a,b,c"
    assert render(hsep(items)) == "a, b, c"


def test_punctuate_edge_cases() -> None:
    assert punctuate(comma, []) == []
    (only,) = punctuate(comma, [text("solo")])
    assert render(only) == "solo"


def test_sep_puts_everything_on_one_line_when_it_fits() -> None:
    doc = sep(_words("aaaa bbbb cccc"))
    style = Style(line_length=20, ribbons_per_line=1.0)
    debug_dump_render("sep_fits", doc, style)
    assert render_style(style, doc) == "aaaa bbbb cccc"


def test_sep_stacks_everything_when_it_does_not_fit() -> None:
    doc = sep(_words("aaaa bbbb cccc"))
    style = Style(line_length=6)
    debug_dump_render("sep_wraps", doc, style)
    assert render_style(style, doc) == "aaaa\nbbbb\ncccc"


def test_sep_respects_the_ribbon() -> None:
    style = Style(line_length=100, ribbons_per_line=10)
    assert style.ribbon_width == 10

    assert render_style(style, sep([text("aaaa"), text("bbbbb")])) == "aaaa bbbbb"
    assert render_style(style, sep([text("aaaa"), text("bbbbbb")])) == "aaaa\nbbbbbb"


def test_cat_joins_without_spaces() -> None:
    doc = cat(_words("ab cd ef"))
    assert render_style(Style(line_length=20, ribbons_per_line=1.0), doc) == "abcdef"
    assert render_style(Style(line_length=4, ribbons_per_line=1.0), doc) == "ab\ncd\nef"


def test_hang_moves_body_below_when_too_wide() -> None:
    doc = hang(text("let"), 2, text("x = 1"))
    assert render_style(Style(line_length=20, ribbons_per_line=1.0), doc) == "let x = 1"
    assert render_style(Style(line_length=5, ribbons_per_line=1.0), doc) == "let\n  x = 1"


def test_fsep_fills_lines() -> None:
    doc = fsep(_words("aaaa bbbb cccc"))
    style = Style(line_length=10, ribbons_per_line=1.0)
    debug_dump_render("fsep", doc, style)
    assert render_style(style, doc) == "aaaa bbbb\ncccc"


def test_fcat_fills_lines_without_spaces() -> None:
    doc = fcat(_words("aa bb cc"))
    assert render_style(Style(line_length=20, ribbons_per_line=1.0), doc) == "aabbcc"


def test_fsep_of_long_paragraph_never_exceeds_page_for_short_words() -> None:
    doc = fsep(_words("lorem ipsum dolor sit amet consectetur adipiscing elit " * 6))
    style = Style(line_length=30, ribbons_per_line=1.0)
    lines = render_style(style, doc).split("\n")

    assert len(lines) > 1
    assert all(len(line) <= 30 for line in lines)
    assert " ".join(lines).split() == ("lorem ipsum dolor sit amet consectetur adipiscing elit " * 6).split()


def test_above_overlaps_when_the_second_line_starts_further_right() -> None:
    assert render(above(text("hi"), nest(5, text("there")))) == "hi   there"
    assert render(above_strict(text("hi"), nest(5, text("there")))) == "hi\n     there"


def test_above_does_not_overlap_when_lines_collide() -> None:
    assert render(above(text("hello"), nest(2, text("x")))) == "hello\n  x"


def test_negative_nesting_inside_beside() -> None:
    doc = beside(text("ab"), nest(-5, above(text("cde"), text("f"))))
    assert render(doc) == "abcde\n  f"


def test_nested_block_layout() -> None:
    doc = vcat([text("{"), nest(4, vcat(_words("a b"))), text("}")])
    assert render(doc) == "{   a\n    b\n}"
    strict = above_strict(above_strict(text("{"), nest(4, vcat(_words("a b")))), text("}"))
    assert render(strict) == "{\n    a\n    b\n}"
    assert render(doc) != render(strict)


def test_nest_of_empty_stays_empty() -> None:
    assert nest(3, empty) is empty
    assert render(beside(text("a"), nest(3, empty))) == "a"


@pytest.mark.parametrize("case", DOC_CASES, ids=case_id)
def test_every_sample_renders_in_every_width(case: DocCase) -> None:
    doc = case.build()
    for width in (1, 10, 40, 100):
        rendered = render_style(Style(line_length=width), doc)
        assert isinstance(rendered, str)
