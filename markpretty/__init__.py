"""Marked pretty-printing combinators (Hughes / Peyton Jones layout engine)."""

from markpretty.combinators import (
    above,
    above_strict,
    beside,
    beside_space,
    braces,
    brackets,
    cat,
    double_quotes,
    fcat,
    fill,
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
    sep,
    vcat,
)
from markpretty.doc import (
    Chr,
    Doc,
    Mark,
    Str,
    TextDetails,
    char,
    colon,
    comma,
    dump_doc,
    empty,
    equals,
    float_,
    integer,
    is_empty,
    lbrace,
    lbrack,
    lparen,
    mark,
    rational,
    rbrace,
    rbrack,
    rparen,
    semi,
    sized_text,
    space,
    text,
    zero_width_text,
)
from markpretty.reduce import reduce_doc
from markpretty.render import (
    DEFAULT_STYLE,
    Mode,
    Style,
    TextFolder,
    docs_equal,
    full_render,
    render,
    render_fold,
    render_style,
    txt_printer,
)
from markpretty.select import first

__all__ = [
    "DEFAULT_STYLE",
    "Chr",
    "Doc",
    "Mark",
    "Mode",
    "Str",
    "Style",
    "TextDetails",
    "TextFolder",
    "above",
    "above_strict",
    "beside",
    "beside_space",
    "braces",
    "brackets",
    "cat",
    "char",
    "colon",
    "comma",
    "docs_equal",
    "double_quotes",
    "dump_doc",
    "empty",
    "equals",
    "fcat",
    "fill",
    "first",
    "float_",
    "fsep",
    "full_render",
    "hang",
    "hcat",
    "hsep",
    "integer",
    "is_empty",
    "lbrace",
    "lbrack",
    "lparen",
    "mark",
    "maybe_braces",
    "maybe_brackets",
    "maybe_double_quotes",
    "maybe_parens",
    "maybe_quotes",
    "nest",
    "parens",
    "punctuate",
    "quotes",
    "rational",
    "rbrace",
    "rbrack",
    "reduce_doc",
    "render",
    "render_fold",
    "render_style",
    "rparen",
    "semi",
    "sep",
    "sized_text",
    "space",
    "text",
    "txt_printer",
    "vcat",
    "zero_width_text",
]
