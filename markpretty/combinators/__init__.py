"""Layout combinators."""

from markpretty.combinators.compose import (
    above,
    above_strict,
    beside,
    beside_space,
    hcat,
    hsep,
    nest,
    punctuate,
    vcat,
)
from markpretty.combinators.delimiters import (
    braces,
    brackets,
    double_quotes,
    maybe_braces,
    maybe_brackets,
    maybe_double_quotes,
    maybe_parens,
    maybe_quotes,
    parens,
    quotes,
)
from markpretty.combinators.fill import fcat, fill, fsep
from markpretty.combinators.sep import cat, hang, sep

__all__ = [
    "above",
    "above_strict",
    "beside",
    "beside_space",
    "braces",
    "brackets",
    "cat",
    "double_quotes",
    "fcat",
    "fill",
    "fsep",
    "hang",
    "hcat",
    "hsep",
    "maybe_braces",
    "maybe_brackets",
    "maybe_double_quotes",
    "maybe_parens",
    "maybe_quotes",
    "nest",
    "parens",
    "punctuate",
    "quotes",
    "sep",
    "vcat",
]
