"""Reduction engine."""

from markpretty.reduce.lists import reduce_horiz, reduce_vert
from markpretty.reduce.rules import (
    above_nest,
    mk_nest,
    mk_union,
    nil_above_nest,
    nil_beside,
    one_liner,
    reduce_above,
    reduce_beside,
    reduce_doc,
    split_union,
)

__all__ = [
    "above_nest",
    "mk_nest",
    "mk_union",
    "nil_above_nest",
    "nil_beside",
    "one_liner",
    "reduce_above",
    "reduce_beside",
    "reduce_doc",
    "reduce_horiz",
    "reduce_vert",
    "split_union",
]
