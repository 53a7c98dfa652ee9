"""Document model."""

from markpretty.doc.dump import details_repr, dump_doc
from markpretty.doc.model import (
    EMPTY,
    NL_TEXT,
    NO_DOC,
    SPACE_TEXT,
    Above,
    Beside,
    Chr,
    Doc,
    DocOps,
    Delay,
    DocThunk,
    Empty,
    Mark,
    Nest,
    NilAbove,
    NoDoc,
    RDoc,
    Str,
    TextBeside,
    TextDetails,
    Union,
    force,
    resolved,
    unreduced,
)
from markpretty.doc.values import (
    char,
    colon,
    comma,
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

__all__ = [
    "EMPTY",
    "NL_TEXT",
    "NO_DOC",
    "SPACE_TEXT",
    "Above",
    "Beside",
    "Chr",
    "Doc",
    "DocOps",
    "Delay",
    "DocThunk",
    "Empty",
    "Mark",
    "Nest",
    "NilAbove",
    "NoDoc",
    "RDoc",
    "Str",
    "TextBeside",
    "TextDetails",
    "Union",
    "char",
    "colon",
    "comma",
    "details_repr",
    "dump_doc",
    "empty",
    "equals",
    "float_",
    "force",
    "integer",
    "is_empty",
    "lbrace",
    "lbrack",
    "lparen",
    "mark",
    "rational",
    "rbrace",
    "rbrack",
    "resolved",
    "rparen",
    "semi",
    "sized_text",
    "space",
    "text",
    "unreduced",
    "zero_width_text",
]
