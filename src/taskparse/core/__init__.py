"""
Core taskparse components.

This package provides the token stream every parser consumes and the small
set of combinators the grammars are assembled from.
"""

from taskparse.core.tokens import (
    TokenStream,
    alt,
    as_stream,
    literal,
    many0,
    map_result,
    match_literal,
    match_one_of,
    one_of,
    sequence,
)
from taskparse.core.types import ParseResult, Parser

__all__ = [
    "TokenStream",
    "ParseResult",
    "Parser",
    "alt",
    "as_stream",
    "literal",
    "many0",
    "map_result",
    "match_literal",
    "match_one_of",
    "one_of",
    "sequence",
]
