"""
Core type definitions for the taskparse argument grammar.

Every parser in the package has the same shape: it receives a token stream
and returns either the parsed value plus the unconsumed remainder, or None.
"""

from typing import Callable, Optional, TypeVar

from taskparse.core.tokens import TokenStream

T = TypeVar("T")

ParseResult = Optional[tuple[T, TokenStream]]

Parser = Callable[[TokenStream], ParseResult[T]]
