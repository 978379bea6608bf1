"""
Token stream and parser combinators.

A TokenStream is the already-split argument vector (without the program
name). Parsers never mutate it; they return a shorter stream holding the
tokens they did not consume. Failure is signalled with None and always
leaves the caller's stream as it was, so alternatives can be tried in order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any

from attrs import field, frozen

if TYPE_CHECKING:
    from taskparse.core.types import ParseResult, Parser


@frozen
class TokenStream:
    """Immutable sequence of command-line tokens consumed from the front."""

    tokens: tuple[str, ...] = field(default=(), converter=tuple)

    @classmethod
    def of(cls, *tokens: str) -> TokenStream:
        return cls(tokens)

    @property
    def first(self) -> str | None:
        """The next token to be consumed, or None at end of input."""
        return self.tokens[0] if self.tokens else None

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    def advance(self, count: int = 1) -> TokenStream:
        """Return the stream without its first `count` tokens."""
        return TokenStream(self.tokens[count:])

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)


def as_stream(tokens: TokenStream | Iterable[str]) -> TokenStream:
    """Accept either a TokenStream or any iterable of strings."""
    if isinstance(tokens, TokenStream):
        return tokens
    return TokenStream(tuple(tokens))


def match_literal(stream: TokenStream, text: str) -> ParseResult[str]:
    """
    Consume exactly one token if it equals `text` (case-sensitive).

    Params:
        stream: Input stream
        text: Literal the first token must equal

    Returns:
        (matched token, stream advanced by one) or None
    """
    if stream.first == text:
        return stream.first, stream.advance()
    return None


def match_one_of(stream: TokenStream, options: Iterable[str]) -> ParseResult[str]:
    """Consume one token equal to any of `options`; earlier options win."""
    for option in options:
        result = match_literal(stream, option)
        if result is not None:
            return result
    return None


def literal(text: str) -> Parser[str]:
    """Build a parser matching a single literal token."""

    def parse(stream: TokenStream) -> ParseResult[str]:
        return match_literal(stream, text)

    return parse


def one_of(*options: str) -> Parser[str]:
    """Build a parser matching any one of several literal tokens."""

    def parse(stream: TokenStream) -> ParseResult[str]:
        return match_one_of(stream, options)

    return parse


def alt(*parsers: Parser[Any]) -> Parser[Any]:
    """Try each parser against the same input; the first success wins."""

    def parse(stream: TokenStream) -> ParseResult[Any]:
        for parser in parsers:
            result = parser(stream)
            if result is not None:
                return result
        return None

    return parse


def sequence(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Run parsers one after another; fail as a whole if any step fails."""

    def parse(stream: TokenStream) -> ParseResult[tuple[Any, ...]]:
        values = []
        rest = stream
        for parser in parsers:
            result = parser(rest)
            if result is None:
                return None
            value, rest = result
            values.append(value)
        return tuple(values), rest

    return parse


def many0(parser: Parser[Any]) -> Parser[list[Any]]:
    """Apply a parser zero or more times. Never fails."""

    def parse(stream: TokenStream) -> ParseResult[list[Any]]:
        values = []
        rest = stream
        while True:
            result = parser(rest)
            if result is None:
                break
            value, remaining = result
            # A parser that consumes nothing would loop forever
            if len(remaining) == len(rest):
                break
            values.append(value)
            rest = remaining
        return values, rest

    return parse


def map_result(parser: Parser[Any], fn: Callable[[Any], Any]) -> Parser[Any]:
    """Transform a successful parse's value with `fn`."""

    def parse(stream: TokenStream) -> ParseResult[Any]:
        result = parser(stream)
        if result is None:
            return None
        value, rest = result
        return fn(value), rest

    return parse
