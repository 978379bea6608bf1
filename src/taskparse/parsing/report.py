"""Report parsing: a report is currently just a filter."""

from taskparse.core.tokens import TokenStream
from taskparse.core.types import ParseResult
from taskparse.model import Report
from taskparse.parsing.filter import parse_filter


def parse_report(stream: TokenStream) -> ParseResult[Report]:
    """Parse a report's filter; never fails."""
    filter_, rest = parse_filter(stream)
    return Report(filter=filter_), rest
