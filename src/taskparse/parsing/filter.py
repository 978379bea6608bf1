"""
Filter parsing.

A filter is the run of leading arguments that say which tasks a command
applies to. It may be empty, in which case the default filter (all pending
tasks) is produced and nothing is consumed.
"""

from taskparse.core.tokens import TokenStream, alt, many0, map_result
from taskparse.core.types import ParseResult
from taskparse.model import Filter, HasTag, NoTag, StatusIs, Universe
from taskparse.parsing.args import id_list, minus_tag, plus_tag, status_attribute

_filter_argument = alt(
    id_list,
    map_result(plus_tag, lambda tag: HasTag(tag=tag)),
    map_result(minus_tag, lambda tag: NoTag(tag=tag)),
    map_result(status_attribute, lambda status: StatusIs(status=status)),
)


def parse_filter(stream: TokenStream) -> ParseResult[Filter]:
    """
    Parse zero or more filter arguments from the front of the stream.

    Id lists anywhere in the prefix are merged, in order, into one id-list
    universe. Everything else becomes a condition.

    Params:
        stream: Input stream

    Returns:
        (Filter, remainder). Never fails.
    """
    arguments, rest = many0(_filter_argument)(stream)

    ids = []
    conditions = []
    for argument in arguments:
        if isinstance(argument, list):
            ids.extend(argument)
        else:
            conditions.append(argument)

    universe = Universe.id_list(ids) if ids else Universe.pending_tasks()
    return Filter(universe=universe, conditions=tuple(conditions)), rest
