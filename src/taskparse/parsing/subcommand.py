"""
Subcommand grammars and the dispatcher.

A subcommand is the specific operation the tool should execute. Each
subcommand form has a grammar (`parse_*`) that either matches a prefix of
the arguments or returns None, and a describer (`describe_*`) that adds its
keyword forms to a usage registry. A grammar may recognize several keywords
but always produces the one variant it is named after.

The dispatcher tries the grammars in a fixed order and the first match
wins. Filter-prefixed forms (modify, list, info) accept an empty filter, so
they are tried after the keyword-first forms.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from attrs import frozen

from taskparse.core.tokens import (
    TokenStream,
    as_stream,
    literal,
    map_result,
    one_of,
    sequence,
)
from taskparse.core.types import ParseResult, Parser
from taskparse.exceptions.core import NoMatchError
from taskparse.model import DescriptionMod, Filter, Modification, Report, Status
from taskparse.parsing.filter import parse_filter
from taskparse.parsing.modification import parse_modification
from taskparse.parsing.report import parse_report
from taskparse.usage import Usage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Version:
    """Display the tool version."""


@dataclass(frozen=True)
class Help:
    """Display the help output; `summary` asks for the short form."""

    summary: bool = False


@dataclass(frozen=True)
class Add:
    """Add a new task."""

    modification: Modification


@dataclass(frozen=True)
class Modify:
    """Modify existing tasks."""

    filter: Filter
    modification: Modification


@dataclass(frozen=True)
class List:
    """List tasks matching a report."""

    report: Report


@dataclass(frozen=True)
class Info:
    """Per-task information (typically one task)."""

    filter: Filter
    debug: bool = False


@dataclass(frozen=True)
class Gc:
    """Refresh the working set."""


@dataclass(frozen=True)
class Sync:
    """Synchronize the replica."""


Subcommand = Version | Help | Add | Modify | List | Info | Gc | Sync


# Version


def parse_version(stream: TokenStream) -> ParseResult[Subcommand]:
    return map_result(one_of("version", "--version"), lambda _: Version())(stream)


def describe_version(usage: Usage) -> None:
    usage.add_subcommand(
        name="version",
        syntax="version",
        summary="Show the tool version",
        description="Show the version of the task tool",
    )


# Help


def parse_help(stream: TokenStream) -> ParseResult[Subcommand]:
    # -h asks for the short summary, help and --help for the full text
    return map_result(
        one_of("help", "--help", "-h"), lambda keyword: Help(summary=keyword == "-h")
    )(stream)


def describe_help(usage: Usage) -> None:
    pass


# Add


def parse_add(stream: TokenStream) -> ParseResult[Subcommand]:
    return map_result(
        sequence(literal("add"), parse_modification),
        lambda values: Add(modification=values[1]),
    )(stream)


def describe_add(usage: Usage) -> None:
    usage.add_subcommand(
        name="add",
        syntax="add [modification]",
        summary="Add a new task",
        description="""
            Add a new, pending task to the list of tasks.  The modification must include a
            description.""",
    )


# Modify

MODIFY_KEYWORDS = ("modify", "prepend", "append", "start", "stop", "done")


def apply_modify_keyword(keyword: str, modification: Modification) -> Modification:
    """
    Adjust a parsed modification according to the keyword that introduced it.

    `prepend` and `append` only reclassify a plain "set" description; any
    other description is left as parsed. `start`, `stop` and `done` set
    their flag regardless of the description. `modify` changes nothing.

    Params:
        keyword: One of MODIFY_KEYWORDS
        modification: The modification as parsed

    Returns:
        The adjusted modification (a new value; the input is not changed)
    """
    description = modification.description

    if keyword == "prepend":
        if description.is_set:
            return modification.model_copy(
                update={"description": DescriptionMod.prepend(description.text)}
            )
    elif keyword == "append":
        if description.is_set:
            return modification.model_copy(
                update={"description": DescriptionMod.append(description.text)}
            )
    elif keyword == "start":
        return modification.model_copy(update={"active": True})
    elif keyword == "stop":
        return modification.model_copy(update={"active": False})
    elif keyword == "done":
        return modification.model_copy(update={"status": Status.COMPLETED})

    return modification


def parse_modify(stream: TokenStream) -> ParseResult[Subcommand]:
    def to_subcommand(values):
        filter_, keyword, modification = values
        return Modify(
            filter=filter_,
            modification=apply_modify_keyword(keyword, modification),
        )

    return map_result(
        sequence(parse_filter, one_of(*MODIFY_KEYWORDS), parse_modification),
        to_subcommand,
    )(stream)


def describe_modify(usage: Usage) -> None:
    usage.add_subcommand(
        name="modify",
        syntax="[filter] modify [modification]",
        summary="Modify tasks",
        description="""
            Modify all tasks matching the filter.""",
    )
    usage.add_subcommand(
        name="prepend",
        syntax="[filter] prepend [modification]",
        summary="Prepend task description",
        description="""
            Modify all tasks matching the filter by inserting the given description before each
            task's description.""",
    )
    usage.add_subcommand(
        name="append",
        syntax="[filter] append [modification]",
        summary="Append task description",
        description="""
            Modify all tasks matching the filter by adding the given description to the end
            of each task's description.""",
    )
    usage.add_subcommand(
        name="start",
        syntax="[filter] start [modification]",
        summary="Start tasks",
        description="""
            Start all tasks matching the filter, additionally applying any given modifications.""",
    )
    usage.add_subcommand(
        name="stop",
        syntax="[filter] stop [modification]",
        summary="Stop tasks",
        description="""
            Stop all tasks matching the filter, additionally applying any given modifications.""",
    )
    usage.add_subcommand(
        name="done",
        syntax="[filter] done [modification]",
        summary="Mark tasks as completed",
        description="""
            Mark all tasks matching the filter as completed, additionally applying any given
            modifications.""",
    )


# List


def parse_list(stream: TokenStream) -> ParseResult[Subcommand]:
    # The keyword follows the report's filter
    return map_result(
        sequence(parse_report, literal("list")),
        lambda values: List(report=values[0]),
    )(stream)


def describe_list(usage: Usage) -> None:
    usage.add_subcommand(
        name="list",
        syntax="[filter] list",
        summary="List tasks",
        description="Show a list of the tasks matching the filter",
    )


# Info


def parse_info(stream: TokenStream) -> ParseResult[Subcommand]:
    return map_result(
        sequence(parse_filter, one_of("info", "debug")),
        lambda values: Info(filter=values[0], debug=values[1] == "debug"),
    )(stream)


def describe_info(usage: Usage) -> None:
    usage.add_subcommand(
        name="info",
        syntax="[filter] info",
        summary="Show tasks",
        description="Show information about all tasks matching the filter.",
    )
    usage.add_subcommand(
        name="debug",
        syntax="[filter] debug",
        summary="Show task debug details",
        description="Show all key/value properties of the tasks matching the filter.",
    )


# Gc


def parse_gc(stream: TokenStream) -> ParseResult[Subcommand]:
    # Anything after "gc" is left for the caller to judge
    return map_result(literal("gc"), lambda _: Gc())(stream)


def describe_gc(usage: Usage) -> None:
    usage.add_subcommand(
        name="gc",
        syntax="gc",
        summary="Perform 'garbage collection'",
        description="""
            Perform 'garbage collection'.  This refreshes the list of pending tasks
            and their short id's.""",
    )


# Sync


def parse_sync(stream: TokenStream) -> ParseResult[Subcommand]:
    return map_result(literal("sync"), lambda _: Sync())(stream)


def describe_sync(usage: Usage) -> None:
    usage.add_subcommand(
        name="sync",
        syntax="sync",
        summary="Synchronize this replica",
        description="""
            Synchronize this replica locally or against a remote server, as configured.

            Synchronization is a critical part of maintaining the task database, and should
            be done regularly, even if only locally.  It is typically run in a crontask.""",
    )


@frozen
class Grammar:
    """One subcommand form: its parser and its usage describer."""

    name: str
    parse: Parser[Subcommand]
    describe: Callable[[Usage], None]


# Dispatch order matters: keyword-first forms before filter-prefixed ones
GRAMMARS: tuple[Grammar, ...] = (
    Grammar("version", parse_version, describe_version),
    Grammar("help", parse_help, describe_help),
    Grammar("add", parse_add, describe_add),
    Grammar("modify", parse_modify, describe_modify),
    Grammar("list", parse_list, describe_list),
    Grammar("info", parse_info, describe_info),
    Grammar("gc", parse_gc, describe_gc),
    Grammar("sync", parse_sync, describe_sync),
)


def try_parse_subcommand(stream: TokenStream) -> ParseResult[Subcommand]:
    """
    Try every grammar in order and return the first match.

    Params:
        stream: The arguments after the program name

    Returns:
        (Subcommand, remainder), or None if no grammar matches
    """
    for grammar in GRAMMARS:
        result = grammar.parse(stream)
        if result is not None:
            logger.debug(
                "Matched %s grammar, %d argument(s) left", grammar.name, len(result[1])
            )
            return result
    logger.debug("No grammar matched %r", stream.tokens)
    return None


def parse_subcommand(
    tokens: TokenStream | Iterable[str],
) -> tuple[Subcommand, TokenStream]:
    """
    Parse the arguments into a subcommand.

    Leftover arguments are returned rather than rejected; whether they are
    an error is up to the caller.

    Params:
        tokens: The arguments after the program name

    Returns:
        (Subcommand, remainder)

    Raises:
        NoMatchError: If no grammar matches; the error carries the input
    """
    stream = as_stream(tokens)
    result = try_parse_subcommand(stream)
    if result is None:
        raise NoMatchError(stream.tokens)
    return result


def describe_subcommands(usage: Usage) -> None:
    """Add usage entries for every subcommand form, in dispatch order."""
    for grammar in GRAMMARS:
        grammar.describe(usage)
