"""
Whole command-line parsing.

The subcommand dispatcher returns leftover arguments to its caller. This
module is that caller for a real argument vector: it strips the program
name, dispatches, and applies the configured policy for leftovers.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from taskparse.config import ParserSettings
from taskparse.core.tokens import TokenStream
from taskparse.exceptions.core import (
    EmptyCommandLineError,
    ErrorContext,
    NoMatchError,
    TrailingTokensError,
)
from taskparse.parsing.subcommand import Subcommand, try_parse_subcommand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Command:
    """
    A fully parsed command line.

    Params:
        command_name: The program name the tool was invoked as
        subcommand: What the user asked for
    """

    command_name: str
    subcommand: Subcommand

    @classmethod
    def from_argv(
        cls, argv: Sequence[str], settings: ParserSettings | None = None
    ) -> "Command":
        """
        Parse a full argument vector, program name first.

        Params:
            argv: e.g. sys.argv
            settings: Parser settings; defaults apply when omitted

        Returns:
            The parsed Command

        Raises:
            EmptyCommandLineError: If argv is empty
            NoMatchError: If no subcommand matches the arguments
            TrailingTokensError: If arguments are left over and the
                settings do not allow it
        """
        if not argv:
            raise EmptyCommandLineError()

        settings = settings or ParserSettings()
        argv = tuple(argv)
        stream = TokenStream(argv[1:])

        result = try_parse_subcommand(stream)
        if result is None:
            raise NoMatchError(stream.tokens, ErrorContext(argv=argv))
        subcommand, rest = result

        if not rest.is_empty:
            if not settings.allow_trailing_tokens:
                index = len(argv) - len(rest)
                raise TrailingTokensError(
                    rest.tokens, ErrorContext(argv=argv, index=index)
                )
            logger.debug("Ignoring trailing arguments %r", rest.tokens)

        return cls(command_name=argv[0], subcommand=subcommand)

    @classmethod
    def from_args(
        cls, args: Sequence[str], settings: ParserSettings | None = None
    ) -> "Command":
        """Parse arguments without a program name, using the configured one."""
        settings = settings or ParserSettings()
        return cls.from_argv([settings.program_name, *args], settings)
