"""
Exception classes for taskparse.

Grammars themselves never raise: a grammar that does not apply returns None
and the dispatcher moves on. These exceptions are raised only at the public
entry points, once the parser has decided the command line cannot be used.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Params:
        argv: The full argument vector, program name included
        index: Position in argv of the offending argument
    """

    argv: Sequence[str] = field(default_factory=tuple)
    index: int | None = None

    def format_location(self) -> str:
        """
        Format the offending argument and the command line it came from.

        Returns:
            Indented location block, empty if nothing is known
        """
        lines = []

        if self.index is not None and 0 <= self.index < len(self.argv):
            lines.append(f"  at argument {self.index}: {self.argv[self.index]!r}")

        if self.argv:
            lines.append(f"  command: {' '.join(self.argv)}")

        return "\n".join(lines)


class TaskParseError(Exception):
    """Base exception for all taskparse errors."""

    pass


class NoMatchError(TaskParseError):
    """Raised when no subcommand grammar matches the input."""

    def __init__(self, tokens: Sequence[str], context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            tokens: The input tokens, exactly as given (nothing is consumed)
            context: Optional location information
        """
        self.tokens = tuple(tokens)
        self.context = context

        if self.tokens:
            primary_error = f"No command matches arguments: {' '.join(self.tokens)}"
        else:
            primary_error = "No command given"

        location_info = context.format_location() if context else ""
        super().__init__(
            f"{primary_error}\n{location_info}" if location_info else primary_error
        )


class TrailingTokensError(TaskParseError):
    """Raised when a command matched but arguments were left over."""

    def __init__(self, remainder: Sequence[str], context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            remainder: Tokens the matched command did not consume
            context: Optional location information
        """
        self.remainder = tuple(remainder)
        self.context = context

        if self.remainder:
            primary_error = f"Unexpected argument '{self.remainder[0]}'"
        else:
            primary_error = "Unexpected arguments"

        location_info = context.format_location() if context else ""
        super().__init__(
            f"{primary_error}\n{location_info}" if location_info else primary_error
        )


class EmptyCommandLineError(TaskParseError):
    """Raised when the argument vector does not even hold a program name."""

    def __init__(self):
        super().__init__("Command line is empty")


class SettingsError(TaskParseError):
    """Raised when a configuration value is invalid."""

    def __init__(self, key: str, reason: str):
        """
        Initialize the exception.

        Params:
            key: The configuration key
            reason: Why the value was rejected
        """
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid setting '{key}': {reason}")
