"""
taskparse - command-line argument grammar for a task-tracking tool

taskparse turns a flat list of command-line arguments into one structured
subcommand value plus whatever arguments were not consumed.
"""

from importlib.metadata import version

from taskparse.config import ParserSettings
from taskparse.exceptions import NoMatchError, TaskParseError
from taskparse.parsing import (
    Command,
    Subcommand,
    describe_subcommands,
    parse_subcommand,
)
from taskparse.usage import Usage

__version__ = version("taskparse")

__all__ = [
    "__version__",
    "Command",
    "NoMatchError",
    "ParserSettings",
    "Subcommand",
    "TaskParseError",
    "Usage",
    "describe_subcommands",
    "parse_subcommand",
]
