"""
taskparse parsing components.

This package provides the argument-level parsers, the filter, modification
and report parsers, the subcommand grammars with their dispatcher, and the
whole-command-line entry point.
"""

from taskparse.parsing.command import Command
from taskparse.parsing.filter import parse_filter
from taskparse.parsing.modification import parse_modification
from taskparse.parsing.report import parse_report
from taskparse.parsing.subcommand import (
    GRAMMARS,
    Add,
    Gc,
    Grammar,
    Help,
    Info,
    List,
    Modify,
    Subcommand,
    Sync,
    Version,
    apply_modify_keyword,
    describe_subcommands,
    parse_subcommand,
    try_parse_subcommand,
)

__all__ = [
    "Command",
    "GRAMMARS",
    "Grammar",
    "Subcommand",
    "Version",
    "Help",
    "Add",
    "Modify",
    "List",
    "Info",
    "Gc",
    "Sync",
    "apply_modify_keyword",
    "describe_subcommands",
    "parse_filter",
    "parse_modification",
    "parse_report",
    "parse_subcommand",
    "try_parse_subcommand",
]
