"""
taskparse exception classes.

This package provides all exception types raised by the public taskparse
entry points.
"""

from taskparse.exceptions.core import (
    EmptyCommandLineError,
    ErrorContext,
    NoMatchError,
    SettingsError,
    TaskParseError,
    TrailingTokensError,
)

__all__ = [
    "TaskParseError",
    "ErrorContext",
    "EmptyCommandLineError",
    "NoMatchError",
    "SettingsError",
    "TrailingTokensError",
]
