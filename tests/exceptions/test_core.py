"""
Tests for error context and exception messages.
"""

from taskparse.exceptions.core import (
    EmptyCommandLineError,
    ErrorContext,
    NoMatchError,
    SettingsError,
    TaskParseError,
    TrailingTokensError,
)


class TestErrorContext:
    """Tests for ErrorContext formatting."""

    def test_empty_context(self):
        """Test nothing known formats to nothing."""
        assert ErrorContext().format_location() == ""

    def test_argv_only(self):
        """Test the command line is shown."""
        ctx = ErrorContext(argv=("ta", "bogus"))
        assert ctx.format_location() == "  command: ta bogus"

    def test_argv_and_index(self):
        """Test the offending argument is pointed out."""
        ctx = ErrorContext(argv=("ta", "gc", "foo"), index=2)
        assert ctx.format_location() == "  at argument 2: 'foo'\n  command: ta gc foo"

    def test_out_of_range_index_is_ignored(self):
        """Test a bad index does not break formatting."""
        ctx = ErrorContext(argv=("ta",), index=5)
        assert ctx.format_location() == "  command: ta"


class TestExceptions:
    """Tests for exception messages and hierarchy."""

    def test_hierarchy(self):
        """Test every error derives from TaskParseError."""
        for error in [
            NoMatchError(["x"]),
            TrailingTokensError(["x"]),
            EmptyCommandLineError(),
            SettingsError("k", "bad"),
        ]:
            assert isinstance(error, TaskParseError)

    def test_no_match_message(self):
        """Test the no-match message lists the arguments."""
        assert str(NoMatchError(["bogus", "x"])) == "No command matches arguments: bogus x"
        assert str(NoMatchError([])) == "No command given"

    def test_no_match_with_context(self):
        """Test context is appended to the message."""
        error = NoMatchError(["bogus"], ErrorContext(argv=("ta", "bogus")))
        assert str(error) == "No command matches arguments: bogus\n  command: ta bogus"

    def test_trailing_tokens_message(self):
        """Test the first leftover argument is named."""
        error = TrailingTokensError(["foo", "bar"])
        assert error.remainder == ("foo", "bar")
        assert str(error) == "Unexpected argument 'foo'"

    def test_settings_error_message(self):
        """Test settings errors name the key."""
        error = SettingsError("program_name", "must be a non-empty string")
        assert str(error) == "Invalid setting 'program_name': must be a non-empty string"
