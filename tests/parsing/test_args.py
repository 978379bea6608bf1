"""
Tests for argument-level parsers: ids, tags, status and description words.
"""

from taskparse.core.tokens import TokenStream
from taskparse.model import PartialUuid, Status, WorkingSetId
from taskparse.parsing.args import (
    any_word,
    id_list,
    minus_tag,
    parse_task_id,
    plus_tag,
    status_attribute,
)


class TestTaskIds:
    """Tests for single id interpretation."""

    def test_working_set_id(self):
        """Test a positive number is a working-set id."""
        assert parse_task_id("12") == WorkingSetId(id=12)

    def test_zero_is_not_an_id(self):
        """Test working-set ids start at one."""
        assert parse_task_id("0") is None

    def test_partial_uuid(self):
        """Test eight or more hex digits form a uuid prefix."""
        assert parse_task_id("ABCD1234") == PartialUuid(prefix="abcd1234")
        assert parse_task_id("abcd1234-ef") == PartialUuid(prefix="abcd1234-ef")

    def test_full_uuid(self):
        """Test a full uuid is accepted."""
        uuid = "e8d2a3b1-7c4f-4e2a-9b1d-0123456789ab"
        assert parse_task_id(uuid) == PartialUuid(prefix=uuid)

    def test_words_are_not_ids(self):
        """Test ordinary words and short hex strings are rejected."""
        for text in ["list", "abc", "abcdefgh", "", "-3", "1.5"]:
            assert parse_task_id(text) is None, text

    def test_trailing_newline_is_not_an_id(self):
        """Test ids must make up the whole text, newline included."""
        for text in ["12\n", "abcd1234\n", "12\n\n"]:
            assert parse_task_id(text) is None, repr(text)


class TestIdList:
    """Tests for comma-separated id list tokens."""

    def test_single_id(self):
        """Test a lone number."""
        assert id_list(TokenStream.of("123", "modify")) == (
            [WorkingSetId(id=123)],
            TokenStream.of("modify"),
        )

    def test_multiple_ids(self):
        """Test ids separated by commas, mixed forms allowed."""
        ids, rest = id_list(TokenStream.of("12,13,abcd1234"))
        assert ids == [
            WorkingSetId(id=12),
            WorkingSetId(id=13),
            PartialUuid(prefix="abcd1234"),
        ]
        assert rest.is_empty

    def test_bad_item_rejects_token(self):
        """Test one bad item rejects the whole token."""
        assert id_list(TokenStream.of("12,x")) is None
        assert id_list(TokenStream.of("12,")) is None
        assert id_list(TokenStream.of(",12")) is None

    def test_trailing_newline_rejects_token(self):
        """Test a newline-terminated item rejects the whole token."""
        assert id_list(TokenStream.of("12\n")) is None
        assert id_list(TokenStream.of("12,abcd1234\n")) is None

    def test_keyword_is_not_an_id_list(self):
        """Test keywords pass through untouched."""
        assert id_list(TokenStream.of("list")) is None

    def test_empty_stream(self):
        """Test failure at end of input."""
        assert id_list(TokenStream()) is None


class TestTags:
    """Tests for +tag and -tag arguments."""

    def test_plus_tag(self):
        """Test +tag yields the tag name."""
        assert plus_tag(TokenStream.of("+work", "x")) == ("work", TokenStream.of("x"))

    def test_minus_tag(self):
        """Test -tag yields the tag name."""
        assert minus_tag(TokenStream.of("-home")) == ("home", TokenStream())

    def test_sign_must_match(self):
        """Test each parser only accepts its own sign."""
        assert plus_tag(TokenStream.of("-home")) is None
        assert minus_tag(TokenStream.of("+home")) is None

    def test_invalid_tag_names(self):
        """Test tag names must start with a letter."""
        for token in ["+", "+1abc", "--help", "-", "+a:b", "+a b"]:
            stream = TokenStream.of(token)
            assert plus_tag(stream) is None, token
            assert minus_tag(stream) is None, token

    def test_trailing_newline_is_not_a_tag(self):
        """Test tag names must make up the rest of the token."""
        assert plus_tag(TokenStream.of("+tag\n")) is None
        assert minus_tag(TokenStream.of("-tag\n")) is None

    def test_tag_names_may_contain_digits_and_dashes(self):
        """Test tag name continuation characters."""
        assert plus_tag(TokenStream.of("+next-week_2")) == ("next-week_2", TokenStream())


class TestStatusAttribute:
    """Tests for status:<value> arguments."""

    def test_known_statuses(self):
        """Test every status value is recognized."""
        for status in Status:
            token = f"status:{status.value}"
            assert status_attribute(TokenStream.of(token)) == (status, TokenStream())

    def test_unknown_status(self):
        """Test unknown values and other attributes are rejected."""
        assert status_attribute(TokenStream.of("status:waiting")) is None
        assert status_attribute(TokenStream.of("project:home")) is None
        assert status_attribute(TokenStream.of("status")) is None


class TestAnyWord:
    """Tests for the description word parser."""

    def test_consumes_any_token(self):
        """Test any token is a word."""
        assert any_word(TokenStream.of("list", "x")) == ("list", TokenStream.of("x"))

    def test_empty_stream(self):
        """Test failure at end of input."""
        assert any_word(TokenStream()) is None
