"""
Tests for modification parsing.
"""

from taskparse.core.tokens import TokenStream
from taskparse.model import DescriptionMod, DescriptionModKind, Modification
from taskparse.parsing.modification import parse_modification


class TestParseModification:
    """Tests for parse_modification."""

    def test_empty_input_is_no_change(self):
        """Test an empty modification changes nothing."""
        modification, rest = parse_modification(TokenStream())
        assert modification == Modification()
        assert modification.description.kind == DescriptionModKind.UNSET
        assert modification.status is None
        assert modification.active is None
        assert rest.is_empty

    def test_words_are_joined_with_single_spaces(self):
        """Test description words become one set description."""
        modification, rest = parse_modification(TokenStream.of("foo", "bar"))
        assert modification == Modification(description=DescriptionMod.set("foo bar"))
        assert rest.is_empty

    def test_keywords_are_description_words(self):
        """Test command keywords after the modification start are plain words."""
        modification, _ = parse_modification(TokenStream.of("list", "the", "gc"))
        assert modification.description == DescriptionMod.set("list the gc")

    def test_tags(self):
        """Test +tag and -tag change tags instead of the description."""
        modification, _ = parse_modification(
            TokenStream.of("+work", "call", "-home", "bob", "+work")
        )
        assert modification == Modification(
            description=DescriptionMod.set("call bob"),
            add_tags=frozenset({"work"}),
            remove_tags=frozenset({"home"}),
        )

    def test_tags_only_leave_description_unset(self):
        """Test a tag-only modification does not touch the description."""
        modification, _ = parse_modification(TokenStream.of("+urgent"))
        assert modification.description == DescriptionMod.unset()
        assert modification.add_tags == frozenset({"urgent"})

    def test_never_produces_append_or_prepend(self):
        """Test reclassification is left to the modify keywords."""
        modification, _ = parse_modification(TokenStream.of("append", "prepend"))
        assert modification.description.kind == DescriptionModKind.SET
