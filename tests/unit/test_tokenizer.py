"""Tests for the template tokenizer."""

import pytest

from hintdb.core.types import PlaceholderKind
from hintdb.query.tokenizer import count_placeholders, placeholder_kind, tokenize


class TestTokenize:
    """Tests for tokenize()."""

    def test_alternates_literal_and_placeholder(self):
        """Even indices are literals, odd indices are tags."""
        segments = tokenize("SELECT * FROM ?n WHERE id=?i")
        assert segments == ["SELECT * FROM ", "?n", " WHERE id=", "?i", ""]

    def test_no_placeholders(self):
        """A template without placeholders is a single literal."""
        assert tokenize("SELECT 1") == ["SELECT 1"]

    def test_empty_template(self):
        """Empty template gives one empty literal."""
        assert tokenize("") == [""]

    def test_adjacent_placeholders_keep_empty_literals(self):
        """Adjacent placeholders and string edges produce empty literals."""
        assert tokenize("?s?i") == ["", "?s", "", "?i", ""]

    def test_case_insensitive_tags(self):
        """Upper case tags are recognised and kept as written."""
        assert tokenize("a=?S and b=?I") == ["a=", "?S", " and b=", "?I", ""]

    def test_unknown_tag_is_literal(self):
        """?x sequences outside the grammar stay in the literal text."""
        assert tokenize("a ?x b ?? c ?") == ["a ?x b ?? c ?"]

    @pytest.mark.parametrize(
        "template",
        [
            "SELECT * FROM ?n WHERE a IN (?a) AND b=?s",
            "?p?p?p",
            "INSERT INTO ?N ?V ON CONFLICT DO UPDATE SET ?U",
            "no tags at all ?z",
            "WHERE name = 'What?' AND id = ?i",
        ],
    )
    def test_join_reconstructs_template(self, template):
        """Joining the segments gives back the template exactly."""
        assert "".join(tokenize(template)) == template

    def test_literal_text_case_preserved(self):
        """Literal text is never lower-cased."""
        segments = tokenize("SELECT 'ABC' FROM ?n")
        assert segments[0] == "SELECT 'ABC' FROM "


class TestCountPlaceholders:
    """Tests for count_placeholders()."""

    def test_counts(self):
        assert count_placeholders("") == 0
        assert count_placeholders("?s") == 1
        assert count_placeholders("?n ?s ?i ?a ?u ?v ?p") == 7
        assert count_placeholders("?x ?y ?S") == 1


class TestPlaceholderKind:
    """Tests for placeholder_kind()."""

    def test_maps_tags(self):
        assert placeholder_kind("?n") is PlaceholderKind.IDENTIFIER
        assert placeholder_kind("?V") is PlaceholderKind.INSERT_TUPLE
        assert placeholder_kind("?p") is PlaceholderKind.RAW

    def test_all_kinds(self):
        assert PlaceholderKind.values() == ["n", "s", "i", "a", "u", "v", "p"]
        assert PlaceholderKind.SET_LIST.tag == "?u"
