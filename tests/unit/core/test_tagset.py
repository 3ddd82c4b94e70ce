"""Tests for TagSet."""

from __future__ import annotations

import pytest

from torrentview.core.tagset import TagSet, validate_tag
from torrentview.utils.exceptions import TagError, ValidationError

pytestmark = [pytest.mark.unit]


class TestValidateTag:
    """Tests for validate_tag."""

    def test_strips_whitespace(self):
        assert validate_tag("  linux ") == "linux"

    @pytest.mark.parametrize("tag", ["", "   ", "a,b"])
    def test_rejects_invalid(self, tag):
        """Empty tags and tags containing the separator are rejected."""
        with pytest.raises(TagError):
            validate_tag(tag)

    def test_tag_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            validate_tag("")


class TestTagSet:
    """Tests for TagSet behaviour."""

    def test_sorted_and_deduplicated(self):
        """Iteration is sorted with duplicates removed."""
        tags = TagSet(["b", "a", "b", " a "])
        assert list(tags) == ["a", "b"]
        assert len(tags) == 2

    def test_contains(self):
        tags = TagSet(["movies"])
        assert "movies" in tags
        assert "music" not in tags
        assert 42 not in tags

    def test_equality_and_hash(self):
        """Sets with the same tags compare and hash equal."""
        assert TagSet(["x", "y"]) == TagSet(["y", "x"])
        assert hash(TagSet(["x", "y"])) == hash(TagSet(["y", "x"]))
        assert TagSet(["x"]) != TagSet(["y"])

    def test_with_and_without(self):
        """Modifications return new sets and leave the original alone."""
        original = TagSet(["a"])
        added = original.with_tag("b")
        assert list(added) == ["a", "b"]
        assert list(original) == ["a"]
        assert list(added.without_tag("a")) == ["b"]

    def test_empty(self):
        assert list(TagSet()) == []
        assert repr(TagSet()) == "TagSet([])"
