"""Tests for directory emulation over flat listings."""

import pytest

from b2fs.core.exceptions import InvalidQueryError, ValidationError
from b2fs.objectstorage.listing import (
    PathListingFilter,
    build_query,
    filter_objects,
    matches,
    normalize_attributes,
)
from b2fs.schemas import ListingQuery, RemoteObject


def _objects(*names):
    return [RemoteObject(name=name, size=0) for name in names]


def _names(objects):
    return [obj.name for obj in objects]


class TestFilterObjects:
    """Test the four matching cases on the sample listing."""

    def test_root_non_recursive(self, sample_objects):
        """Only top-level names are listed at the root."""
        assert _names(filter_objects(sample_objects, "", False)) == ["readme.txt"]

    def test_directory_non_recursive(self, sample_objects):
        """Immediate children only, no grandchildren."""
        assert _names(filter_objects(sample_objects, "docs", False)) == ["docs/a.md"]

    def test_directory_recursive(self, sample_objects):
        """All descendants of the directory."""
        result = filter_objects(sample_objects, "docs", True)
        assert _names(result) == ["docs/a.md", "docs/sub/b.md"]

    def test_root_recursive_is_identity(self, sample_objects):
        """A recursive listing from the root returns everything unchanged."""
        assert filter_objects(sample_objects, "", True) == sample_objects

    def test_preserves_input_order(self):
        """Results keep the order of the input listing."""
        objects = _objects("d/z", "d/a", "other", "d/m")
        assert _names(filter_objects(objects, "d", False)) == ["d/z", "d/a", "d/m"]

    def test_empty_listing(self):
        """An empty listing yields an empty result in every case."""
        for directory in ("", "docs"):
            for recursive in (True, False):
                assert filter_objects([], directory, recursive) == []

    def test_unbounded_depth(self):
        """Recursive listing reaches arbitrarily deep descendants."""
        objects = _objects("a/b/c/d/e/f.txt", "a/x.txt", "b/a/y.txt")
        assert _names(filter_objects(objects, "a", True)) == [
            "a/b/c/d/e/f.txt",
            "a/x.txt",
        ]

    def test_sibling_with_shared_prefix_excluded(self):
        """A sibling whose name extends the directory name is not a child."""
        objects = _objects("docs/a.md", "docs2/b.md", "docsfile.txt")
        assert _names(filter_objects(objects, "docs", True)) == ["docs/a.md"]
        assert _names(filter_objects(objects, "docs", False)) == ["docs/a.md"]

    def test_nested_directory(self):
        """A multi-segment directory lists its own children."""
        objects = _objects("a/b/c.txt", "a/b/d/e.txt", "a/f.txt")
        assert _names(filter_objects(objects, "a/b", False)) == ["a/b/c.txt"]
        assert _names(filter_objects(objects, "a/b", True)) == [
            "a/b/c.txt",
            "a/b/d/e.txt",
        ]


class TestLiteralMatching:
    """Directory names never act as patterns."""

    def test_dot_is_literal(self):
        """'a.b' does not match 'axb'."""
        objects = _objects("axb/file", "a.b/file")
        assert _names(filter_objects(objects, "a.b", False)) == ["a.b/file"]
        assert _names(filter_objects(objects, "a.b", True)) == ["a.b/file"]

    def test_parentheses_are_literal(self):
        """'a(b)' matches only the literal name."""
        objects = _objects("ab/file", "a(b)/file", "a(b)/sub/file")
        assert _names(filter_objects(objects, "a(b)", False)) == ["a(b)/file"]
        assert _names(filter_objects(objects, "a(b)", True)) == [
            "a(b)/file",
            "a(b)/sub/file",
        ]

    def test_other_metacharacters(self):
        """Anchors, classes and quantifiers are matched literally."""
        objects = _objects("[a-z]+/x", "abc/x", "^$/y", "q/z")
        assert _names(filter_objects(objects, "[a-z]+", False)) == ["[a-z]+/x"]
        assert _names(filter_objects(objects, "^$", False)) == ["^$/y"]


class TestQueryNormalization:
    """Test how raw arguments become a ListingQuery."""

    def test_none_directory_is_root(self, sample_objects):
        """None is treated the same as the empty directory."""
        assert filter_objects(sample_objects, None, False) == filter_objects(
            sample_objects, "", False
        )

    def test_trailing_slash_ignored(self, sample_objects):
        """'docs/' lists the same as 'docs'."""
        assert filter_objects(sample_objects, "docs/", False) == filter_objects(
            sample_objects, "docs", False
        )

    def test_slash_is_root(self, sample_objects):
        """'/' refers to the bucket root."""
        assert _names(filter_objects(sample_objects, "/", False)) == ["readme.txt"]

    def test_build_query(self):
        """Valid arguments produce a frozen query."""
        query = build_query("docs", True)
        assert query == ListingQuery(directory="docs", recursive=True)

    def test_non_bool_recursive_rejected(self, sample_objects):
        """A truthy non-bool flag is not silently accepted."""
        with pytest.raises(InvalidQueryError):
            filter_objects(sample_objects, "docs", "yes")

    def test_none_recursive_rejected(self, sample_objects):
        with pytest.raises(InvalidQueryError):
            filter_objects(sample_objects, "docs", None)

    def test_non_string_directory_rejected(self, sample_objects):
        with pytest.raises(InvalidQueryError) as exc_info:
            filter_objects(sample_objects, 42, False)

        assert "Invalid listing query" in str(exc_info.value)

    def test_invalid_query_is_validation_error(self):
        """InvalidQueryError belongs to the package's validation errors."""
        with pytest.raises(ValidationError):
            build_query(["docs"], False)


class TestMatches:
    """Test single-name matching."""

    def test_empty_child_name(self):
        """A key ending in the separator is a direct child."""
        query = ListingQuery(directory="docs", recursive=False)
        assert matches("docs/", query) is True

    def test_directory_itself_not_matched(self):
        """An object named exactly like the directory is not inside it."""
        query = ListingQuery(directory="docs", recursive=True)
        assert matches("docs", query) is False


class TestNormalizeAttributes:
    """Test projection onto NormalizedAttributes."""

    def test_timestamp_truncated_to_seconds(self):
        obj = RemoteObject(name="a.txt", size=5, upload_timestamp=1700000000123)
        attributes = normalize_attributes(obj)

        assert attributes.timestamp == 1700000000
        assert attributes.path == "a.txt"
        assert attributes.size == 5
        assert attributes.type == "file"

    def test_missing_timestamp_stays_none(self):
        """An unknown upload time is None, never epoch zero."""
        obj = RemoteObject(name="a.txt", size=5)
        attributes = normalize_attributes(obj)

        assert attributes.timestamp is None

    def test_content_type_carried_as_mime_type(self):
        obj = RemoteObject(name="a.txt", size=5, content_type="text/plain")
        assert normalize_attributes(obj).mime_type == "text/plain"


class TestPathListingFilter:
    """Test the callable wrapper."""

    def test_call_filters(self, sample_objects):
        listing_filter = PathListingFilter()
        assert _names(listing_filter(sample_objects, "docs", True)) == [
            "docs/a.md",
            "docs/sub/b.md",
        ]

    def test_list_attributes(self, sample_objects):
        listing_filter = PathListingFilter()
        attributes = listing_filter.list_attributes(sample_objects, "docs", False)

        assert len(attributes) == 1
        assert attributes[0].path == "docs/a.md"
        assert attributes[0].size == 10
        assert attributes[0].timestamp == 1700000000
