"""Tests for the b2fs data model."""

import pytest
from pydantic import ValidationError

from b2fs.schemas import ListingQuery, NormalizedAttributes, RemoteObject


class TestRemoteObject:
    """Test RemoteObject."""

    def test_remote_object_creation(self):
        obj = RemoteObject(
            name="docs/a.md",
            size=12,
            upload_timestamp=1700000000123,
            content_type="text/markdown",
            id="4_z27c88f1d182b150646ff0b16_f1004ba650fe24e6b_d20231114_m220000_c004_v0402000_t0048",
        )
        assert obj.name == "docs/a.md"
        assert obj.size == 12
        assert obj.upload_timestamp == 1700000000123

    def test_remote_object_defaults(self):
        obj = RemoteObject(name="a", size=0)
        assert obj.upload_timestamp is None
        assert obj.content_type is None
        assert obj.id is None

    def test_negative_size_rejected(self):
        with pytest.raises(ValidationError):
            RemoteObject(name="a", size=-1)

    def test_remote_object_is_frozen(self):
        obj = RemoteObject(name="a", size=0)
        with pytest.raises(ValidationError):
            obj.name = "b"


class TestListingQuery:
    """Test ListingQuery normalization and validation."""

    def test_defaults(self):
        query = ListingQuery()
        assert query.directory == ""
        assert query.recursive is False

    def test_none_directory(self):
        assert ListingQuery(directory=None).directory == ""

    def test_slashes_stripped(self):
        assert ListingQuery(directory="/docs/sub/").directory == "docs/sub"

    def test_strict_recursive(self):
        with pytest.raises(ValidationError):
            ListingQuery(directory="docs", recursive=1)

    def test_strict_directory(self):
        with pytest.raises(ValidationError):
            ListingQuery(directory=7)


class TestNormalizedAttributes:
    """Test NormalizedAttributes."""

    def test_type_is_always_file(self):
        attributes = NormalizedAttributes(path="a.txt", size=1)
        assert attributes.type == "file"
        assert attributes.timestamp is None
        assert attributes.mime_type is None

    def test_other_types_rejected(self):
        with pytest.raises(ValidationError):
            NormalizedAttributes(type="dir", path="a", size=0)
