# =============================================================================
# tests/test_utils.py - Shared Utility Tests
# =============================================================================

from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId

from lib.utils import (
    parse_object_id,
    serialize_document,
    slugify,
    to_api_datetime,
    to_storage_datetime,
)


class TestParseObjectId:

    def test_valid(self):
        oid = ObjectId()
        assert parse_object_id(str(oid)) == oid
        assert parse_object_id(oid) is oid

    @pytest.mark.parametrize("value", ["", "123", "not-an-object-id-at-all", None])
    def test_invalid(self, value):
        assert parse_object_id(value) is None


class TestDatetimes:

    def test_storage_is_naive_utc(self):
        aware = datetime(2026, 5, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))

        assert to_storage_datetime(aware) == datetime(2026, 5, 1, 10, 0)

    def test_naive_left_alone(self):
        naive = datetime(2026, 5, 1, 12, 0)
        assert to_storage_datetime(naive) is naive
        assert to_storage_datetime(None) is None

    def test_api_marks_utc(self):
        assert to_api_datetime(datetime(2026, 5, 1)).tzinfo == timezone.utc


class TestSerializeDocument:

    def test_ids_and_nesting(self):
        oid, ref = ObjectId(), ObjectId()
        doc = {
            "_id": oid,
            "name": "Tray",
            "ref": ref,
            "items": [{"product": ref, "at": datetime(2026, 1, 1)}],
        }

        result = serialize_document(doc)

        assert result["id"] == str(oid)
        assert "_id" not in result
        assert result["ref"] == str(ref)
        assert result["items"][0]["product"] == str(ref)
        assert result["items"][0]["at"].tzinfo == timezone.utc

    def test_none(self):
        assert serialize_document(None) is None


class TestSlugify:

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("Party Platters & Trays", "party-platters-trays"),
            ("  Hot   Soups  ", "hot-soups"),
            ("Café", "caf"),
            ("!!!", ""),
        ],
    )
    def test_slugify(self, value, expected):
        assert slugify(value) == expected
