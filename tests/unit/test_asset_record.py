"""Tests for the asset record entity."""

from neo_assets.platform.assets.core.entities import AssetRecord, AssetState, strip_protected_fields


class TestAssetRecord:
    """Test record conversion and protected fields."""

    def test_round_trip_through_dict_keeps_attributes(self):
        record = AssetRecord(
            id="a1",
            repository_name="local",
            path="a1.png",
            type="image",
            subtype="png",
            size_bytes=1024,
            has_thumbnail=True,
            attributes={"title": "Logo"},
        )

        restored = AssetRecord.from_dict(record.to_dict())

        assert restored == record
        assert restored.state == AssetState.ACTIVE
        assert restored.content_type == "image/png"

    def test_uncommitted_record_state(self):
        record = AssetRecord.from_dict({"title": "Draft"})

        assert record.state == AssetState.UNCOMMITTED
        assert record.attributes == {"title": "Draft"}
        assert record.mime_type is None

    def test_apply_puts_unknown_keys_in_attributes(self):
        record = AssetRecord(id="a1")

        record.apply({"resolution": "10x10", "tags": ["x"]})

        assert record.resolution == "10x10"
        assert record.attributes["tags"] == ["x"]

    def test_strip_protected_fields_drops_path(self):
        values = strip_protected_fields({
            "path": "../../etc/passwd",
            "id": "other",
            "has_thumbnail": True,
            "title": "kept",
        })

        assert values == {"title": "kept"}
