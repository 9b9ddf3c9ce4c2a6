"""Tests for core data models."""

import pytest

from terpenelens.core.models import (
    CanonicalRecord,
    FieldSource,
    FilterMode,
    FilterSnapshot,
    TranslationBundle,
    TranslationOverlay,
)


def test_canonical_record_immutable():
    """Test that CanonicalRecord is frozen."""
    record = CanonicalRecord(
        id="t1",
        name="Myrcene",
        description="Earthy terpene found in hops.",
        aroma="Earthy",
        effects=["Sedative", "Muscle relaxant"],
        sources=["Hops", "Mango"],
    )

    with pytest.raises(Exception):  # FrozenInstanceError
        record.name = "Changed"


def test_record_lists_become_tuples() -> None:
    record = CanonicalRecord(id="t1", effects=["Sedative"], therapeutic_properties=["Analgesic"])
    assert record.effects == ("Sedative",)
    assert record.therapeutic_properties == ("Analgesic",)
    assert record.sources == ()


def test_record_from_dict_accepts_camel_case() -> None:
    record = CanonicalRecord.from_dict(
        {
            "id": "t2",
            "name": "Limonene",
            "description": "Citrus terpene.",
            "aroma": "Citrus",
            "effects": ["Uplifting"],
            "therapeuticProperties": ["Antidepressant"],
            "sources": ["Lemon peel"],
            "notableDifferences": "Brighter than pinene.",
            "boilingPoint": 176,
        }
    )
    assert record.therapeutic_properties == ("Antidepressant",)
    assert record.notable_differences == "Brighter than pinene."
    assert record.taste is None
    assert record.metadata["boilingPoint"] == 176


def test_overlay_from_dict_ignores_unknown_keys() -> None:
    overlay = TranslationOverlay.from_dict({"name": "Limonen", "colour": "gelb"})
    assert overlay.name == "Limonen"
    assert overlay.supplied_fields() == ("name",)


def test_empty_overlay_supplies_nothing() -> None:
    assert TranslationOverlay.from_dict(None).supplied_fields() == ()
    assert TranslationOverlay().supplied_fields() == ()


def test_bundle_from_translation_file() -> None:
    bundle = TranslationBundle.from_dict(
        {
            "language": "de",
            "version": "1.2.0",
            "terpenes": {"t1": {"aroma": "Erdig", "effects": ["Beruhigend"]}},
        }
    )
    assert bundle.language == "de"
    assert bundle.version == "1.2.0"
    assert bundle.overlays["t1"].effects == ("Beruhigend",)


def test_snapshot_counts_active_filters() -> None:
    snapshot = FilterSnapshot(
        search_query="lem",
        selected_effects=frozenset({"Focus", "Alertness"}),
        selected_categories=frozenset({"cognitive"}),
        effect_filter_mode=FilterMode.ANY,
        query_active=True,
    )
    assert snapshot.active_filter_count == 3
    assert snapshot.has_active_filters


def test_enum_values() -> None:
    """Test enum wire values."""
    assert FilterMode.ANY.value == "any"
    assert FilterMode.ALL.value == "all"
    assert FilterMode("all") is FilterMode.ALL
    assert FieldSource.OVERLAY.value == "overlay"
    assert FieldSource.CANONICAL.value == "canonical"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
