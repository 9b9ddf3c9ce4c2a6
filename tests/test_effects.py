"""Tests for the effect vocabulary summary."""

from terpenelens.core.categories import CategoryCatalog
from terpenelens.core.effects import build_effect_list, effects_by_category
from terpenelens.core.models import CanonicalRecord


def _records() -> list[CanonicalRecord]:
    return [
        CanonicalRecord(id="t1", name="Myrcene", effects=("Sedative", "Muscle relaxant")),
        CanonicalRecord(id="t2", name="Linalool", effects=("Sedative", "Anxiety relief")),
        CanonicalRecord(id="t3", name="Rare", effects=("Glowing", "Sedative", "Sedative")),
    ]


def test_effects_counted_once_per_record_and_sorted() -> None:
    summaries = build_effect_list(_records(), CategoryCatalog.load())
    assert [(s.name, s.count) for s in summaries] == [
        ("Sedative", 3),
        ("Anxiety relief", 1),
        ("Glowing", 1),
        ("Muscle relaxant", 1),
    ]


def test_categories_and_display_names() -> None:
    summaries = build_effect_list(
        _records(),
        CategoryCatalog.load(),
        display_names={"Sedative": {"de": "Beruhigend"}},
    )
    by_name = {s.name: s for s in summaries}
    assert by_name["Sedative"].category_id == "relaxation"
    assert by_name["Muscle relaxant"].category_id == "physical"
    assert by_name["Glowing"].category_id is None
    assert by_name["Sedative"].display_name("de") == "Beruhigend"
    assert by_name["Sedative"].display_name("en") == "Sedative"

    grouped = effects_by_category(summaries)
    assert [s.name for s in grouped[None]] == ["Glowing"]
    assert {s.name for s in grouped["relaxation"]} == {"Sedative", "Anxiety relief"}
