"""Tests for the effect category catalog."""

from pathlib import Path

from terpenelens.core.categories import CategoryCatalog
from terpenelens.core.models import CategoryDefinition


def test_packaged_catalog_has_four_categories() -> None:
    catalog = CategoryCatalog.load()
    assert catalog.category_ids() == ["mood", "cognitive", "relaxation", "physical"]
    assert "Sedative" in catalog.members("relaxation")
    assert catalog.get("mood").name == "Mood & Energy"


def test_effect_lookup_is_case_insensitive() -> None:
    catalog = CategoryCatalog.load()
    assert catalog.category_for_effect("sedative") == "relaxation"
    assert catalog.category_for_effect(" Focus ") == "cognitive"
    assert catalog.category_for_effect("Unknown effect") is None
    assert catalog.category_for_effect("") is None


def test_unknown_category_has_no_members() -> None:
    catalog = CategoryCatalog.load()
    assert catalog.members("nope") == frozenset()
    assert "nope" not in catalog
    assert catalog.effects_in_categories(["nope", "mood"]) == catalog.members("mood")


def test_shared_members_map_to_every_category() -> None:
    catalog = CategoryCatalog(
        [
            CategoryDefinition("b", frozenset({"Focus"}), display_order=2),
            CategoryDefinition("a", frozenset({"Focus", "Alertness"}), display_order=1),
        ]
    )
    assert catalog.categories_for_effect("Focus") == ["a", "b"]
    assert catalog.category_for_effect("Focus") == "a"
    assert len(catalog) == 2


def test_load_from_directory_skips_malformed_entries(tmp_path: Path) -> None:
    (tmp_path / "categories.yaml").write_text(
        "categories:\n"
        "  - id: calm\n"
        "    effects: [Sedative, Relaxing]\n"
        "  - id: empty\n"
        "    effects: []\n"
        "  - effects: [Focus]\n"
        "  - just a string\n",
        encoding="utf-8",
    )
    catalog = CategoryCatalog.load(tmp_path)
    assert catalog.category_ids() == ["calm"]
    assert catalog.get("calm").name == "calm"


def test_missing_or_invalid_file_yields_empty_catalog(tmp_path: Path) -> None:
    assert len(CategoryCatalog.load(tmp_path)) == 0
    (tmp_path / "categories.yaml").write_text("- not a mapping\n", encoding="utf-8")
    assert len(CategoryCatalog.load(tmp_path)) == 0
