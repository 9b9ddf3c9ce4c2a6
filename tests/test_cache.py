"""Tests for the translation cache."""

from terpenelens.core.cache import TranslationCache
from terpenelens.core.merge import merge
from terpenelens.core.models import CanonicalRecord, TranslationBundle, TranslationOverlay


def _record() -> CanonicalRecord:
    return CanonicalRecord(id="t1", name="Myrcene", effects=("Sedative",))


def _bundle(version: str, name: str) -> TranslationBundle:
    return TranslationBundle(language="de", version=version, overlays={"t1": TranslationOverlay(name=name)})


def test_bundle_overlays_are_looked_up_by_id_and_language() -> None:
    cache = TranslationCache()
    cache.load_bundle(_bundle("1.0.0", "Myrcen"))
    assert cache.get_overlay("t1", "de").name == "Myrcen"
    assert cache.get_overlay("t1", "fr") is None
    assert cache.get_overlay("t2", "de") is None
    assert cache.size() == 1


def test_merged_entries_expire_when_bundle_reloads() -> None:
    cache = TranslationCache()
    cache.load_bundle(_bundle("1.0.0", "Myrcen"))
    merged = merge(_record(), cache.get_overlay("t1", "de"), "de")
    cache.put_merged(merged)
    assert cache.get_merged("t1", "de") is merged

    cache.load_bundle(_bundle("1.1.0", "Myrzen"))
    assert cache.get_merged("t1", "de") is None
    assert cache.get_overlay("t1", "de").name == "Myrzen"


def test_merged_entries_keyed_by_language() -> None:
    cache = TranslationCache()
    english = merge(_record(), None, "en")
    cache.put_merged(english)
    assert cache.get_merged("t1", "en") is english
    assert cache.get_merged("t1", "de") is None


def test_invalidate_one_language_or_all() -> None:
    cache = TranslationCache()
    cache.load_bundle(_bundle("1.0.0", "Myrcen"))
    cache.set_overlay("t1", "fr", TranslationOverlay(name="Myrcène"))
    cache.invalidate("de")
    assert cache.get_overlay("t1", "de") is None
    assert cache.get_overlay("t1", "fr") is not None
    cache.invalidate()
    assert len(cache) == 0


def test_set_overlay_drops_memoized_merge() -> None:
    cache = TranslationCache()
    cache.put_merged(merge(_record(), None, "de"))
    cache.set_overlay("t1", "de", TranslationOverlay(name="Myrcen"))
    assert cache.get_merged("t1", "de") is None
