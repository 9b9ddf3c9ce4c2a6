"""Translation service: wires cache, merge engine and search index together."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from terpenelens.core.cache import TranslationCache
from terpenelens.core.interfaces import SearchIndex, TranslationMergeEngine
from terpenelens.core.merge import TranslationMerger
from terpenelens.core.models import (
    TRANSLATABLE_FIELDS,
    CanonicalRecord,
    LanguageInfo,
    MergedRecord,
    TranslationBundle,
    TranslationOverlay,
)
from terpenelens.core.search_index import CrossLanguageSearchIndex
from terpenelens.core.settings import EngineSettings

logger = logging.getLogger(__name__)


class TranslationService:
    """
    Serves merged records in the active language and cross-language search.

    The cache, merge engine and index are injected, so implementations can be
    swapped and tests stay deterministic. Calls made before initialize() return
    empty results.
    """

    def __init__(
        self,
        records: Iterable[CanonicalRecord],
        cache: Optional[TranslationCache] = None,
        merger: Optional[TranslationMergeEngine] = None,
        index: Optional[SearchIndex] = None,
        settings: Optional[EngineSettings] = None,
    ) -> None:
        self.settings = settings or EngineSettings()
        self.records = list(records)
        self._by_id = {r.id: r for r in self.records}
        self.cache = cache if cache is not None else TranslationCache()
        self.merger = merger or TranslationMerger(self.settings.canonical_language)
        self.index = index if index is not None else CrossLanguageSearchIndex()
        self.current_language = self.settings.canonical_language
        self.initialized = False

    def initialize(self, language: str, bundle: Optional[TranslationBundle] = None) -> None:
        """
        Activate `language`, load its overlays and rebuild the search index.

        Args:
            language: Language code to activate
            bundle: Overlays for `language`; ignored for the canonical language
        """
        self.current_language = language
        overlays: dict[str, TranslationOverlay] = {}
        if language != self.settings.canonical_language:
            if bundle is not None:
                if bundle.language and bundle.language != language:
                    logger.warning(
                        "Bundle for %r loaded as %r; using it for %r",
                        bundle.language,
                        language,
                        language,
                    )
                self.cache.load_bundle(
                    TranslationBundle(language=language, version=bundle.version, overlays=bundle.overlays)
                )
            overlays = dict(self.cache.overlays_for(language))
            if not overlays:
                logger.warning("No overlays for %r; records fall back to %r", language, self.settings.canonical_language)
        self.index.build(self.records, overlays)
        self.initialized = True

    def switch_language(self, language: str, bundle: Optional[TranslationBundle] = None) -> None:
        self.initialize(language, bundle)

    def _ready(self) -> bool:
        if not self.initialized:
            logger.warning("TranslationService used before initialize(); returning no data")
        return self.initialized

    def get_translated_record(
        self, record_id: str, language: Optional[str] = None
    ) -> Optional[MergedRecord]:
        if not self._ready():
            return None
        record = self._by_id.get(record_id)
        if record is None:
            logger.debug("Unknown record id %r", record_id)
            return None
        return self._merge(record, language or self.current_language)

    def get_all_translated(self, language: Optional[str] = None) -> list[MergedRecord]:
        if not self._ready():
            return []
        language = language or self.current_language
        return [self._merge(r, language) for r in self.records]

    def get_translated_field(
        self, record_id: str, field_name: str, language: Optional[str] = None
    ) -> Any:
        merged = self.get_translated_record(record_id, language)
        return merged.field_value(field_name) if merged else None

    def is_fully_translated(self, record_id: str, language: Optional[str] = None) -> bool:
        merged = self.get_translated_record(record_id, language)
        return merged.is_fully_translated if merged else False

    def get_fallback_fields(self, record_id: str, language: Optional[str] = None) -> frozenset[str]:
        merged = self.get_translated_record(record_id, language)
        return merged.fallback_fields if merged else frozenset()

    def search(self, query: str, language: Optional[str] = None) -> list[MergedRecord]:
        """Cross-language search, results merged into `language` (default: active)."""
        if not self._ready():
            return []
        language = language or self.current_language
        return [self._merge(r, language) for r in self.index.search(query)]

    def search_fields(
        self, query: str, fields: Iterable[str], language: Optional[str] = None
    ) -> list[MergedRecord]:
        if not self._ready():
            return []
        records = self.index.search_fields(query, fields)
        language = language or self.current_language
        return [self._merge(r, language) for r in records]

    def supported_languages(self) -> list[LanguageInfo]:
        """Configured languages with completion computed from cached overlays."""
        infos: list[LanguageInfo] = []
        for code in self.settings.supported_languages:
            name, native = self.settings.language_names.get(code, (code, code))
            percentage = 100.0 if code == self.settings.canonical_language else self._completion(code)
            infos.append(
                LanguageInfo(
                    code=code,
                    name=name,
                    native_name=native,
                    is_complete=percentage >= 100.0,
                    completion_percentage=percentage,
                )
            )
        return infos

    def _completion(self, language: str) -> float:
        total = len(self.records) * len(TRANSLATABLE_FIELDS)
        if not total:
            return 0.0
        overlays = self.cache.overlays_for(language)
        supplied = 0
        for record in self.records:
            overlay = overlays.get(record.id)
            if overlay is not None:
                supplied += len(overlay.supplied_fields())
        return round(100.0 * supplied / total, 1)

    def _merge(self, record: CanonicalRecord, language: str) -> MergedRecord:
        cached = self.cache.get_merged(record.id, language)
        if cached is not None:
            return cached
        merged = self.merger.merge(record, self.cache.get_overlay(record.id, language), language)
        self.cache.put_merged(merged)
        return merged
