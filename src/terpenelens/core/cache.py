"""Explicit translation cache, owned by the caller of the merge engine."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from terpenelens.core.models import MergedRecord, TranslationBundle, TranslationOverlay

logger = logging.getLogger(__name__)


class TranslationCache:
    """
    Overlays per language plus memoized merges keyed by (record_id, language).

    A memoized merge is only returned while the overlay version it was built
    from is still current for that language. Loading a bundle or calling
    invalidate() drops stale entries.
    """

    def __init__(self) -> None:
        self._overlays: dict[str, dict[str, TranslationOverlay]] = {}
        self._versions: dict[str, str] = {}
        self._merged: dict[tuple[str, str], tuple[str, MergedRecord]] = {}

    def load_bundle(self, bundle: TranslationBundle) -> None:
        """Replace all overlays of the bundle's language."""
        self.invalidate(bundle.language)
        self._overlays[bundle.language] = dict(bundle.overlays)
        self._versions[bundle.language] = bundle.version
        logger.debug(
            "Cached %d overlays for %s (version %s)",
            len(bundle.overlays),
            bundle.language,
            bundle.version,
        )

    def set_overlay(self, record_id: str, language: str, overlay: TranslationOverlay) -> None:
        self._overlays.setdefault(language, {})[record_id] = overlay
        self._merged.pop((record_id, language), None)

    def get_overlay(self, record_id: str, language: str) -> Optional[TranslationOverlay]:
        return self._overlays.get(language, {}).get(record_id)

    def overlays_for(self, language: str) -> Mapping[str, TranslationOverlay]:
        return dict(self._overlays.get(language, {}))

    def version(self, language: str) -> str:
        return self._versions.get(language, "")

    def get_merged(self, record_id: str, language: str) -> Optional[MergedRecord]:
        entry = self._merged.get((record_id, language))
        if entry is None:
            return None
        version, merged = entry
        if version != self.version(language):
            del self._merged[(record_id, language)]
            return None
        return merged

    def put_merged(self, merged: MergedRecord) -> None:
        language = merged.status.language
        self._merged[(merged.id, language)] = (self.version(language), merged)

    def invalidate(self, language: Optional[str] = None) -> None:
        """Drop overlays and memoized merges for one language, or for all."""
        if language is None:
            self._overlays.clear()
            self._versions.clear()
            self._merged.clear()
            return
        self._overlays.pop(language, None)
        self._versions.pop(language, None)
        for key in [k for k in self._merged if k[1] == language]:
            del self._merged[key]

    def clear(self) -> None:
        self.invalidate()

    def size(self) -> int:
        return sum(len(overlays) for overlays in self._overlays.values())

    def __len__(self) -> int:
        return self.size()
