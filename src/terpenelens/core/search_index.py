"""Cross-language search index over canonical records and their overlays."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from terpenelens.core.models import (
    FIELD_ATTRIBUTES,
    TRANSLATABLE_FIELDS,
    CanonicalRecord,
    IndexEntry,
    TranslationOverlay,
)
from terpenelens.core.text import normalize_diacritics, split_terms

logger = logging.getLogger(__name__)


def _field_terms(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    return [str(v) for v in value if v]


def _collect_terms(
    record: CanonicalRecord,
    overlay: Optional[TranslationOverlay],
    fields: Iterable[str],
) -> list[str]:
    terms: list[str] = []
    fields = [f for f in fields if f in FIELD_ATTRIBUTES]
    for field_name in fields:
        terms.extend(_field_terms(record.field_value(field_name)))
    if overlay is not None:
        for field_name in fields:
            terms.extend(_field_terms(overlay.field_value(field_name)))
    return list(dict.fromkeys(terms))


def _make_entry(record_id: str, terms: list[str]) -> IndexEntry:
    search_text = " ".join(terms).lower()
    return IndexEntry(
        record_id=record_id,
        search_text=search_text,
        normalized_text=normalize_diacritics(search_text),
    )


class CrossLanguageSearchIndex:
    """
    Conjunctive substring search over canonical and translated text.

    Each record is indexed with every translatable canonical value and every
    value its overlay supplies, so either language finds it regardless of the
    UI language. Results keep the order of the records passed to build().
    """

    def __init__(self) -> None:
        self._entries: list[IndexEntry] = []
        self._records: dict[str, CanonicalRecord] = {}
        self._overlays: dict[str, TranslationOverlay] = {}
        self._built = False
        self.version = 0

    @property
    def is_built(self) -> bool:
        return self._built

    @property
    def entries(self) -> list[IndexEntry]:
        return list(self._entries)

    def build(
        self,
        records: Iterable[CanonicalRecord],
        overlays: Mapping[str, TranslationOverlay] | None = None,
    ) -> None:
        """Replace the index with entries for `records`."""
        overlays = dict(overlays or {})
        records = list(records)
        self._records = {r.id: r for r in records}
        self._overlays = overlays
        self._entries = [
            _make_entry(r.id, _collect_terms(r, overlays.get(r.id), TRANSLATABLE_FIELDS))
            for r in records
        ]
        self._built = True
        self.version += 1
        logger.debug(
            "Built search index v%d: %d records, %d overlays",
            self.version,
            len(self._entries),
            len(overlays),
        )

    def clear(self) -> None:
        self._entries = []
        self._records = {}
        self._overlays = {}
        self._built = False
        self.version += 1

    def search_ids(self, query: str) -> list[str]:
        """Ids of records whose index text contains every query term."""
        terms = self._terms(query)
        if not terms:
            return []
        return [e.record_id for e in self._entries if all(t in e.normalized_text for t in terms)]

    def search(self, query: str) -> list[CanonicalRecord]:
        return [self._records[i] for i in self.search_ids(query) if i in self._records]

    def search_fields(self, query: str, fields: Iterable[str]) -> list[CanonicalRecord]:
        """
        Like search(), restricted to the named translatable fields.

        Unknown field names contribute no text; no usable fields means no results.
        """
        terms = self._terms(query)
        fields = [f for f in fields if f in FIELD_ATTRIBUTES]
        if not terms or not fields:
            return []
        results: list[CanonicalRecord] = []
        for entry in self._entries:
            record = self._records.get(entry.record_id)
            if record is None:
                continue
            text = _make_entry(
                record.id, _collect_terms(record, self._overlays.get(record.id), fields)
            ).normalized_text
            if all(t in text for t in terms):
                results.append(record)
        return results

    def _terms(self, query: str) -> list[str]:
        if not query:
            return []
        if not self._built:
            logger.warning("Search for %r before the index was built; returning no results", query)
            return []
        return split_terms(query)

    def __len__(self) -> int:
        return len(self._entries)
