"""Translation merge: canonical record + optional overlay -> merged record."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional

from terpenelens.core.models import (
    CANONICAL_LANGUAGE,
    FIELD_ATTRIBUTES,
    TRANSLATABLE_FIELDS,
    CanonicalRecord,
    FieldSource,
    MergedRecord,
    TranslationOverlay,
    TranslationStatus,
)


def _resolve_field(
    record: CanonicalRecord,
    overlay: Optional[TranslationOverlay],
    field_name: str,
    use_overlay: bool,
) -> tuple[Any, FieldSource]:
    if use_overlay and overlay is not None:
        value = overlay.field_value(field_name)
        if value is not None:
            return value, FieldSource.OVERLAY
    return record.field_value(field_name), FieldSource.CANONICAL


def merge(
    record: CanonicalRecord,
    overlay: Optional[TranslationOverlay],
    language: str,
    canonical_language: str = CANONICAL_LANGUAGE,
) -> MergedRecord:
    """
    Merge a canonical record with a translation overlay.

    Args:
        record: Canonical-language record
        overlay: Sparse overlay for `language`, or None
        language: Target language code
        canonical_language: Language in which `record` is complete

    Returns:
        MergedRecord whose status lists every field filled from the canonical record.
        Chemical metadata is copied as-is and does not count towards completeness.
    """
    use_overlay = language != canonical_language
    sources: dict[str, FieldSource] = {}
    changes: dict[str, Any] = {}

    for field_name in TRANSLATABLE_FIELDS:
        value, source = _resolve_field(record, overlay, field_name, use_overlay)
        sources[field_name] = source
        if source is FieldSource.OVERLAY:
            changes[FIELD_ATTRIBUTES[field_name]] = value

    fallback = frozenset(f for f, s in sources.items() if s is FieldSource.CANONICAL)
    merged = replace(record, **changes) if changes else record
    return MergedRecord(
        record=merged,
        status=TranslationStatus(
            language=language,
            is_fully_translated=not fallback,
            fallback_fields=fallback,
            field_sources=sources,
        ),
    )


class TranslationMerger:
    """Merge engine bound to a canonical language."""

    def __init__(self, canonical_language: str = CANONICAL_LANGUAGE) -> None:
        self.canonical_language = canonical_language

    def merge(
        self,
        record: CanonicalRecord,
        overlay: Optional[TranslationOverlay],
        language: str,
    ) -> MergedRecord:
        return merge(record, overlay, language, self.canonical_language)

    def merge_all(
        self,
        records: Iterable[CanonicalRecord],
        overlays: Mapping[str, TranslationOverlay] | None,
        language: str,
    ) -> list[MergedRecord]:
        """Merge every record with its overlay (looked up by id), keeping input order."""
        overlays = overlays or {}
        return [self.merge(r, overlays.get(r.id), language) for r in records]

    def field_value(
        self,
        record: CanonicalRecord,
        overlay: Optional[TranslationOverlay],
        field_name: str,
        language: str,
    ) -> Any:
        """Translated value of one field with canonical fallback; None for unknown fields."""
        if field_name not in FIELD_ATTRIBUTES:
            return None
        value, _ = _resolve_field(record, overlay, field_name, language != self.canonical_language)
        return value
