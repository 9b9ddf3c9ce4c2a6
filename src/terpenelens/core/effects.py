"""Effect vocabulary derived from the canonical catalog."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping, Optional

from terpenelens.core.categories import CategoryCatalog
from terpenelens.core.models import CanonicalRecord, EffectSummary


def build_effect_list(
    records: Iterable[CanonicalRecord],
    catalog: CategoryCatalog,
    display_names: Optional[Mapping[str, Mapping[str, str]]] = None,
) -> list[EffectSummary]:
    """
    Summarize the effect tags used by the catalog.

    Args:
        records: Canonical records (effect names stay canonical for filtering)
        catalog: Category catalog used to assign each effect a category
        display_names: canonical effect name -> {language: label}

    Returns:
        One EffectSummary per distinct effect, most frequent first, ties by name
    """
    display_names = display_names or {}
    counts: Counter[str] = Counter()
    for record in records:
        counts.update(e for e in set(record.effects) if e)

    summaries = [
        EffectSummary(
            name=effect,
            count=count,
            category_id=catalog.category_for_effect(effect),
            display_names=dict(display_names.get(effect, {})),
        )
        for effect, count in counts.items()
    ]
    summaries.sort(key=lambda s: (-s.count, s.name))
    return summaries


def effects_by_category(summaries: Iterable[EffectSummary]) -> dict[Optional[str], list[EffectSummary]]:
    """Group summaries by category id; uncategorized effects land under None."""
    grouped: dict[Optional[str], list[EffectSummary]] = {}
    for summary in summaries:
        grouped.setdefault(summary.category_id, []).append(summary)
    return grouped
