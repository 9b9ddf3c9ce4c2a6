"""Filter state with category/effect synchronization and record matching."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, TypeVar, Union

from terpenelens.core.categories import CategoryCatalog
from terpenelens.core.models import (
    CanonicalRecord,
    FilterMode,
    FilterSnapshot,
    FilterState,
    MergedRecord,
)
from terpenelens.core.settings import EngineSettings
from terpenelens.core.text import join_values

logger = logging.getLogger(__name__)

RecordLike = Union[CanonicalRecord, MergedRecord]
R = TypeVar("R", CanonicalRecord, MergedRecord)


def _unwrap(record: RecordLike) -> CanonicalRecord:
    return record.record if isinstance(record, MergedRecord) else record


def derive_selected_categories(
    selected_effects: Iterable[str], catalog: CategoryCatalog
) -> set[str]:
    """Categories with at least one member among the selected effects."""
    effects = set(selected_effects)
    return {d.category_id for d in catalog if d.members & effects}


def matches_query(record: RecordLike, query: str) -> bool:
    """Case-insensitive substring match on name, aroma, taste, effects and therapeutic tags."""
    base = _unwrap(record)
    needle = query.lower()
    haystacks = [
        base.name,
        base.aroma,
        base.taste or "",
        join_values(base.effects),
        join_values(base.therapeutic_properties),
    ]
    return any(needle in h.lower() for h in haystacks if h)


def matches_any_effect(record: RecordLike, effects: Iterable[str]) -> bool:
    effects = set(effects)
    if not effects:
        return True
    return not effects.isdisjoint(_unwrap(record).effects)


def matches_all_effects(record: RecordLike, effects: Iterable[str]) -> bool:
    effects = set(effects)
    if not effects:
        return True
    return effects.issubset(_unwrap(record).effects)


class FilterEngine:
    """
    Owns one FilterState and evaluates records against it.

    selected_categories is never edited directly: every mutator that touches
    selected_effects recomputes it from the catalog, so a category is selected
    exactly when one of its member tags is.
    """

    def __init__(
        self,
        catalog: Optional[CategoryCatalog] = None,
        settings: Optional[EngineSettings] = None,
    ) -> None:
        self.settings = settings or EngineSettings()
        self.catalog = (
            catalog if catalog is not None else CategoryCatalog.load(self.settings.templates_path)
        )
        self._state = FilterState(effect_filter_mode=self.settings.default_filter_mode)

    @property
    def state(self) -> FilterSnapshot:
        return self.snapshot()

    def snapshot(self) -> FilterSnapshot:
        return FilterSnapshot(
            search_query=self._state.search_query,
            selected_effects=frozenset(self._state.selected_effects),
            selected_categories=frozenset(self._state.selected_categories),
            effect_filter_mode=self._state.effect_filter_mode,
            query_active=self._query_active(),
        )

    # Mutators

    def set_query(self, text: Optional[str]) -> None:
        """Store the trimmed query; short queries are kept but ignored by matches()."""
        self._state.search_query = (text or "").strip()

    def clear_query(self) -> None:
        self._state.search_query = ""

    def toggle_effect(self, effect: Optional[str]) -> None:
        if not effect or not effect.strip():
            return
        selected = self._state.selected_effects
        if effect in selected:
            selected.discard(effect)
        else:
            selected.add(effect)
        self._sync_categories()

    def toggle_category(self, category_id: Optional[str]) -> None:
        """
        Select a category with all its tags, or deselect it and drop its tags.

        Shared tags stay selected when another category remains selected
        through a tag outside this category.
        """
        if not category_id or category_id not in self.catalog:
            logger.debug("Ignoring toggle of unknown category %r", category_id)
            return
        members = self.catalog.members(category_id)
        selected = self._state.selected_effects
        if category_id not in self._state.selected_categories:
            selected.update(members)
        else:
            remaining = selected - members
            still_needed: set[str] = set()
            for other in self._state.selected_categories - {category_id}:
                other_members = self.catalog.members(other)
                if other_members & remaining:
                    still_needed |= other_members & members
            selected.difference_update(members - still_needed)
        self._sync_categories()

    def set_effect_filter_mode(self, mode: Union[FilterMode, str]) -> None:
        try:
            self._state.effect_filter_mode = FilterMode(mode)
        except ValueError:
            logger.debug("Ignoring unknown filter mode %r", mode)

    def toggle_filter_mode(self) -> None:
        if self._state.effect_filter_mode is FilterMode.ANY:
            self._state.effect_filter_mode = FilterMode.ALL
        else:
            self._state.effect_filter_mode = FilterMode.ANY

    def clear_effects(self) -> None:
        self._state.selected_effects.clear()
        self._sync_categories()

    def clear_all(self) -> None:
        """Clear query and selections and restore the default mode."""
        self._state.search_query = ""
        self._state.selected_effects.clear()
        self._state.effect_filter_mode = self.settings.default_filter_mode
        self._sync_categories()

    def _sync_categories(self) -> None:
        self._state.selected_categories = derive_selected_categories(
            self._state.selected_effects, self.catalog
        )

    # Evaluation

    def _query_active(self) -> bool:
        return len(self._state.search_query) >= self.settings.min_query_length

    def matches(self, record: RecordLike) -> bool:
        state = self._state
        if self._query_active() and not matches_query(record, state.search_query):
            return False

        if not state.selected_effects and not state.selected_categories:
            return True

        effects = _unwrap(record).effects
        category_effects = self.catalog.effects_in_categories(state.selected_categories)
        if category_effects.intersection(effects):
            return True

        if not state.selected_effects:
            return False
        if state.effect_filter_mode is FilterMode.ALL:
            return matches_all_effects(record, state.selected_effects)
        return matches_any_effect(record, state.selected_effects)

    def filter(self, records: Iterable[R]) -> list[R]:
        """Matching records in input order."""
        return [r for r in records if self.matches(r)]
