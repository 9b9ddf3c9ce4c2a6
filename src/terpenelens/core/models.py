"""Core immutable data models, translation overlays and filter state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

CANONICAL_LANGUAGE = "en"

TRANSLATABLE_FIELDS = (
    "name",
    "description",
    "aroma",
    "taste",
    "effects",
    "therapeuticProperties",
    "sources",
    "notableDifferences",
)

ARRAY_FIELDS = frozenset({"effects", "therapeuticProperties", "sources"})

# Catalog field name -> dataclass attribute name.
FIELD_ATTRIBUTES = {
    "name": "name",
    "description": "description",
    "aroma": "aroma",
    "taste": "taste",
    "effects": "effects",
    "therapeuticProperties": "therapeutic_properties",
    "sources": "sources",
    "notableDifferences": "notable_differences",
}


class FilterMode(str, Enum):
    """Semantics applied to the explicitly selected effect tags."""

    ANY = "any"
    ALL = "all"


class FieldSource(str, Enum):
    """Where a merged field value came from."""

    OVERLAY = "overlay"
    CANONICAL = "canonical"


def _as_tuple(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)


@dataclass(frozen=True)
class CanonicalRecord:
    """
    Immutable base-language terpene record.

    Every translatable field is complete in the canonical language.
    Chemical metadata is carried through untouched and never translated.
    """

    id: str
    """Stable opaque identifier, unique within the catalog."""

    name: str = ""
    description: str = ""
    aroma: str = ""

    taste: Optional[str] = None
    """Optional taste description."""

    effects: tuple[str, ...] = ()
    """Effect tags. Not validated against the known vocabulary."""

    therapeutic_properties: Optional[tuple[str, ...]] = None
    """Optional therapeutic tags."""

    sources: tuple[str, ...] = ()
    """Natural sources (plants, fruits, oils)."""

    notable_differences: Optional[str] = None

    metadata: Mapping[str, Any] = field(default_factory=dict)
    """Structured chemical metadata (opaque to the engine)."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "effects", _as_tuple(self.effects))
        object.__setattr__(self, "sources", _as_tuple(self.sources))
        if self.therapeutic_properties is not None:
            object.__setattr__(
                self, "therapeutic_properties", _as_tuple(self.therapeutic_properties)
            )

    def field_value(self, field_name: str) -> Any:
        """Return the value of a translatable field by its catalog name."""
        attribute = FIELD_ATTRIBUTES.get(field_name)
        if attribute is None:
            return None
        return getattr(self, attribute)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CanonicalRecord:
        """Build a record from an already-parsed catalog entry (camelCase or snake_case)."""
        therapeutic = _lookup(data, "therapeuticProperties")
        known = set(FIELD_ATTRIBUTES) | set(FIELD_ATTRIBUTES.values()) | {"id", "metadata"}
        metadata = dict(data.get("metadata") or {})
        for key, value in data.items():
            if key not in known:
                metadata.setdefault(key, value)
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
            aroma=str(data.get("aroma") or ""),
            taste=data.get("taste") or None,
            effects=_as_tuple(data.get("effects")),
            therapeutic_properties=_as_tuple(therapeutic) if therapeutic is not None else None,
            sources=_as_tuple(data.get("sources")),
            notable_differences=_lookup(data, "notableDifferences") or None,
            metadata=metadata,
        )


def _lookup(data: Mapping[str, Any], field_name: str) -> Any:
    if field_name in data:
        return data[field_name]
    return data.get(FIELD_ATTRIBUTES[field_name])


@dataclass(frozen=True)
class TranslationOverlay:
    """
    Sparse per-field replacement for one non-canonical language.

    A field left as None was not supplied and falls back to the canonical value.
    Array fields replace the whole canonical array.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    aroma: Optional[str] = None
    taste: Optional[str] = None
    effects: Optional[tuple[str, ...]] = None
    therapeutic_properties: Optional[tuple[str, ...]] = None
    sources: Optional[tuple[str, ...]] = None
    notable_differences: Optional[str] = None

    def __post_init__(self) -> None:
        for attribute in ("effects", "therapeutic_properties", "sources"):
            value = getattr(self, attribute)
            if value is not None:
                object.__setattr__(self, attribute, _as_tuple(value))

    def field_value(self, field_name: str) -> Any:
        attribute = FIELD_ATTRIBUTES.get(field_name)
        if attribute is None:
            return None
        return getattr(self, attribute)

    def supplied_fields(self) -> tuple[str, ...]:
        """Catalog names of the fields this overlay sets, in canonical order."""
        return tuple(f for f in TRANSLATABLE_FIELDS if self.field_value(f) is not None)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> TranslationOverlay:
        """Build an overlay from a parsed translation entry; unknown keys are ignored."""
        if not data:
            return cls()
        values = {
            attribute: _lookup(data, field_name) for field_name, attribute in FIELD_ATTRIBUTES.items()
        }
        return cls(**values)


@dataclass(frozen=True)
class TranslationBundle:
    """All overlays for one language, as shipped in a translation file."""

    language: str
    version: str = "0.0.0"
    overlays: Mapping[str, TranslationOverlay] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TranslationBundle:
        entries = data.get("terpenes") or data.get("overlays") or {}
        overlays = {
            str(record_id): TranslationOverlay.from_dict(entry)
            for record_id, entry in entries.items()
            if isinstance(entry, Mapping)
        }
        return cls(
            language=str(data.get("language", "")),
            version=str(data.get("version", "0.0.0")),
            overlays=overlays,
        )


@dataclass(frozen=True)
class TranslationStatus:
    """Translation metadata attached to every merged record."""

    language: str
    is_fully_translated: bool
    fallback_fields: frozenset[str] = frozenset()
    """Catalog field names that were filled from the canonical record."""

    field_sources: Mapping[str, FieldSource] = field(default_factory=dict)
    """Per-field origin, decided at merge time."""


@dataclass(frozen=True)
class MergedRecord:
    """A record with overlay values applied, plus its translation status."""

    record: CanonicalRecord
    status: TranslationStatus

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def effects(self) -> tuple[str, ...]:
        return self.record.effects

    @property
    def is_fully_translated(self) -> bool:
        return self.status.is_fully_translated

    @property
    def fallback_fields(self) -> frozenset[str]:
        return self.status.fallback_fields

    def field_value(self, field_name: str) -> Any:
        return self.record.field_value(field_name)


@dataclass(frozen=True)
class CategoryDefinition:
    """Static group of effect tags, selectable in one step."""

    category_id: str
    members: frozenset[str]
    name: str = ""
    display_order: int = 0


@dataclass
class FilterState:
    """
    Mutable selection state owned by a single FilterEngine.

    selected_categories is always derived from selected_effects.
    """

    search_query: str = ""
    selected_effects: set[str] = field(default_factory=set)
    selected_categories: set[str] = field(default_factory=set)
    effect_filter_mode: FilterMode = FilterMode.ANY


@dataclass(frozen=True)
class FilterSnapshot:
    """Read-only view of a FilterState for rendering."""

    search_query: str
    selected_effects: frozenset[str]
    selected_categories: frozenset[str]
    effect_filter_mode: FilterMode
    query_active: bool = False

    @property
    def active_filter_count(self) -> int:
        return len(self.selected_effects) + (1 if self.query_active else 0)

    @property
    def has_active_filters(self) -> bool:
        return bool(self.search_query or self.selected_effects or self.selected_categories)


@dataclass(frozen=True)
class IndexEntry:
    """Search blob for one record."""

    record_id: str
    search_text: str
    """Lowercased concatenation of canonical and overlay values."""

    normalized_text: str
    """search_text with diacritics folded."""


@dataclass(frozen=True)
class LanguageInfo:
    code: str
    name: str
    native_name: str
    is_complete: bool
    completion_percentage: float


@dataclass
class EffectSummary:
    """One effect tag of the catalog vocabulary."""

    name: str
    count: int = 0
    category_id: Optional[str] = None
    display_names: dict[str, str] = field(default_factory=dict)

    def display_name(self, language: str) -> str:
        return self.display_names.get(language) or self.name
