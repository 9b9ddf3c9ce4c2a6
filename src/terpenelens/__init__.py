"""terpenelens: Bilingual terpene catalog merge, search and filtering engine."""

__version__ = "0.1.0"

# Core exports
from terpenelens.core.models import (
    CanonicalRecord,
    TranslationOverlay,
    TranslationBundle,
    TranslationStatus,
    MergedRecord,
    CategoryDefinition,
    FieldSource,
    FilterMode,
    FilterState,
    FilterSnapshot,
    LanguageInfo,
    EffectSummary,
)
from terpenelens.core.interfaces import (
    CatalogSource,
    TranslationSource,
    TranslationMergeEngine,
    SearchIndex,
    RecordFilter,
)
from terpenelens.core.settings import EngineSettings, SettingsError, load_settings
from terpenelens.core.categories import CategoryCatalog
from terpenelens.core.merge import TranslationMerger, merge
from terpenelens.core.cache import TranslationCache
from terpenelens.core.search_index import CrossLanguageSearchIndex
from terpenelens.core.filters import FilterEngine
from terpenelens.core.effects import build_effect_list
from terpenelens.core.service import TranslationService

__all__ = [
    "CanonicalRecord",
    "TranslationOverlay",
    "TranslationBundle",
    "TranslationStatus",
    "MergedRecord",
    "CategoryDefinition",
    "FieldSource",
    "FilterMode",
    "FilterState",
    "FilterSnapshot",
    "LanguageInfo",
    "EffectSummary",
    "CatalogSource",
    "TranslationSource",
    "TranslationMergeEngine",
    "SearchIndex",
    "RecordFilter",
    "EngineSettings",
    "SettingsError",
    "load_settings",
    "CategoryCatalog",
    "TranslationMerger",
    "merge",
    "TranslationCache",
    "CrossLanguageSearchIndex",
    "FilterEngine",
    "build_effect_list",
    "TranslationService",
]
