"""Protocol definitions for catalog collaborators and engine components."""

from typing import Iterable, Mapping, Optional, Protocol, runtime_checkable

from terpenelens.core.models import (
    CanonicalRecord,
    MergedRecord,
    TranslationBundle,
    TranslationOverlay,
)


@runtime_checkable
class CatalogSource(Protocol):
    """
    Supplies the canonical records, already parsed and validated.

    Loading files and schema validation belong to the implementer, not to the engine.
    """

    def load_records(self) -> list[CanonicalRecord]:
        """
        Return every canonical record of the catalog.

        Returns:
            Records in display order; identifiers must be unique
        """
        ...


@runtime_checkable
class TranslationSource(Protocol):
    """Supplies the translation bundle for one overlay language."""

    def load_bundle(self, language: str) -> Optional[TranslationBundle]:
        """
        Return the overlays for `language`.

        Args:
            language: ISO 639-1 code of a non-canonical language

        Returns:
            TranslationBundle, or None when no translation exists
        """
        ...


@runtime_checkable
class TranslationMergeEngine(Protocol):
    """Merges a canonical record with an optional overlay."""

    def merge(
        self,
        record: CanonicalRecord,
        overlay: Optional[TranslationOverlay],
        language: str,
    ) -> MergedRecord:
        ...


@runtime_checkable
class SearchIndex(Protocol):
    """Builds and queries a text index over canonical records and overlays."""

    def build(
        self,
        records: Iterable[CanonicalRecord],
        overlays: Mapping[str, TranslationOverlay] | None = None,
    ) -> None:
        ...

    def search(self, query: str) -> list[CanonicalRecord]:
        """
        Return records containing every query term.

        Args:
            query: Free text; empty returns no results

        Returns:
            Matching records in build order
        """
        ...

    def search_fields(self, query: str, fields: Iterable[str]) -> list[CanonicalRecord]:
        ...

    def clear(self) -> None:
        ...


@runtime_checkable
class RecordFilter(Protocol):
    """Evaluates records against the current selection."""

    def matches(self, record: CanonicalRecord | MergedRecord) -> bool:
        ...

    def filter(self, records: Iterable[CanonicalRecord]) -> list[CanonicalRecord]:
        ...
