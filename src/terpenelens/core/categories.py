"""Static effect category catalog."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any, Iterable, Iterator

import yaml

from terpenelens.core.models import CategoryDefinition

logger = logging.getLogger(__name__)

CATEGORIES_FILE = "categories.yaml"


def _load_yaml(path: Path | None, resource_name: str) -> dict[str, Any]:
    if path:
        file_path = path / resource_name
        if not file_path.exists():
            return {}
        with file_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    else:
        try:
            resource = resources.files("terpenelens.templates").joinpath(resource_name)
            with resource.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        except FileNotFoundError:
            return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a mapping at the top level", resource_name)
        return {}
    return data


class CategoryCatalog:
    """
    Read-only lookup from category id to its member effect tags.

    Categories are kept in display order. Lookups of unknown ids return empty
    results instead of raising.
    """

    def __init__(self, definitions: Iterable[CategoryDefinition]) -> None:
        ordered = sorted(definitions, key=lambda d: d.display_order)
        self._definitions: dict[str, CategoryDefinition] = {}
        for definition in ordered:
            if definition.category_id in self._definitions:
                logger.warning("Duplicate category id %r ignored", definition.category_id)
                continue
            self._definitions[definition.category_id] = definition
        self._by_effect: dict[str, list[str]] = {}
        for definition in self._definitions.values():
            for member in definition.members:
                self._by_effect.setdefault(member.lower(), []).append(definition.category_id)

    @classmethod
    def load(cls, templates_path: str | Path | None = None) -> CategoryCatalog:
        """Load categories.yaml from a directory, or the packaged default."""
        data = _load_yaml(Path(templates_path) if templates_path else None, CATEGORIES_FILE)
        definitions: list[CategoryDefinition] = []
        for position, entry in enumerate(data.get("categories", []) or []):
            if not isinstance(entry, dict):
                continue
            category_id = str(entry.get("id") or "").strip()
            members = [str(e).strip() for e in entry.get("effects", []) or [] if str(e).strip()]
            if not category_id or not members:
                continue
            definitions.append(
                CategoryDefinition(
                    category_id=category_id,
                    members=frozenset(members),
                    name=str(entry.get("name") or category_id),
                    display_order=int(entry.get("display_order", position + 1)),
                )
            )
        logger.debug("Loaded %d effect categories", len(definitions))
        return cls(definitions)

    def get(self, category_id: str) -> CategoryDefinition | None:
        return self._definitions.get(category_id)

    def members(self, category_id: str) -> frozenset[str]:
        definition = self._definitions.get(category_id)
        return definition.members if definition else frozenset()

    def category_ids(self) -> list[str]:
        return list(self._definitions)

    def categories_for_effect(self, effect: str) -> list[str]:
        """All categories containing the effect (case-insensitive), in display order."""
        if not effect:
            return []
        return list(self._by_effect.get(effect.strip().lower(), []))

    def category_for_effect(self, effect: str) -> str | None:
        matches = self.categories_for_effect(effect)
        return matches[0] if matches else None

    def effects_in_categories(self, category_ids: Iterable[str]) -> frozenset[str]:
        effects: set[str] = set()
        for category_id in category_ids:
            effects.update(self.members(category_id))
        return frozenset(effects)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._definitions

    def __iter__(self) -> Iterator[CategoryDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)
