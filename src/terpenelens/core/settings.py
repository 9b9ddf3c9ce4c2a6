"""Engine configuration loaded from YAML."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from terpenelens.core.models import CANONICAL_LANGUAGE, FilterMode

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.yaml"

DEFAULT_LANGUAGE_NAMES = {
    "en": ("English", "English"),
    "de": ("German", "Deutsch"),
}


class SettingsError(ValueError):
    """Raised when a settings file holds values the engine cannot use."""


@dataclass(frozen=True)
class EngineSettings:
    """
    Knobs shared by the merge engine, search index and filter engine.

    Args:
        canonical_language: Language every record is complete in.
        supported_languages: Canonical language plus overlay languages.
        language_names: code -> (English name, native name).
        min_query_length: Shorter free-text queries are ignored during filtering.
        default_filter_mode: Mode restored by FilterEngine.clear_all().
        templates_path: Directory overriding the packaged categories.yaml.
    """

    canonical_language: str = CANONICAL_LANGUAGE
    supported_languages: tuple[str, ...] = ("en", "de")
    language_names: dict[str, tuple[str, str]] = field(
        default_factory=lambda: dict(DEFAULT_LANGUAGE_NAMES)
    )
    min_query_length: int = 2
    default_filter_mode: FilterMode = FilterMode.ANY
    templates_path: Path | None = None

    @property
    def overlay_languages(self) -> tuple[str, ...]:
        return tuple(lang for lang in self.supported_languages if lang != self.canonical_language)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EngineSettings:
        defaults = cls()

        canonical = str(data.get("canonical_language", defaults.canonical_language)).strip()
        if not canonical:
            raise SettingsError("canonical_language must not be empty")

        languages = data.get("supported_languages", list(defaults.supported_languages))
        if not isinstance(languages, list) or not all(isinstance(lang, str) for lang in languages):
            raise SettingsError("supported_languages must be a list of language codes")
        supported = tuple(dict.fromkeys([canonical] + [lang.strip() for lang in languages if lang.strip()]))

        names = dict(defaults.language_names)
        for code, entry in (data.get("language_names") or {}).items():
            if isinstance(entry, dict):
                names[str(code)] = (str(entry.get("name", code)), str(entry.get("native_name", code)))
            elif isinstance(entry, str):
                names[str(code)] = (entry, entry)

        try:
            min_length = int(data.get("min_query_length", defaults.min_query_length))
        except (TypeError, ValueError) as exc:
            raise SettingsError(f"min_query_length must be an integer: {exc}")
        if min_length < 0:
            raise SettingsError("min_query_length must not be negative")

        mode_value = str(data.get("default_filter_mode", defaults.default_filter_mode.value)).lower()
        try:
            mode = FilterMode(mode_value)
        except ValueError:
            raise SettingsError(f"Unknown default_filter_mode: {mode_value}")

        templates = data.get("templates_path")
        return cls(
            canonical_language=canonical,
            supported_languages=supported,
            language_names=names,
            min_query_length=min_length,
            default_filter_mode=mode,
            templates_path=Path(templates) if templates else None,
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> EngineSettings:
        file_path = Path(path)
        if file_path.is_dir():
            file_path = file_path / SETTINGS_FILE
        if not file_path.exists():
            logger.debug("No settings file at %s, using defaults", file_path)
            return cls()
        with file_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {file_path} must contain a mapping")
        return cls.from_dict(data)


def load_settings(path: str | Path | None = None) -> EngineSettings:
    """Load settings from a file or directory, or the packaged settings.yaml."""
    if path is not None:
        return EngineSettings.from_yaml(path)
    try:
        resource = resources.files("terpenelens.templates").joinpath(SETTINGS_FILE)
        with resource.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except FileNotFoundError:
        return EngineSettings()
    if not isinstance(data, dict):
        raise SettingsError("Packaged settings.yaml must contain a mapping")
    return EngineSettings.from_dict(data)
