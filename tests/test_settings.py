"""Tests for engine settings."""

from pathlib import Path

import pytest

from terpenelens.core.models import FilterMode
from terpenelens.core.settings import EngineSettings, SettingsError, load_settings


def test_packaged_settings_match_defaults() -> None:
    settings = load_settings()
    assert settings.canonical_language == "en"
    assert settings.supported_languages == ("en", "de")
    assert settings.overlay_languages == ("de",)
    assert settings.min_query_length == 2
    assert settings.default_filter_mode is FilterMode.ANY
    assert settings.language_names["de"] == ("German", "Deutsch")


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "absent.yaml") == EngineSettings()


def test_load_from_directory(tmp_path: Path) -> None:
    (tmp_path / "settings.yaml").write_text(
        "supported_languages: [de, fr]\n"
        "min_query_length: 3\n"
        "default_filter_mode: ALL\n"
        "language_names:\n"
        "  fr: French\n"
        "templates_path: categories\n",
        encoding="utf-8",
    )
    settings = load_settings(tmp_path)
    assert settings.supported_languages == ("en", "de", "fr")
    assert settings.min_query_length == 3
    assert settings.default_filter_mode is FilterMode.ALL
    assert settings.language_names["fr"] == ("French", "French")
    assert settings.templates_path == Path("categories")


@pytest.mark.parametrize(
    "payload",
    [
        {"min_query_length": "two"},
        {"min_query_length": -1},
        {"default_filter_mode": "sometimes"},
        {"supported_languages": "de"},
        {"canonical_language": " "},
    ],
)
def test_invalid_values_raise(payload: dict) -> None:
    with pytest.raises(SettingsError):
        EngineSettings.from_dict(payload)


def test_non_mapping_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("- en\n- de\n", encoding="utf-8")
    with pytest.raises(SettingsError):
        load_settings(path)
