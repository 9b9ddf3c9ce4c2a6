"""Ensure packaged templates stay small and loadable."""

from pathlib import Path

import yaml

MAX_BYTES = 50_000

TEMPLATES = Path(__file__).resolve().parents[1] / "src" / "terpenelens" / "templates"


def test_template_sizes() -> None:
    for path in TEMPLATES.glob("*.yaml"):
        assert path.stat().st_size <= MAX_BYTES, f"Template too large: {path}"


def test_templates_parse_as_mappings() -> None:
    paths = sorted(TEMPLATES.glob("*.yaml"))
    assert paths
    for path in paths:
        with path.open("r", encoding="utf-8") as handle:
            assert isinstance(yaml.safe_load(handle), dict), path.name
