"""Text normalization shared by the search index and the filter engine."""

from __future__ import annotations

import unicodedata
from typing import Iterable, Optional

_SPECIAL_FOLDS = {"ß": "ss", "ẞ": "ss"}


def normalize_diacritics(text: str) -> str:
    """
    Lowercase and fold diacritics ("é" -> "e", "ä" -> "a", "ß" -> "ss").

    Combining marks U+0300..U+036F are dropped after NFD decomposition.
    """
    lowered = text.lower()
    for source, target in _SPECIAL_FOLDS.items():
        lowered = lowered.replace(source, target)
    decomposed = unicodedata.normalize("NFD", lowered)
    return "".join(ch for ch in decomposed if not 0x0300 <= ord(ch) <= 0x036F)


def split_terms(query: str) -> list[str]:
    """Normalize a query and split it on whitespace, dropping empty terms."""
    return [term for term in normalize_diacritics(query).split() if term]


def join_values(values: Optional[Iterable[str]]) -> str:
    if not values:
        return ""
    return " ".join(v for v in values if v)
