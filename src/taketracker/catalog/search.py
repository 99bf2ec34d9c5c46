"""Free-text lookup over the catalog."""

from __future__ import annotations

from typing import List, Sequence

from taketracker.models import CatalogEntry


def _fold_plural(token: str) -> str:
    # Loose: also folds singular words that happen to end in "s".
    return token[:-1] if token.endswith("s") else token


def normalize_words(text: str) -> List[str]:
    """Lowercase, treat ``/`` as a space, split and fold one trailing ``s``."""

    cleaned = text.lower().replace("/", " ").strip()
    words = [_fold_plural(token) for token in cleaned.split()]
    # A lone "s" folds to nothing and would otherwise match every label.
    return [word for word in words if word]


def normalize_label(text: str) -> str:
    return " ".join(normalize_words(text))


def entry_matches(words: Sequence[str], raw_query: str, entry: CatalogEntry) -> bool:
    label = normalize_label(entry.category)
    if all(word in label for word in words):
        return True
    return raw_query in entry.id


def search_catalog(query: str, catalog: Sequence[CatalogEntry]) -> List[CatalogEntry]:
    """Return catalog entries matching ``query`` in catalog order.

    Every query word must appear as a substring of the entry's normalized
    label, or the raw query must appear inside the entry id. A query with no
    words returns nothing.
    """

    words = normalize_words(query)
    if not words:
        return []
    return [entry for entry in catalog if entry_matches(words, query, entry)]
