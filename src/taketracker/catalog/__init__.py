"""Catalog loading and search."""

from .loader import (
    Catalog,
    CatalogLoadError,
    load_catalog,
    load_catalog_file,
    load_catalog_or_empty,
    required_keys_from_label,
)
from .search import normalize_label, normalize_words, search_catalog

__all__ = [
    "Catalog",
    "CatalogLoadError",
    "load_catalog",
    "load_catalog_file",
    "load_catalog_or_empty",
    "normalize_label",
    "normalize_words",
    "required_keys_from_label",
    "search_catalog",
]
