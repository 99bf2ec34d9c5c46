"""Load the category catalog and precompute requirement sets."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Sequence, Tuple

from taketracker.config import StatRules, get_rules
from taketracker.models import CatalogEntry


logger = logging.getLogger(__name__)

Catalog = Tuple[CatalogEntry, ...]


class CatalogLoadError(ValueError):
    """Raised when the catalog source is missing or malformed."""


def required_keys_from_label(label: str, vocabulary: Iterable[str]) -> Tuple[str, ...]:
    """Split ``label`` on ``/`` and keep the recognized statistic keys in order."""

    known = set(vocabulary)
    keys: List[str] = []
    for part in label.split("/"):
        token = part.strip()
        if token in known and token not in keys:
            keys.append(token)
    return tuple(keys)


def _explicit_required(raw: Any, vocabulary: Iterable[str], index: int) -> Tuple[str, ...]:
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise CatalogLoadError(f"catalog entry {index}: 'required' must be a list of strings")
    known = set(vocabulary)
    keys: List[str] = []
    for item in raw:
        token = item.strip()
        if token in known and token not in keys:
            keys.append(token)
    return tuple(keys)


def _coerce_id(raw: Any, index: int) -> str:
    if isinstance(raw, bool):
        raise CatalogLoadError(f"catalog entry {index}: 'id' must be a string")
    if isinstance(raw, int):
        return str(raw)
    if not isinstance(raw, str) or not raw.strip():
        raise CatalogLoadError(f"catalog entry {index}: 'id' must be a non-empty string")
    return raw.strip()


def load_catalog(raw_entries: Sequence[Any] | None, rules: StatRules | None = None) -> Catalog:
    """Build catalog entries from raw ``{id, category}`` records.

    Entries may also carry an explicit ``required`` list, which takes the
    place of parsing the label. Either way the keys are filtered against the
    rule set's vocabulary.
    """

    if raw_entries is None:
        raise CatalogLoadError("catalog source is missing")
    if not isinstance(raw_entries, list):
        raise CatalogLoadError(f"catalog must be a list, got {type(raw_entries).__name__}")

    rules = rules or get_rules()
    entries: List[CatalogEntry] = []
    seen: set[str] = set()
    for index, item in enumerate(raw_entries):
        if not isinstance(item, dict):
            raise CatalogLoadError(f"catalog entry {index} is not an object")
        if "id" not in item or "category" not in item:
            raise CatalogLoadError(f"catalog entry {index} needs 'id' and 'category'")
        entry_id = _coerce_id(item["id"], index)
        category = item["category"]
        if not isinstance(category, str):
            raise CatalogLoadError(f"catalog entry {index}: 'category' must be a string")
        if entry_id in seen:
            raise CatalogLoadError(f"duplicate catalog id {entry_id!r}")
        seen.add(entry_id)

        if "required" in item:
            required = _explicit_required(item["required"], rules.vocabulary, index)
        else:
            required = required_keys_from_label(category, rules.vocabulary)
        entries.append(CatalogEntry(id=entry_id, category=category, required_keys=required))
    return tuple(entries)


def load_catalog_file(path: Path, rules: StatRules | None = None) -> Catalog:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogLoadError(f"cannot read catalog {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"invalid catalog JSON in {path}: {exc}") from exc
    return load_catalog(data, rules)


def load_catalog_or_empty(path: Path, rules: StatRules | None = None) -> Catalog:
    """Load the catalog, falling back to an empty one when it cannot be read."""

    try:
        catalog = load_catalog_file(path, rules)
    except CatalogLoadError as exc:
        logger.error("Catalog unavailable, continuing with an empty catalog: %s", exc)
        return ()
    matchable = sum(1 for entry in catalog if entry.matchable)
    logger.info("Loaded %d catalog entries (%d matchable) from %s", len(catalog), matchable, path)
    return catalog
