"""Load the distractor catalog from YAML and serve it per category."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from guessme.domain.enums import BOOLEAN_CATEGORIES, NUMERIC_CATEGORIES, QuestionCategory
from guessme.errors import CatalogError

_DISTRACTOR_CACHE: dict[QuestionCategory, tuple[str, ...]] | None = None


def _distractors_path() -> Path:
    return Path(__file__).resolve().parent / "data" / "distractors.yml"


def _parse_catalog(data: Any) -> dict[QuestionCategory, tuple[str, ...]]:
    if not isinstance(data, dict) or not isinstance(data.get("categories"), dict):
        raise CatalogError("distractor catalog needs a 'categories' mapping")
    catalog: dict[QuestionCategory, tuple[str, ...]] = {}
    for key, values in data["categories"].items():
        try:
            category = QuestionCategory(key)
        except ValueError as exc:
            raise CatalogError(f"unknown distractor category {key!r}") from exc
        if category in NUMERIC_CATEGORIES or category in BOOLEAN_CATEGORIES:
            raise CatalogError(f"{category} answers are synthesised, not listed")
        entries = [str(value).strip() for value in values or []]
        seen: set[str] = set()
        for entry in entries:
            folded = entry.casefold()
            if not entry or folded in seen:
                raise CatalogError(f"duplicate or blank distractor {entry!r} in {category}")
            seen.add(folded)
        catalog[category] = tuple(entries)
    return catalog


def load_distractor_catalog(path: Path | None = None) -> dict[QuestionCategory, tuple[str, ...]]:
    """Load the catalog once and cache it.

    Passing an explicit path bypasses the cache.
    """
    global _DISTRACTOR_CACHE
    if path is None and _DISTRACTOR_CACHE is not None:
        return _DISTRACTOR_CACHE
    catalog_path = path or _distractors_path()
    try:
        data = yaml.safe_load(catalog_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise CatalogError(f"cannot read distractor catalog {catalog_path}: {exc}") from exc
    catalog = _parse_catalog(data)
    if path is None:
        _DISTRACTOR_CACHE = catalog
    return catalog


def distractors_for(category: QuestionCategory) -> tuple[str, ...]:
    return load_distractor_catalog().get(category, ())
