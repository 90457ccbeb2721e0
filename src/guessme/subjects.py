"""Load subject profiles from YAML files."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from guessme.domain.models import Subject
from guessme.errors import CatalogError


def load_subjects(path: Path) -> list[Subject]:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    entries = data.get("subjects", []) if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise CatalogError(f"{path} must hold a list of subjects")
    try:
        return [Subject.model_validate(entry) for entry in entries]
    except ValidationError as exc:
        raise CatalogError(f"invalid subject in {path}: {exc}") from exc
