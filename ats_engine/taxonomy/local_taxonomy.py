from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ats_engine.normalize.text import normalize_text

from .provider import TaxonomyProvider


class LocalTaxonomy(TaxonomyProvider):
    """Industry keyword lists loaded from a JSON file shipped with the package.

    Terms are stored in the same normalized form the extractor produces, so
    "node.js" is looked up as "node js".
    """

    def __init__(self, data_path: str | Path | None = None) -> None:
        path = Path(data_path) if data_path else Path(__file__).with_name("industry_keywords.json")
        raw = self._load(path)
        self.version = str(raw.get("version") or "unversioned")
        self._categories, self._labels = self._build_labels(raw.get("categories"), path)
        self._action_verbs = self._build_action_verbs(raw.get("action_verbs"), path)

    @staticmethod
    def _load(path: Path) -> dict[str, Any]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid taxonomy '{path}': expected a top-level object.")
        return raw

    @staticmethod
    def _build_labels(categories: Any, path: Path) -> tuple[tuple[str, ...], dict[str, str]]:
        if not isinstance(categories, dict) or not categories:
            raise ValueError(f"Invalid taxonomy '{path}': 'categories' must be a non-empty object.")

        labels: dict[str, str] = {}
        for category, terms in categories.items():
            if not isinstance(terms, list) or not all(isinstance(term, str) for term in terms):
                raise ValueError(f"Invalid taxonomy '{path}': category '{category}' must be a list of strings.")
            for term in terms:
                key = normalize_text(term)
                if key:
                    # first category listed wins for overlapping terms
                    labels.setdefault(key, str(category))
        return tuple(str(name) for name in categories), labels

    @staticmethod
    def _build_action_verbs(verbs: Any, path: Path) -> frozenset[str]:
        if verbs is None:
            return frozenset()
        if not isinstance(verbs, list) or not all(isinstance(verb, str) for verb in verbs):
            raise ValueError(f"Invalid taxonomy '{path}': 'action_verbs' must be a list of strings.")
        return frozenset(normalize_text(verb) for verb in verbs if verb.strip())

    def categories(self) -> tuple[str, ...]:
        return self._categories

    def label_keyword(self, term: str) -> str | None:
        return self._labels.get(normalize_text(term))

    def is_action_verb(self, term: str) -> bool:
        return normalize_text(term) in self._action_verbs
