from __future__ import annotations

from typing import Protocol


class TaxonomyProvider(Protocol):
    version: str

    def categories(self) -> tuple[str, ...]:
        """Return category names in precedence order."""

    def label_keyword(self, term: str) -> str | None:
        """Return the category a normalized term belongs to, if any."""

    def is_action_verb(self, term: str) -> bool:
        """Return True when the normalized term is a listed action verb."""
