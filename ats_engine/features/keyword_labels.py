from __future__ import annotations

from collections.abc import Iterable

from ats_engine.schemas.analysis import CategoryMatch
from ats_engine.taxonomy import TaxonomyProvider


def build_keyword_categories(
    matched: Iterable[str],
    missing: Iterable[str],
    taxonomy: TaxonomyProvider,
) -> dict[str, CategoryMatch]:
    """Group matched/missing JD terms by taxonomy category; unlabeled terms are skipped."""
    categories = {name: CategoryMatch() for name in taxonomy.categories()}
    for term in matched:
        label = taxonomy.label_keyword(term)
        if label in categories:
            categories[label].matched.append(term)
    for term in missing:
        label = taxonomy.label_keyword(term)
        if label in categories:
            categories[label].missing.append(term)
    return categories


def find_action_verbs(resume_keywords: Iterable[str], taxonomy: TaxonomyProvider) -> list[str]:
    return [term for term in resume_keywords if " " not in term and taxonomy.is_action_verb(term)]
