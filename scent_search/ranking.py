from __future__ import annotations
"""
Result ranking for the storefront search.

Products and journal entries are composed, scored, filtered and sorted
independently, then combined into one SearchResultsPayload:

- rejected candidates (missing a query token) are dropped
- order is score descending, then title ascending by a locale-style collation
- an empty query keeps every candidate at score 0, so order is purely by title
"""

import unicodedata
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .fields import PriceFormatter, compose_journal_entry, compose_product
from .models import (
    JournalEntry,
    Product,
    SearchContext,
    SearchResult,
    SearchResultsPayload,
    SearchResultsSet,
)
from .money import format_paise
from .normalize import build_search_context
from .pipeline_types import ComposedCandidate
from .scoring import score_journal_entry, score_product

Scorer = Callable[[ComposedCandidate, SearchContext], Optional[float]]


def title_collation_key(title: str) -> Tuple[str, str, str]:
    """
    Deterministic stand-in for a root-locale string comparison.

    Compares accent- and case-insensitively first, then by accents, then puts
    lower case before upper case. Independent of the process locale.
    """
    decomposed = unicodedata.normalize("NFKD", title)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), decomposed.casefold(), title.swapcase()


def _to_result(candidate: ComposedCandidate, score: float) -> SearchResult:
    return SearchResult(
        id=candidate.id,
        title=candidate.title,
        description=candidate.description,
        href=candidate.href,
        image=candidate.image,
        badges=list(candidate.badges) if candidate.badges is not None else None,
        meta=candidate.meta,
        type=candidate.type,
        score=score,
    )


def rank_candidates(
    candidates: Iterable[ComposedCandidate],
    context: SearchContext,
    scorer: Scorer,
) -> List[SearchResult]:
    scored: List[Tuple[ComposedCandidate, float]] = []
    for candidate in candidates:
        score = scorer(candidate, context)
        if score is None:
            continue
        scored.append((candidate, score))

    scored.sort(key=lambda pair: (-pair[1], title_collation_key(pair[0].title)))
    return [_to_result(candidate, score) for candidate, score in scored]


def search_products(
    products: Sequence[Product],
    context: SearchContext,
    format_price: PriceFormatter = format_paise,
) -> List[SearchResult]:
    composed = (compose_product(p, format_price) for p in products)
    return rank_candidates(composed, context, score_product)


def search_journal_entries(
    entries: Sequence[JournalEntry],
    context: SearchContext,
) -> List[SearchResult]:
    composed = (compose_journal_entry(e) for e in entries)
    return rank_candidates(composed, context, score_journal_entry)


def coalesce_search_results(
    products: Sequence[Product],
    journal_entries: Sequence[JournalEntry],
    raw_query: str | None,
    format_price: PriceFormatter = format_paise,
) -> SearchResultsPayload:
    """Tokenize ``raw_query`` and rank both candidate lists against it."""
    context = build_search_context(raw_query)
    return SearchResultsPayload(
        context=context,
        results=SearchResultsSet(
            products=search_products(products, context, format_price),
            journal=search_journal_entries(journal_entries, context),
        ),
    )
