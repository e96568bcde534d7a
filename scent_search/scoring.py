from __future__ import annotations

"""
Relevance scoring for composed search candidates.

Every query token is required (AND policy): a candidate whose searchable
text misses any token is rejected and the scorer returns ``None``. Tokens
that match add a base point plus title bonuses. Repeated tokens in the query
are scored once per occurrence.
"""

from typing import Optional

from .models import SearchContext
from .pipeline_types import ComposedCandidate

TOKEN_MATCH_WEIGHT = 1.0
PRODUCT_TITLE_MATCH_BONUS = 0.5
PRODUCT_TITLE_PREFIX_BONUS = 0.5
JOURNAL_TITLE_MATCH_BONUS = 0.25
BADGE_PHRASE_BONUS = 0.25


def _score_tokens(
    candidate: ComposedCandidate,
    context: SearchContext,
    title_bonus: float,
    prefix_bonus: float,
) -> Optional[float]:
    haystack = candidate.searchable_text.lower()
    title = candidate.title.lower()

    score = 0.0
    for token in context.tokens:
        if token not in haystack:
            return None
        score += TOKEN_MATCH_WEIGHT
        if token in title:
            score += title_bonus
        if prefix_bonus and title.startswith(token):
            score += prefix_bonus
    return score


def score_product(candidate: ComposedCandidate, context: SearchContext) -> Optional[float]:
    """Score a composed product, or ``None`` when a token is missing."""
    if not context.tokens:
        return 0.0

    score = _score_tokens(
        candidate,
        context,
        title_bonus=PRODUCT_TITLE_MATCH_BONUS,
        prefix_bonus=PRODUCT_TITLE_PREFIX_BONUS,
    )
    if score is None:
        return None

    # Whole-phrase bonus, applied once.
    if any(context.query in badge.lower() for badge in candidate.badges or ()):
        score += BADGE_PHRASE_BONUS
    return score


def score_journal_entry(candidate: ComposedCandidate, context: SearchContext) -> Optional[float]:
    """Score a composed journal entry, or ``None`` when a token is missing."""
    if not context.tokens:
        return 0.0
    return _score_tokens(
        candidate,
        context,
        title_bonus=JOURNAL_TITLE_MATCH_BONUS,
        prefix_bonus=0.0,
    )
