from __future__ import annotations

from typing import Iterable, List, Sequence

from .config import CURATED_SUGGESTIONS, DEFAULT_SUGGESTION_LIMIT
from .fields import gender_label
from .models import Product


class _SuggestionCollector:
    """Ordered, case-insensitively unique list that stops growing at ``limit``."""

    def __init__(self, limit: int) -> None:
        self.limit = max(0, limit)
        self.values: List[str] = []
        self._seen: set[str] = set()

    @property
    def full(self) -> bool:
        return len(self.values) >= self.limit

    def push(self, value: str) -> None:
        trimmed = (value or "").strip()
        if not trimmed or self.full:
            return
        key = trimmed.lower()
        if key in self._seen:
            return
        self._seen.add(key)
        self.values.append(trimmed)

    def extend(self, values: Iterable[str]) -> None:
        for value in values:
            if self.full:
                return
            self.push(value)


def build_search_suggestions(
    products: Sequence[Product],
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> List[str]:
    """
    Autocomplete strings in strict tier order: titles, brands, gender labels,
    fragrance notes (top, heart, base per product), then the curated tail.
    First-seen casing wins; later tiers are skipped once ``limit`` is reached.
    """
    collector = _SuggestionCollector(limit)

    tiers = (
        (p.title for p in products),
        (p.brand.name for p in products),
        (gender_label(p.gender) for p in products),
        (note for p in products for note in (*p.notes.top, *p.notes.heart, *p.notes.base)),
        iter(CURATED_SUGGESTIONS),
    )
    for tier in tiers:
        if collector.full:
            break
        collector.extend(tier)

    return collector.values
