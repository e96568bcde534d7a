from __future__ import annotations

"""
Field composition for search candidates.

Builds, per product or journal entry, the text blob the scorer matches
against plus the description / badges / meta line shown next to a result.
Original casing is kept here; the scorer case-folds.
"""

from typing import Callable, Dict, List, Optional

from .models import JournalEntry, Product
from .money import format_paise, to_fixed
from .pipeline_types import ComposedCandidate

GENDER_LABELS: Dict[str, str] = {
    "men": "For Men",
    "women": "For Women",
    "unisex": "Unisex",
}
DEFAULT_GENDER_LABEL = "For All"

DESCRIPTION_SEPARATOR = " · "
NOTE_SEPARATOR = " • "
META_SEPARATOR = " • "

PriceFormatter = Callable[[Optional[int]], str]


def gender_label(gender: str | None) -> str:
    return GENDER_LABELS.get(gender or "", DEFAULT_GENDER_LABEL)


def product_searchable_text(product: Product) -> str:
    parts = [
        product.title,
        product.brand.name,
        gender_label(product.gender),
        product.description,
        " ".join(product.notes.top),
        " ".join(product.notes.heart),
        " ".join(product.notes.base),
    ]
    return " ".join(parts)


def product_description(product: Product) -> str:
    """'{brand} · {gender} · {top notes}' with empty segments dropped."""
    segments = [
        product.brand.name,
        gender_label(product.gender),
        NOTE_SEPARATOR.join(product.notes.top[:3]),
    ]
    return DESCRIPTION_SEPARATOR.join(s for s in segments if s)


def product_badges(product: Product) -> List[str]:
    candidates = [
        product.brand.name,
        gender_label(product.gender),
        *product.notes.top[:2],
        *product.notes.heart[:1],
    ]
    return list(dict.fromkeys(c for c in candidates if c))


def product_meta(product: Product, format_price: PriceFormatter = format_paise) -> str:
    aggregates = product.aggregates
    rating = f"{to_fixed(aggregates.rating_avg, 1)} ★"
    reviews = f"{aggregates.rating_count} reviews"
    if aggregates.low_price_paise is None:
        return META_SEPARATOR.join([rating, reviews])
    return META_SEPARATOR.join([format_price(aggregates.low_price_paise), rating, reviews])


def compose_product(
    product: Product,
    format_price: PriceFormatter = format_paise,
) -> ComposedCandidate:
    image = product.media[0].url if product.media else None
    return ComposedCandidate(
        id=product.id,
        type="product",
        title=product.title,
        searchable_text=product_searchable_text(product),
        description=product_description(product),
        href=f"/products/{product.slug}",
        image=image,
        badges=tuple(product_badges(product)),
        meta=product_meta(product, format_price),
    )


def compose_journal_entry(entry: JournalEntry) -> ComposedCandidate:
    return ComposedCandidate(
        id=entry.id,
        type="journal",
        title=entry.title,
        searchable_text=" ".join([entry.title, entry.excerpt]),
        description=entry.excerpt,
        href=entry.href,
        image=entry.image or None,
    )
