"""Typed containers shared across search modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .models import SearchResultType


@dataclass(frozen=True)
class ComposedCandidate:
    """Searchable text surface and display fields for one product or journal entry."""

    id: str
    type: SearchResultType
    title: str
    searchable_text: str
    description: str
    href: str
    image: Optional[str] = None
    badges: Optional[Tuple[str, ...]] = None
    meta: Optional[str] = None


@dataclass(frozen=True)
class HighlightSegment:
    """A run of display text, flagged when it matched a query token."""

    text: str
    matched: bool = False
