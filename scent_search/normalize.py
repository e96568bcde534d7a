from __future__ import annotations

"""
Text normalisation helpers shared by the catalog provider and the search core.

Public helpers:

* basic_clean(text) -> str
    Light-weight clean applied to remote catalog copy before validation.

* build_search_context(query) -> SearchContext
    Query tokenizer used by every search entry point.
"""

from typing import List
import re
import unicodedata

from bs4 import BeautifulSoup

from .models import SearchContext

MAX_FIELD_CHARS = 20_000

_WHITESPACE_RE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Low-level helpers
# ---------------------------------------------------------------------------


def _strip_html(text: str) -> str:
    if not text or "<" not in text:
        return text
    soup = BeautifulSoup(text, "html.parser")
    return soup.get_text(" ", strip=True)


def _normalise_unicode(text: str) -> str:
    # NFC only: NFKC would rewrite "™" and "½" in product copy.
    text = unicodedata.normalize("NFC", text)
    text = text.replace("‘", "'").replace("’", "'")
    text = text.replace("“", '"').replace("”", '"')
    return text


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def basic_clean(text: str | None) -> str:
    """Light-weight clean for catalog fields.

    * strips HTML
    * normalises unicode and whitespace
    * truncates excessively long inputs
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)

    if len(text) > MAX_FIELD_CHARS:
        text = text[:MAX_FIELD_CHARS]

    text = _strip_html(text)
    text = _normalise_unicode(text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def tokenize(normalized: str) -> List[str]:
    """Split on whitespace runs, keeping order and duplicates."""
    return [piece.strip() for piece in _WHITESPACE_RE.split(normalized) if piece.strip()]


def build_search_context(query: str | None) -> SearchContext:
    """Lower-case and trim the raw query, then tokenize it.

    An empty or whitespace-only query gives ``SearchContext(query="", tokens=[])``,
    which the ranker treats as "match everything with score 0".
    """
    normalized = (query or "").strip().lower()
    return SearchContext(query=normalized, tokens=tokenize(normalized))
