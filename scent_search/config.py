from __future__ import annotations

import os
from pathlib import Path
from typing import List

from pydantic import BaseModel

from .models import SearchResultsSet


# ---------------------------
# Paths
# ---------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DATA_DIR = PROJECT_ROOT / "data"
FALLBACK_CATALOG_PATH = DATA_DIR / "fallback_catalog.json"


# ---------------------------
# Remote commerce API
# ---------------------------

def _api_base_url() -> str | None:
    explicit = os.getenv("API_BASE_URL") or os.getenv("NEXT_PUBLIC_API_BASE_URL")
    if not explicit:
        return None
    return explicit.rstrip("/")


API_BASE_URL = _api_base_url()

HTTP_CONNECT_TIMEOUT = float(os.getenv("HTTP_CONNECT_TIMEOUT", "3.0"))
HTTP_READ_TIMEOUT = float(os.getenv("HTTP_READ_TIMEOUT", "7.0"))
HTTP_RETRY_ATTEMPTS = int(os.getenv("HTTP_RETRY_ATTEMPTS", "2"))
HTTP_RETRY_BACKOFF = float(os.getenv("HTTP_RETRY_BACKOFF", "0.3"))  # seconds, linear

HTTP_USER_AGENT = os.getenv("HTTP_USER_AGENT", "scent-search/1.0")


# ---------------------------
# Currency formatting
# ---------------------------

CURRENCY_LOCALE = os.getenv("CURRENCY_LOCALE", "en-IN")
CURRENCY_CODE = os.getenv("CURRENCY_CODE", "INR")


# ---------------------------
# Search policy
# ---------------------------

DEFAULT_SUGGESTION_LIMIT = 16
MAX_SUGGESTION_LIMIT = 64

# Appended after every catalog facet, in this order.
CURATED_SUGGESTIONS: List[str] = [
    "Layering ritual",
    "Evening composition",
    "Giftable trio",
    "Amber vanilla",
]

SEARCH_PRODUCT_LIMIT = 48      # products requested when a query is present
BROWSE_PRODUCT_LIMIT = 32      # products requested for the empty browse state
SUGGESTION_PRODUCT_LIMIT = 64
JOURNAL_FEATURED_LIMIT = 4

MIN_QUERY_CHARS = int(os.getenv("MIN_QUERY_CHARS", "2"))
MAX_QUERY_CHARS = 512


# ---------------------------
# Pydantic models shared around the app
# ---------------------------

class SearchResponse(BaseModel):
    """
    Response body for GET /api/search.
    """

    query: str
    tokens: List[str]
    results: SearchResultsSet


class SuggestionsResponse(BaseModel):
    """
    Response body for GET /api/search/suggestions.
    """

    suggestions: List[str]


class SearchPageState(SearchResponse):
    """
    Initial state for a server-rendered search page: ranked results plus the
    autocomplete list built from the same product slice.
    """

    suggestions: List[str]


class HealthResponse(BaseModel):
    """
    Response body for GET /health.
    """

    status: str
