from __future__ import annotations

"""
FastAPI application for the storefront search.

- GET /api/search?q=            ranked products + journal entries
- GET /api/search/suggestions   autocomplete strings from the catalog
- GET /api/search/page?q=       initial state for a server-rendered search page

Queries shorter than MIN_QUERY_CHARS (after trimming) are ranked as the empty
browse state; the raw query is still echoed back.
"""

from typing import List, Tuple

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from . import config
from .catalog import fetch_journal_entries, fetch_products, load_fallback_catalog
from .config import (
    BROWSE_PRODUCT_LIMIT,
    DEFAULT_SUGGESTION_LIMIT,
    MAX_QUERY_CHARS,
    MAX_SUGGESTION_LIMIT,
    SEARCH_PRODUCT_LIMIT,
    SUGGESTION_PRODUCT_LIMIT,
    HealthResponse,
    SearchPageState,
    SearchResponse,
    SuggestionsResponse,
)
from .models import Product, SearchResultsPayload
from .ranking import coalesce_search_results
from .suggestions import build_search_suggestions


# -----------------------
# Pipeline
# -----------------------

def _effective_query(raw_query: str) -> str:
    """Clamp the raw query and drop it when it is too short to rank on."""
    query = (raw_query or "")[:MAX_QUERY_CHARS]
    if len(query.strip()) < config.MIN_QUERY_CHARS:
        return ""
    return query


def run_search(raw_query: str) -> Tuple[List[Product], SearchResultsPayload]:
    query = _effective_query(raw_query)
    products = fetch_products(
        limit=SEARCH_PRODUCT_LIMIT if query else BROWSE_PRODUCT_LIMIT,
        search=query.strip() or None,
    )
    journal = fetch_journal_entries()
    payload = coalesce_search_results(products, journal, query)
    logger.info(
        "Search '{}' -> {} products, {} journal entries",
        payload.context.query,
        len(payload.results.products),
        len(payload.results.journal),
    )
    return products, payload


# -----------------------
# FastAPI app + startup
# -----------------------

app = FastAPI(title="scent-search")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup_event() -> None:
    logger.info("Starting app warmup...")
    if config.API_BASE_URL:
        logger.info("Remote catalog API: {}", config.API_BASE_URL)
    else:
        logger.warning("API_BASE_URL not set; serving the fallback catalog only.")
    # Fail fast on a broken deployment rather than on the first request.
    load_fallback_catalog()
    logger.info("Warmup complete.")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="healthy")


@app.get("/api/search", response_model=SearchResponse)
def search(q: str = "") -> SearchResponse:
    _, payload = run_search(q)
    return SearchResponse(query=q, tokens=payload.context.tokens, results=payload.results)


@app.get("/api/search/suggestions", response_model=SuggestionsResponse)
def suggestions(
    limit: int = Query(DEFAULT_SUGGESTION_LIMIT, ge=1, le=MAX_SUGGESTION_LIMIT),
) -> SuggestionsResponse:
    products = fetch_products(limit=SUGGESTION_PRODUCT_LIMIT)
    return SuggestionsResponse(suggestions=build_search_suggestions(products, limit))


@app.get("/api/search/page", response_model=SearchPageState)
def search_page(q: str = "") -> SearchPageState:
    products, payload = run_search(q)
    return SearchPageState(
        query=q,
        tokens=payload.context.tokens,
        results=payload.results,
        suggestions=build_search_suggestions(products),
    )


# -----------------------
# CLI convenience
# -----------------------

def search_single_query(query: str) -> SearchResultsPayload:
    _, payload = run_search(query)
    return payload
