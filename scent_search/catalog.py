from __future__ import annotations

"""
Catalog and editorial content provider.

Products and journal entries come from the remote commerce API when one is
configured. Each call makes up to HTTP_RETRY_ATTEMPTS attempts (transport
errors and 5xx responses are retried with linear backoff); any remaining
failure falls back to the bundled static dataset. The search core never sees
the difference.
"""

import json
import time
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

import httpx
from loguru import logger
from pydantic import ValidationError

from . import config
from .models import JournalEntry, Product
from .normalize import basic_clean

T = TypeVar("T")


class CatalogFetchError(RuntimeError):
    """Remote catalog call failed; ``retryable`` marks transient failures."""

    def __init__(self, message: str, retryable: bool = False) -> None:
        super().__init__(message)
        self.retryable = retryable


@dataclass(frozen=True)
class FallbackCatalog:
    products: Tuple[Product, ...]
    journal: Tuple[JournalEntry, ...]


# ---------------------------
# Static fallback dataset
# ---------------------------

@lru_cache(maxsize=4)
def load_fallback_catalog(path: Path = config.FALLBACK_CATALOG_PATH) -> FallbackCatalog:
    """
    Load the bundled catalog used whenever the remote API is unavailable.
    Missing or malformed files are deployment errors and propagate.
    """
    logger.info("Loading fallback catalog from {}", path)
    with Path(path).open("r", encoding="utf-8") as f:
        raw = json.load(f)

    catalog = FallbackCatalog(
        products=tuple(Product.model_validate(p) for p in raw.get("products", [])),
        journal=tuple(JournalEntry.model_validate(j) for j in raw.get("journal", [])),
    )
    logger.info(
        "Loaded fallback catalog with {} products and {} journal entries",
        len(catalog.products),
        len(catalog.journal),
    )
    return catalog


# ---------------------------
# Remote payload cleaning
# ---------------------------

def _clean_text(value: Any) -> Any:
    # Non-strings are left for validation to reject.
    return basic_clean(value) if isinstance(value, str) else value


def _clean_note_tier(values: Any) -> Any:
    if values is None:
        return []
    if not isinstance(values, list):
        return values
    return [_clean_text(n) for n in values]


def _clean_product_payload(raw: Dict[str, Any]) -> Dict[str, Any]:
    item = dict(raw)
    for key in ("title", "description"):
        if key in item:
            item[key] = _clean_text(item[key])
    brand = item.get("brand")
    if isinstance(brand, dict) and "name" in brand:
        item["brand"] = {**brand, "name": _clean_text(brand["name"])}
    notes = item.get("notes")
    if isinstance(notes, dict):
        item["notes"] = {tier: _clean_note_tier(values) for tier, values in notes.items()}
    return item


def _clean_journal_payload(raw: Dict[str, Any]) -> Dict[str, Any]:
    item = dict(raw)
    for key in ("title", "excerpt"):
        if key in item:
            item[key] = _clean_text(item[key])
    return item


def _require_records(items: List[Any], kind: str) -> None:
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise CatalogFetchError(
                f"{kind} record #{index} is {type(item).__name__}, not an object"
            )


def _parse_products(data: Any) -> List[Product]:
    if not isinstance(data, list):
        raise CatalogFetchError("Product payload 'data' is not a list")
    _require_records(data, "Product")
    try:
        return [Product.model_validate(_clean_product_payload(p)) for p in data]
    except (ValidationError, TypeError, ValueError) as e:
        raise CatalogFetchError(f"Invalid product record: {e}") from e


def _parse_journal(data: Any) -> List[JournalEntry]:
    journal = data.get("journal") if isinstance(data, dict) else None
    if not isinstance(journal, list):
        raise CatalogFetchError("Home payload is missing a 'journal' list")
    _require_records(journal, "Journal")
    try:
        return [JournalEntry.model_validate(_clean_journal_payload(j)) for j in journal]
    except (ValidationError, TypeError, ValueError) as e:
        raise CatalogFetchError(f"Invalid journal record: {e}") from e


# ---------------------------
# HTTP
# ---------------------------

def _http_client() -> httpx.Client:
    return httpx.Client(
        headers={"User-Agent": config.HTTP_USER_AGENT, "Accept": "application/json"},
        follow_redirects=True,
        timeout=httpx.Timeout(config.HTTP_READ_TIMEOUT, connect=config.HTTP_CONNECT_TIMEOUT),
    )


def _get_data(client: httpx.Client, url: str, params: Dict[str, Any]) -> Any:
    try:
        r = client.get(url, params=params)
    except httpx.HTTPError as e:
        # Redirect loops and undecodable bodies will not improve on retry.
        raise CatalogFetchError(
            f"{e.__class__.__name__} for {url}",
            retryable=isinstance(e, httpx.TransportError),
        ) from e

    if r.status_code >= 400:
        raise CatalogFetchError(f"HTTP {r.status_code} for {url}", retryable=r.status_code >= 500)

    try:
        body = r.json()
    except ValueError as e:
        raise CatalogFetchError(f"Non-JSON response from {url}") from e

    if not isinstance(body, dict) or "data" not in body:
        raise CatalogFetchError(f"Response from {url} is missing the 'data' envelope")
    return body["data"]


def _fetch_remote(
    path: str,
    params: Dict[str, Any],
    parse: Callable[[Any], T],
    base_url: Optional[str],
) -> Optional[T]:
    if not base_url:
        return None

    url = f"{base_url}{path}"
    attempts = max(1, config.HTTP_RETRY_ATTEMPTS)
    for attempt in range(1, attempts + 1):
        try:
            with _http_client() as client:
                return parse(_get_data(client, url, params))
        except CatalogFetchError as e:
            logger.warning("Catalog fetch attempt {}/{} failed: {}", attempt, attempts, e)
            if not e.retryable or attempt == attempts:
                return None
            time.sleep(config.HTTP_RETRY_BACKOFF * attempt)
    return None


# ---------------------------
# Public API
# ---------------------------

def fetch_products(
    limit: Optional[int] = None,
    search: Optional[str] = None,
    base_url: Optional[str] = None,
) -> List[Product]:
    """
    Products from the remote API, or the static fallback when it is
    unreachable. ``search`` is only a server-side narrowing hint; the
    fallback ignores it and returns the first ``limit`` products.
    """
    params: Dict[str, Any] = {}
    if limit:
        params["limit"] = limit
    if search:
        params["search"] = search

    remote = _fetch_remote("/api/products", params, _parse_products, base_url or config.API_BASE_URL)
    if remote is not None:
        logger.info("Fetched {} products from remote catalog", len(remote))
        return remote

    logger.info("Serving products from fallback catalog")
    products = load_fallback_catalog().products
    return list(products[:limit] if limit else products)


def fetch_journal_entries(base_url: Optional[str] = None) -> List[JournalEntry]:
    """Editorial entries from the remote home payload, or the static fallback."""
    params = {"featuredLimit": config.JOURNAL_FEATURED_LIMIT}
    remote = _fetch_remote("/api/home", params, _parse_journal, base_url or config.API_BASE_URL)
    if remote is not None:
        logger.info("Fetched {} journal entries from remote content", len(remote))
        return remote

    logger.info("Serving journal entries from fallback catalog")
    return list(load_fallback_catalog().journal)
