"""Catalog inputs and search result schemas.

Products and journal entries arrive from the commerce API in camelCase; the
models accept either the wire names or the Python field names.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


SearchResultType = Literal["product", "journal"]


class _CatalogModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Brand(_CatalogModel):
    name: str = ""


class ProductNotes(_CatalogModel):
    top: List[str] = Field(default_factory=list)
    heart: List[str] = Field(default_factory=list)
    base: List[str] = Field(default_factory=list)


class ProductAggregates(_CatalogModel):
    low_price_paise: Optional[int] = Field(default=None, alias="lowPricePaise")
    rating_avg: float = Field(default=0.0, ge=0, allow_inf_nan=False, alias="ratingAvg")
    rating_count: int = Field(default=0, ge=0, alias="ratingCount")


class ProductMedia(_CatalogModel):
    url: str
    alt: Optional[str] = None


class Product(_CatalogModel):
    id: str
    slug: str
    title: str
    brand: Brand = Field(default_factory=Brand)
    # men / women / unisex / other; unknown values are labelled "For All"
    gender: str = "other"
    description: str = ""
    notes: ProductNotes = Field(default_factory=ProductNotes)
    aggregates: ProductAggregates = Field(default_factory=ProductAggregates)
    media: List[ProductMedia] = Field(default_factory=list)


class JournalEntry(_CatalogModel):
    id: str
    title: str
    excerpt: str = ""
    href: str = "#"
    image: str = ""


# ---------------------------
# Search outputs
# ---------------------------

class SearchContext(BaseModel):
    """Normalised query plus its whitespace tokens (duplicates kept)."""

    model_config = ConfigDict(frozen=True)

    query: str
    tokens: List[str]


class SearchResult(BaseModel):
    id: str
    title: str
    description: str
    href: str
    image: Optional[str] = None
    badges: Optional[List[str]] = None
    meta: Optional[str] = None
    type: SearchResultType
    score: float = Field(ge=0)


class SearchResultsSet(BaseModel):
    products: List[SearchResult] = Field(default_factory=list)
    journal: List[SearchResult] = Field(default_factory=list)


class SearchResultsPayload(BaseModel):
    context: SearchContext
    results: SearchResultsSet
