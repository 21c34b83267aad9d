"""Domain models for price search results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(slots=True, frozen=True)
class ProductRecord:
    """Single offer scraped from a store listing."""

    title: str
    price: str
    price_num: int
    link: str
    store: str
    store_color: str
    image: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        """Return the wire representation consumed by the UI."""
        return {
            "title": self.title,
            "price": self.price,
            "priceNum": self.price_num,
            "link": self.link,
            "image": self.image,
            "store": self.store,
            "storeColor": self.store_color,
        }


@dataclass(slots=True, frozen=True)
class SearchStats:
    """Summary numbers computed over the merged offers."""

    total_products: int
    total_sites: int
    lowest_price: Optional[int] = None
    highest_price: Optional[int] = None

    def as_dict(self) -> Dict[str, Optional[int]]:
        return {
            "totalProducts": self.total_products,
            "totalSites": self.total_sites,
            "lowestPrice": self.lowest_price,
            "highestPrice": self.highest_price,
        }


@dataclass(slots=True)
class AggregateResponse:
    """Merged and ranked result of one search across every store."""

    query: str
    stats: SearchStats
    products: List[ProductRecord] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "stats": self.stats.as_dict(),
            "products": [product.as_dict() for product in self.products],
        }


class PriceSearchError(RuntimeError):
    """Raised when a provider cannot complete the search."""

    def __init__(self, site: str, message: str) -> None:
        super().__init__(message)
        self.site = site
        self.message = message


class ProviderRegistryError(RuntimeError):
    """Raised when the configured set of providers is unusable."""
