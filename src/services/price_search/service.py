"""High-level service that orchestrates price lookups."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Dict, List, Sequence, Tuple

from .models import (
    AggregateResponse,
    ProductRecord,
    ProviderRegistryError,
    SearchStats,
)
from .providers.base import BasePriceProvider
from .providers.computer_village import ComputerVillagePriceProvider
from .providers.startech import StarTechPriceProvider
from .providers.ultratech import UltraTechPriceProvider

logger = logging.getLogger("price_search.service")

# Time left for parsing once the slowest fetch has hit its own timeout.
DEADLINE_GRACE = 1.0

DEFAULT_PROVIDERS: Tuple[BasePriceProvider, ...] = (
    StarTechPriceProvider(),
    UltraTechPriceProvider(),
    ComputerVillagePriceProvider(),
)


def validate_providers(providers: Sequence[BasePriceProvider]) -> None:
    """Reject registries that cannot produce a consistent response."""
    if not providers:
        raise ProviderRegistryError("No price providers configured.")

    names = set()
    for provider in providers:
        if not isinstance(provider, BasePriceProvider):
            raise ProviderRegistryError(
                f"{provider!r} is not a price provider."
            )
        for attribute in ("site_name", "color", "base_url", "search_url"):
            if not getattr(provider, attribute, None):
                raise ProviderRegistryError(
                    f"{type(provider).__name__} is missing '{attribute}'."
                )
        if provider.site_name in names:
            raise ProviderRegistryError(
                f"Duplicate provider name '{provider.site_name}'."
            )
        names.add(provider.site_name)


class PriceSearchService:
    """Coordinate price lookups across multiple providers."""

    def __init__(self, providers: Sequence[BasePriceProvider] | None = None) -> None:
        self.providers: Tuple[BasePriceProvider, ...] = tuple(
            DEFAULT_PROVIDERS if providers is None else providers
        )
        validate_providers(self.providers)
        self.deadline = (
            max(provider.timeout for provider in self.providers) + DEADLINE_GRACE
        )

    def search(self, query: str) -> AggregateResponse:
        """Query every provider concurrently and merge the offers by price."""
        logger.info('Searching for products: "%s"', query)
        per_site = self._fan_out(query)

        ranked: List[Tuple[int, int, int, ProductRecord]] = []
        for site_index, offers in enumerate(per_site):
            for position, offer in enumerate(offers):
                ranked.append((offer.price_num, site_index, position, offer))
        ranked.sort(key=lambda entry: entry[:3])
        products = [entry[3] for entry in ranked]

        return AggregateResponse(
            query=query,
            stats=self._stats(products),
            products=products,
        )

    def active_sites(self) -> List[Dict[str, str]]:
        """Describe configured stores for the health endpoint."""
        return [
            {
                "name": provider.site_name,
                "color": provider.color,
                "url": provider.build_search_url("test").split("?")[0],
            }
            for provider in self.providers
        ]

    def _fan_out(self, query: str) -> List[List[ProductRecord]]:
        """Run every provider and wait for all of them, up to the deadline.

        A provider still running at the deadline contributes nothing; its
        thread is left to finish in the background.
        """
        pool = ThreadPoolExecutor(
            max_workers=len(self.providers), thread_name_prefix="price-search"
        )
        try:
            futures: List[Future[List[ProductRecord]]] = [
                pool.submit(provider.search, query) for provider in self.providers
            ]
            wait(futures, timeout=self.deadline)
            results: List[List[ProductRecord]] = []
            for provider, future in zip(self.providers, futures):
                if not future.done():
                    logger.warning(
                        "%s: no answer within %.1fs", provider.site_name, self.deadline
                    )
                    results.append([])
                    continue
                try:
                    results.append(list(future.result()))
                except Exception:
                    logger.exception(
                        "Provider %s raised instead of degrading", provider.site_name
                    )
                    results.append([])
        finally:
            pool.shutdown(wait=False, cancel_futures=True)
        return results

    def _stats(self, products: Sequence[ProductRecord]) -> SearchStats:
        prices = [product.price_num for product in products if product.price_num > 0]
        return SearchStats(
            total_products=len(products),
            total_sites=len(self.providers),
            lowest_price=min(prices) if prices else None,
            highest_price=max(prices) if prices else None,
        )


def get_price_search_service() -> PriceSearchService:
    """FastAPI dependency returning a service over the default stores."""
    return PriceSearchService()
