"""Test the concurrent aggregation of store offers."""

import time
from typing import List, Sequence
from unittest.mock import MagicMock

import pytest
import requests

from src.services.price_search.models import ProductRecord, ProviderRegistryError
from src.services.price_search.providers.base import BasePriceProvider
from src.services.price_search.providers.startech import StarTechPriceProvider
from src.services.price_search.service import (
    DEFAULT_PROVIDERS,
    PriceSearchService,
    validate_providers,
)


class StubProvider(BasePriceProvider):
    """Provider returning canned offers, or failing like a real upstream."""

    base_url = "https://stub.example"
    search_url = "https://stub.example/search?q={query}"

    def __init__(
        self,
        name: str,
        prices: Sequence[int] = (),
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        super().__init__(timeout=1, max_redirects=5)
        self.site_name = name
        self.color = "#000000"
        self.prices = list(prices)
        self.error = error
        self.delay = delay

    def fetch(self, url: str) -> MagicMock:
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        response = MagicMock()
        response.status_code = 200
        response.text = "<html></html>"
        return response

    def parse(self, html: str, query: str) -> List[ProductRecord]:
        return [
            self.make_record(
                title=f"{query} from {self.site_name} #{index}",
                price_num=price,
                link=f"{self.base_url}/p/{index}",
                image=None,
            )
            for index, price in enumerate(self.prices)
        ]


class TestPriceSearchService:
    """Test cases for PriceSearchService."""

    def test_graceful_degradation_when_one_site_times_out(self) -> None:
        service = PriceSearchService(
            providers=[
                StubProvider("A", prices=[5000, 1200]),
                StubProvider("B", error=requests.Timeout("timed out")),
                StubProvider("C", prices=[3000, 800, 9000]),
            ]
        )

        result = service.search("rtx 3060").as_dict()

        assert result["stats"]["totalSites"] == 3
        assert result["stats"]["totalProducts"] == 5
        assert {product["store"] for product in result["products"]} == {"A", "C"}
        assert [product["priceNum"] for product in result["products"]] == [
            800,
            1200,
            3000,
            5000,
            9000,
        ]
        assert "error" not in result

    def test_stats_low_and_high(self) -> None:
        service = PriceSearchService(
            providers=[StubProvider("A", [2500, 700]), StubProvider("B", [12000])]
        )

        stats = service.search("ssd").stats

        assert stats.lowest_price == 700
        assert stats.highest_price == 12000
        assert stats.total_products == 3

    def test_all_sites_failing_returns_empty_response(self) -> None:
        service = PriceSearchService(
            providers=[
                StubProvider("A", error=requests.ConnectionError("refused")),
                StubProvider("B", error=requests.Timeout("timed out")),
            ]
        )

        result = service.search("psu").as_dict()

        assert result == {
            "query": "psu",
            "stats": {
                "totalProducts": 0,
                "totalSites": 2,
                "lowestPrice": None,
                "highestPrice": None,
            },
            "products": [],
        }

    def test_products_sorted_ascending(self) -> None:
        service = PriceSearchService(
            providers=[
                StubProvider("A", [9000, 100, 4500]),
                StubProvider("B", [300, 8800]),
                StubProvider("C", [4500, 1]),
            ]
        )

        products = service.search("ram").products

        prices = [product.price_num for product in products]
        assert all(a <= b for a, b in zip(prices, prices[1:]))

    def test_equal_prices_keep_site_then_extraction_order(self) -> None:
        service = PriceSearchService(
            providers=[
                StubProvider("A", [5000, 5000]),
                StubProvider("B", [5000], delay=0.05),
                StubProvider("C", [5000]),
            ]
        )

        products = service.search("gpu").products

        assert [(p.store, p.title) for p in products] == [
            ("A", "gpu from A #0"),
            ("A", "gpu from A #1"),
            ("B", "gpu from B #0"),
            ("C", "gpu from C #0"),
        ]

    def test_same_upstream_responses_give_identical_results(self) -> None:
        providers = [StubProvider("A", [700, 300]), StubProvider("B", [300, 50000])]
        service = PriceSearchService(providers=providers)

        first = service.search("case").as_dict()
        second = service.search("case").as_dict()

        assert first == second

    def test_query_is_returned_unmodified(self) -> None:
        service = PriceSearchService(providers=[StubProvider("A", [700])])

        assert service.search("  RTX 4060 Ti ").query == "  RTX 4060 Ti "

    def test_waits_for_slow_sites(self) -> None:
        service = PriceSearchService(
            providers=[StubProvider("Fast", [1000]), StubProvider("Slow", [900], delay=0.1)]
        )

        products = service.search("cpu").products

        assert [product.store for product in products] == ["Slow", "Fast"]

    def test_provider_raising_past_its_boundary_counts_as_empty(self) -> None:
        broken = StubProvider("Broken")
        broken.search = MagicMock(side_effect=RuntimeError("boom"))
        service = PriceSearchService(providers=[broken, StubProvider("Ok", [1500])])

        result = service.search("ssd")

        assert [product.store for product in result.products] == ["Ok"]
        assert result.stats.total_sites == 2

    def test_site_past_the_deadline_counts_as_empty(self) -> None:
        service = PriceSearchService(
            providers=[StubProvider("Hung", [100], delay=4), StubProvider("Ok", [1500])]
        )

        started = time.monotonic()
        result = service.search("ssd")
        elapsed = time.monotonic() - started

        assert service.deadline == 2
        assert elapsed < 3.5
        assert [product.store for product in result.products] == ["Ok"]
        assert result.stats.total_sites == 2

    def test_dripping_store_does_not_stall_the_search(
        self, dripping_store_url: str
    ) -> None:
        dripping = StarTechPriceProvider(timeout=1, max_redirects=5)
        dripping.search_url = dripping_store_url
        service = PriceSearchService(providers=[dripping, StubProvider("Ok", [700])])

        started = time.monotonic()
        result = service.search("psu")
        elapsed = time.monotonic() - started

        assert elapsed < 3.5
        assert [product.store for product in result.products] == ["Ok"]
        assert result.stats.total_sites == 2

    def test_active_sites_strip_query_string(self) -> None:
        sites = PriceSearchService().active_sites()

        assert sites[0] == {
            "name": "StarTech",
            "color": "#ef4444",
            "url": "https://www.startech.com.bd/product/search",
        }
        assert [site["name"] for site in sites] == [
            "StarTech",
            "UltraTech",
            "Computer Village",
        ]


class TestValidateProviders:
    """Test cases for the provider registry checks."""

    def test_default_registry_is_valid(self) -> None:
        validate_providers(DEFAULT_PROVIDERS)
        assert len(DEFAULT_PROVIDERS) == 3

    def test_empty_registry(self) -> None:
        with pytest.raises(ProviderRegistryError):
            PriceSearchService(providers=[])

    def test_duplicate_names(self) -> None:
        with pytest.raises(ProviderRegistryError):
            PriceSearchService(providers=[StubProvider("A"), StubProvider("A")])

    def test_not_a_provider(self) -> None:
        with pytest.raises(ProviderRegistryError):
            PriceSearchService(providers=[object()])  # type: ignore[list-item]

    def test_missing_color(self) -> None:
        provider = StubProvider("A")
        provider.color = ""
        with pytest.raises(ProviderRegistryError):
            validate_providers([provider])
