"""Computer Village price provider."""

from __future__ import annotations

from .opencart import OpenCartPriceProvider


class ComputerVillagePriceProvider(OpenCartPriceProvider):
    """Scrape Computer Village search results."""

    site_name = "Computer Village"
    color = "#10b981"
    base_url = "https://www.computervillage.com.bd"
    search_url = (
        "https://www.computervillage.com.bd/index.php"
        "?route=product/search&search={query}"
    )
