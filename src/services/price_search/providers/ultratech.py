"""UltraTech price provider."""

from __future__ import annotations

from .opencart import OpenCartPriceProvider


class UltraTechPriceProvider(OpenCartPriceProvider):
    """Scrape UltraTech search results."""

    site_name = "UltraTech"
    color = "#3b82f6"
    base_url = "https://www.ultratech.com.bd"
    search_url = (
        "https://www.ultratech.com.bd/index.php?route=product/search&search={query}"
    )
