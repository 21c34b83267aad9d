"""StarTech price provider."""

from __future__ import annotations

from .base import SelectorPriceProvider, SiteSelectors


class StarTechPriceProvider(SelectorPriceProvider):
    """Scrape StarTech search results."""

    site_name = "StarTech"
    color = "#ef4444"
    base_url = "https://www.startech.com.bd"
    search_url = "https://www.startech.com.bd/product/search?search={query}"
    selectors = SiteSelectors(
        item=".p-item",
        title=("h4.p-item-name a",),
        # Discounted items show the sale price first and the old one struck through.
        price=(
            ".p-item-price .price-new",
            ".p-item-price span",
            ".p-item-price",
        ),
        link=("h4.p-item-name a",),
        image=(
            (".p-item-img img", "src"),
            ("img[data-src]", "data-src"),
            ("img", "src"),
        ),
    )
