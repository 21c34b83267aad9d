"""Listing layout shared by OpenCart based stores."""

from __future__ import annotations

from .base import SelectorPriceProvider, SiteSelectors

OPENCART_SELECTORS = SiteSelectors(
    item=".product-layout, .product-thumb",
    title=(".caption h4 a", ".name a", "h4 a"),
    price=(".price-new", ".price"),
    link=("h4 a", ".caption a", "a"),
    image=((".image img", "src"), ("img[data-src]", "data-src"), ("img", "src")),
    price_cutoff="Ex Tax",
)


class OpenCartPriceProvider(SelectorPriceProvider):
    """Base for stores running the stock OpenCart search page."""

    selectors = OPENCART_SELECTORS
