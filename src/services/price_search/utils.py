"""Utilities shared by price search providers."""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urljoin


DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
    ),
    "Accept-Language": "en-US,en;q=0.9",
    "Connection": "keep-alive",
}

MIN_VALID_PRICE = 100
MAX_VALID_PRICE = 10_000_000
MAX_TITLE_LENGTH = 80
ELLIPSIS = "..."
CURRENCY_SYMBOL = "৳"


def extract_price(price_text: str | None) -> int:
    """Turn a scraped price label into whole taka, or 0 when unusable.

    Everything except digits and separators is dropped, a one or two digit
    decimal fraction is cut off, and the remaining separators are removed.
    Amounts outside ``[MIN_VALID_PRICE, MAX_VALID_PRICE]`` are placeholders or
    mis-parses and also yield 0.
    """
    if not price_text:
        return 0

    cleaned = re.sub(r"[^\d,\.]", "", price_text)
    # Drop a one or two digit fraction so "12,500.00" reads as 12500.
    cleaned = re.sub(r"\.\d{1,2}$", "", cleaned)
    digits = re.sub(r"[,\.]", "", cleaned)
    if not digits:
        return 0

    price = int(digits)
    if price < MIN_VALID_PRICE or price > MAX_VALID_PRICE:
        return 0
    return price


def is_relevant(title: str | None, query: str | None) -> bool:
    """Return True when any word of the query appears in the title."""
    if not title or not query:
        return False

    title_lower = title.lower()
    words = query.lower().split()
    return any(word in title_lower for word in words)


def normalize_whitespace(value: str) -> str:
    """Collapse repeated spaces and newlines."""
    return re.sub(r"\s+", " ", value).strip()


def truncate_title(title: str) -> str:
    """Limit titles to ``MAX_TITLE_LENGTH`` characters for display."""
    if len(title) <= MAX_TITLE_LENGTH:
        return title
    return title[: MAX_TITLE_LENGTH - len(ELLIPSIS)] + ELLIPSIS


def format_bdt(value: int) -> str:
    """Format an amount as a grouped taka string, e.g. ``৳ 12,500``."""
    return f"{CURRENCY_SYMBOL} {value:,}"


def absolute_url(base_url: str, value: Optional[str]) -> Optional[str]:
    """Resolve links and image sources scraped from ``base_url`` pages.

    Protocol-relative sources are upgraded to https, site-relative paths are
    joined onto the store origin.
    """
    if not value:
        return None

    value = value.strip()
    if not value:
        return None
    if value.startswith(("http://", "https://")):
        return value
    if value.startswith("//"):
        return f"https:{value}"
    return urljoin(base_url, value)
