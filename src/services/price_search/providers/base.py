"""Base classes for price search providers."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup, Tag

from configs import settings

from ..models import PriceSearchError, ProductRecord
from ..utils import (
    DEFAULT_HEADERS,
    absolute_url,
    extract_price,
    format_bdt,
    is_relevant,
    normalize_whitespace,
    truncate_title,
)

logger = logging.getLogger("price_search.provider")

READ_CHUNK_SIZE = 1024


@dataclass(frozen=True)
class FetchedPage:
    """Status and decoded body of one upstream answer."""

    status_code: int
    text: str


def _charset(response: requests.Response) -> str:
    # Without an explicit charset requests assumes ISO-8859-1 for text/html.
    content_type = response.headers.get("Content-Type", "").lower()
    if "charset=" in content_type and response.encoding:
        return response.encoding
    return "utf-8"


class BasePriceProvider(ABC):
    """Common behaviour for scraping providers.

    Subclasses describe one store: its display identity, the search URL
    template (with a ``{query}`` placeholder) and how to read its listing.
    """

    site_name: str
    color: str
    base_url: str
    search_url: str

    def __init__(
        self,
        timeout: Optional[float] = None,
        max_redirects: Optional[int] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        self.timeout = timeout if timeout is not None else settings.SCRAPER_TIMEOUT
        self.max_redirects = (
            max_redirects
            if max_redirects is not None
            else settings.SCRAPER_MAX_REDIRECTS
        )
        self._session_factory = session_factory

    def build_search_url(self, query: str) -> str:
        """Percent-encode the query into the store search URL."""
        return self.search_url.format(query=quote(query, safe=""))

    def fetch(self, url: str) -> FetchedPage:
        """Issue the GET without raising on HTTP status.

        ``timeout`` bounds the whole call, body included; a slower upstream
        raises ``PriceSearchError``.
        """
        deadline = time.monotonic() + self.timeout
        session = self._session_factory()
        session.headers.update(DEFAULT_HEADERS)
        session.max_redirects = self.max_redirects
        with session:
            response = session.get(
                url, timeout=self.timeout, allow_redirects=True, stream=True
            )
            with response:
                chunks: List[bytes] = []
                for chunk in response.iter_content(chunk_size=READ_CHUNK_SIZE):
                    if time.monotonic() > deadline:
                        raise PriceSearchError(
                            self.site_name,
                            f"{self.site_name} did not answer within {self.timeout}s",
                        )
                    chunks.append(chunk)
                return FetchedPage(
                    status_code=response.status_code,
                    text=b"".join(chunks).decode(
                        _charset(response), errors="replace"
                    ),
                )

    def search(self, query: str) -> List[ProductRecord]:
        """Public search entry point with error handling."""
        try:
            offers = list(self._search_impl(query))
        except PriceSearchError as exc:
            logger.warning("Provider %s failed: %s", exc.site, exc.message)
            return []
        except requests.RequestException as exc:
            logger.warning("%s fetch error: %s", self.site_name, exc)
            return []
        except Exception:
            logger.exception("Unexpected error while scraping %s", self.site_name)
            return []

        logger.info("%s: Found %d products", self.site_name, len(offers))
        return offers

    def _search_impl(self, query: str) -> Iterable[ProductRecord]:
        url = self.build_search_url(query)
        logger.info("Fetching data from %s...", self.site_name)
        response = self.fetch(url)
        if response.status_code != 200:
            raise PriceSearchError(
                self.site_name, f"HTTP {response.status_code} from {self.site_name}"
            )
        return self.parse(response.text, query)

    @abstractmethod
    def parse(self, html: str, query: str) -> List[ProductRecord]:
        """Return offers found in a search results document."""
        raise NotImplementedError

    def make_record(
        self,
        title: str,
        price_num: int,
        link: str,
        image: Optional[str],
    ) -> ProductRecord:
        """Tag a scraped offer with this store's identity."""
        return ProductRecord(
            title=truncate_title(title),
            price=format_bdt(price_num),
            price_num=price_num,
            link=link,
            image=image,
            store=self.site_name,
            store_color=self.color,
        )


@dataclass(frozen=True)
class SiteSelectors:
    """CSS selectors describing one store's search listing.

    Every tuple is tried in order and the first non-empty match wins.
    ``image`` pairs a selector with the attribute holding the source.
    """

    item: str
    title: Tuple[str, ...]
    price: Tuple[str, ...]
    link: Tuple[str, ...]
    image: Tuple[Tuple[str, str], ...] = (("img", "src"),)
    price_cutoff: Optional[str] = None


class SelectorPriceProvider(BasePriceProvider):
    """Provider whose listing is read entirely through ``SiteSelectors``."""

    selectors: SiteSelectors

    def parse(self, html: str, query: str) -> List[ProductRecord]:
        soup = BeautifulSoup(html, "html.parser")
        results: List[ProductRecord] = []
        for item in self._items(soup):
            title = _first_text(item, self.selectors.title)
            if not title or not is_relevant(title, query):
                continue

            price_num = extract_price(self._price_text(item))
            if price_num == 0:
                continue

            link = absolute_url(
                self.base_url, _first_attr(item, self.selectors.link, "href")
            )
            if not link:
                continue

            image = None
            for selector, attribute in self.selectors.image:
                image = _first_attr(item, (selector,), attribute)
                if image:
                    break

            results.append(
                self.make_record(
                    title=title,
                    price_num=price_num,
                    link=link,
                    image=absolute_url(self.base_url, image),
                )
            )
        return results

    def _items(self, soup: BeautifulSoup) -> List[Tag]:
        """Listing nodes, skipping ones nested inside an earlier match."""
        matched: List[Tag] = []
        seen: set[int] = set()
        for node in soup.select(self.selectors.item):
            if any(id(parent) in seen for parent in node.parents):
                continue
            seen.add(id(node))
            matched.append(node)
        return matched

    def _price_text(self, item: Tag) -> str:
        text = _first_text(item, self.selectors.price)
        if self.selectors.price_cutoff:
            text = text.split(self.selectors.price_cutoff)[0]
        return text.strip()


def _first_text(item: Tag, selectors: Sequence[str]) -> str:
    for selector in selectors:
        node = item.select_one(selector)
        if node is None:
            continue
        text = normalize_whitespace(node.get_text(" "))
        if text:
            return text
    return ""


def _first_attr(item: Tag, selectors: Sequence[str], attribute: str) -> Optional[str]:
    for selector in selectors:
        node = item.select_one(selector)
        if node is None:
            continue
        value = node.get(attribute)
        if isinstance(value, list):
            value = " ".join(value)
        if value and value.strip():
            return value.strip()
    return None
