"""Build the spot name -> MSW id mapping by crawling the MSW site map."""

import logging
import time

import httpx
from bs4 import BeautifulSoup

from surfin.config.defaults import MSW_SITE_MAP_URL
from surfin.config.schema import MswConfig
from surfin.ingest.msw_client import DEFAULT_USER_AGENT
from surfin.ingest.spots import Spots, SpotsError, normalize_spot_name

logger = logging.getLogger(__name__)

# Each region heading on the site map is followed by a table of spot links
SPOT_ANCHOR_SELECTOR = "h1.header + table a"


class SpotCrawlError(Exception):
    """Raised when the site map can't be fetched."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SpotCrawler:
    def __init__(
        self,
        site_map_url: str = MSW_SITE_MAP_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 2.0,
    ):
        self.site_map_url = site_map_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    @classmethod
    def from_config(cls, config: MswConfig) -> "SpotCrawler":
        return cls(
            site_map_url=config.site_map_url,
            timeout=config.timeout,
            max_retries=config.max_retries,
            retry_base_delay=config.retry_base_delay,
        )

    def fetch_site_map(self) -> str:
        """GET the site map HTML, retrying 503/429 and transport errors."""
        headers = {"User-Agent": self.user_agent, "Accept": "text/html"}

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(self.site_map_url, headers=headers, timeout=self.timeout)
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning("Site map request error, retrying in %.1fs: %s", delay, e)
                    time.sleep(delay)
                    continue
                logger.error("Site map request failed: %s", e)
                raise SpotCrawlError(f"Request failed: {e}") from e

            if resp.status_code in (503, 429) and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "Site map returned %d, retrying in %.1fs (attempt %d/%d)",
                    resp.status_code, delay, attempt + 1, self.max_retries,
                )
                time.sleep(delay)
                continue
            if resp.status_code >= 400:
                logger.error("Site map returned %d", resp.status_code)
                raise SpotCrawlError(f"HTTP {resp.status_code}", resp.status_code)
            return resp.text

        raise SpotCrawlError("Retries exhausted for site map")

    def crawl(self) -> Spots:
        spots = parse_spot_ids(self.fetch_site_map())
        logger.info("Crawled %d spots from %s", len(spots), self.site_map_url)
        return spots


def parse_spot_ids(html: str) -> Spots:
    """Collect spot links such as ``/Ormond-Beach-Surf-Report/4203/``.

    The id is the last path segment and the name is the link text,
    normalized the same way lookups are.
    """
    soup = BeautifulSoup(html, "html.parser")
    spots = {}
    for anchor in soup.select(SPOT_ANCHOR_SELECTOR):
        href = anchor.get("href") or ""
        segment = href.rstrip("/").rsplit("/", 1)[-1]
        try:
            spot_id = int(segment)
        except ValueError as e:
            raise SpotsError(f"Couldn't parse a spot id from link {href!r}") from e
        spots[normalize_spot_name(anchor.get_text())] = spot_id
    return Spots(spots)
