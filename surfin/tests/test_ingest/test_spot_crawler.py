"""Tests for the MSW site map crawler with mocked httpx."""

from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
import respx

from surfin.config.schema import MswConfig
from surfin.ingest.spot_crawler import SpotCrawler, SpotCrawlError, parse_spot_ids
from surfin.ingest.spots import Spots, SpotsError

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"
SITE_MAP_URL = "https://test-msw.example.com/site-map.php"


@pytest.fixture
def site_map_html() -> str:
    return (FIXTURE_DIR / "site_map.html").read_text()


@pytest.fixture
def crawler() -> SpotCrawler:
    return SpotCrawler(site_map_url=SITE_MAP_URL, max_retries=1, retry_base_delay=0.01)


class TestParseSpotIds:
    def test_finds_ormond_beach(self, site_map_html: str):
        spots = parse_spot_ids(site_map_html)
        assert spots.get_id("ormond-beach") == 4203

    def test_only_tables_after_region_headers(self, site_map_html: str):
        spots = parse_spot_ids(site_map_html)
        assert sorted(spots.spots) == [
            "new-smyrna-beach-inlet", "ormond-beach", "sebastian-inlet", "sunset",
        ]
        assert spots.get_id("pipeline") is None

    def test_names_normalized(self, site_map_html: str):
        assert parse_spot_ids(site_map_html).get_id("Sebastian Inlet") == 359

    def test_link_without_id(self):
        html = '<h1 class="header">X</h1><table><tr><td><a href="/about/">About</a></td></tr></table>'
        with pytest.raises(SpotsError, match="spot id"):
            parse_spot_ids(html)

    def test_no_spots(self):
        assert len(parse_spot_ids("<html><body></body></html>")) == 0


class TestCrawl:
    @respx.mock
    def test_crawl(self, crawler: SpotCrawler, site_map_html: str):
        route = respx.get(SITE_MAP_URL).mock(
            return_value=httpx.Response(200, text=site_map_html)
        )

        spots = crawler.crawl()
        assert route.called
        assert spots.get_id("ormond-beach") == 4203
        assert "surfin" in route.calls[0].request.headers["user-agent"]

    @respx.mock
    def test_crawled_spots_round_trip_through_file(
        self, crawler: SpotCrawler, site_map_html: str, tmp_path: Path
    ):
        respx.get(SITE_MAP_URL).mock(return_value=httpx.Response(200, text=site_map_html))

        path = tmp_path / "data" / "spots.json"
        crawler.crawl().write(path)
        assert Spots.from_path(path).get_id("ormond-beach") == 4203

    @respx.mock
    def test_retry_on_503(self, crawler: SpotCrawler, site_map_html: str):
        route = respx.get(SITE_MAP_URL).mock(
            side_effect=[
                httpx.Response(503),
                httpx.Response(200, text=site_map_html),
            ]
        )

        with patch("surfin.ingest.spot_crawler.time.sleep"):
            spots = crawler.crawl()
        assert len(spots) == 4
        assert route.call_count == 2

    @respx.mock
    def test_http_error(self, crawler: SpotCrawler):
        respx.get(SITE_MAP_URL).mock(return_value=httpx.Response(404))

        with pytest.raises(SpotCrawlError) as exc:
            crawler.crawl()
        assert exc.value.status_code == 404

    @respx.mock
    def test_transport_error(self, crawler: SpotCrawler):
        respx.get(SITE_MAP_URL).mock(side_effect=httpx.ConnectError("boom"))

        with patch("surfin.ingest.spot_crawler.time.sleep"), pytest.raises(SpotCrawlError, match="Request failed"):
            crawler.crawl()

    def test_from_config(self):
        crawler = SpotCrawler.from_config(MswConfig(site_map_url=SITE_MAP_URL, max_retries=5))
        assert crawler.site_map_url == SITE_MAP_URL
        assert crawler.max_retries == 5
