# ABOUTME: httpx-backed document source that downloads and parses Bulbapedia pages
# ABOUTME: Applies the configured retry policy and turns transport failures into fetch errors

import httpx
from bs4 import BeautifulSoup

from bulbapedia_crawler.config import Config, get_config
from bulbapedia_crawler.extraction.base import FetchError
from bulbapedia_crawler.utils.logging import get_logger, log_api_call
from bulbapedia_crawler.utils.retry import fetch_with_retry


def parse_html(markup: str, parser: str = "lxml") -> BeautifulSoup:
    """Parse raw HTML into a queryable document tree."""
    return BeautifulSoup(markup, parser)


class BulbapediaDocumentSource:
    """Fetches wiki pages relative to the configured base URL.

    An httpx client may be injected; otherwise one is created from configuration
    and owned (and closed) by this source.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, config: Config | None = None):
        self.config = config or get_config()
        self._owns_client = client is None
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={"User-Agent": self.config.user_agent},
            timeout=self.config.request_timeout,
            follow_redirects=True,
        )
        self.logger = get_logger(__name__)

    def url_for(self, path: str) -> str:
        """Absolute URL of a page path."""
        return self.config.base_url.rstrip("/") + "/" + path.lstrip("/")

    @log_api_call("bulbapedia")
    async def fetch_document(self, path: str) -> BeautifulSoup:
        """Fetch and parse the page at the given relative path.

        Raises:
            FetchError: If the page could not be downloaded or parsed
        """
        url = self.url_for(path)

        async def _get() -> httpx.Response:
            response = await self.http_client.get(url)
            response.raise_for_status()
            return response

        response = await fetch_with_retry(
            _get,
            path=path,
            max_attempts=self.config.fetch_max_attempts,
            min_wait=self.config.fetch_min_wait,
            max_wait=self.config.fetch_max_wait,
        )

        self.logger.debug("Fetched wiki page", path=path, url=str(response.url), content_length=len(response.text))

        try:
            return parse_html(response.text, self.config.html_parser)
        except Exception as e:
            raise FetchError(f"Failed to parse page {path}: {e}", path=path) from e

    async def close(self) -> None:
        """Close the underlying HTTP client if this source created it."""
        if self._owns_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "BulbapediaDocumentSource":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
