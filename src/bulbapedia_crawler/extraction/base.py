# ABOUTME: Protocol for the document source and the shared crawler error hierarchy
# ABOUTME: Fetch failures and structural extraction failures are kept distinguishable

from typing import Protocol

from bs4 import BeautifulSoup


class DocumentSource(Protocol):
    """Protocol for retrieving wiki pages as queryable HTML trees."""

    async def fetch_document(self, path: str) -> BeautifulSoup:
        """Fetch the page at the given path, relative to the wiki base URL.

        Args:
            path: Relative page path (e.g. "Ndex")

        Returns:
            The parsed HTML document

        Raises:
            FetchError: If the page could not be retrieved or parsed
        """
        ...


class CrawlerError(Exception):
    """Base class for all crawler errors."""

    pass


class FetchError(CrawlerError):
    """Raised when a page cannot be retrieved from the wiki."""

    def __init__(self, message: str, path: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.path = path
        self.status_code = status_code


class FetchTimeoutError(FetchError):
    """Raised when a page request times out."""

    pass


class FetchConnectionError(FetchError):
    """Raised when the connection to the wiki fails."""

    pass


class FetchStatusError(FetchError):
    """Raised when the wiki answers with an HTTP error status."""

    pass


class ExtractionError(CrawlerError):
    """Raised when a page deviates from the expected layout."""

    pass
