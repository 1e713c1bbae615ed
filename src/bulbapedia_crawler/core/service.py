# ABOUTME: High-level service API over the catalog store and the detail extractor
# ABOUTME: Memoizes the reference list and optionally persists detail records

from __future__ import annotations

from bulbapedia_crawler.config import Config, get_config
from bulbapedia_crawler.core.lazy import AsyncLazy
from bulbapedia_crawler.core.models import PokemonDetails, PokemonReference
from bulbapedia_crawler.extraction.base import DocumentSource
from bulbapedia_crawler.extraction.wiki.details import DetailExtractor
from bulbapedia_crawler.extraction.wiki.listing import ListingExtractor
from bulbapedia_crawler.extraction.wiki.source import BulbapediaDocumentSource
from bulbapedia_crawler.persistence import DatabaseManager
from bulbapedia_crawler.utils.logging import get_logger


class PokemonService:
    """Provides access to Pokemon data through Bulbapedia.

    The reference list is loaded once and shared by all callers until cleared.
    Detail records are fetched on every call unless a details cache is in use.
    """

    def __init__(
        self,
        source: DocumentSource | None = None,
        database: DatabaseManager | None = None,
        config: Config | None = None,
    ):
        self.config = config or get_config()
        self.source = source or BulbapediaDocumentSource(config=self.config)
        self.listing = ListingExtractor(self.source)
        self.details = DetailExtractor(self.source)
        self.references = AsyncLazy(self.listing.list_references, name="references")

        if database is None and self.config.details_cache_enabled:
            database = DatabaseManager(self.config.database_url)
        self.database = database
        self._tables_ready = False

        self.logger = get_logger(__name__)

    async def list_references(self, timeout: float | None = None) -> list[PokemonReference]:
        """Gets all Pokemon references, ordered by number."""
        return await self.references.get(timeout)

    async def get_ids(self) -> list[int]:
        """Gets all Pokemon numbers."""
        return [reference.number for reference in await self.list_references()]

    async def get_reference(self, number: int) -> PokemonReference | None:
        """Gets the reference with the given number, or None if there is none."""
        for reference in await self.list_references():
            if reference.number == number:
                return reference
        return None

    async def get_details(self, reference: PokemonReference) -> PokemonDetails:
        """Gets the detail record of a reference.

        Raises:
            FetchError: If the species page could not be retrieved
            ExtractionError: If the species page does not have the expected layout
        """
        if self.database is None:
            return await self.details.get_details(reference)

        await self._ensure_tables()
        cached = await self.database.get_details(reference.number)
        if cached is not None:
            self.logger.info("Using cached details", number=reference.number, name=reference.name)
            return cached

        details = await self.details.get_details(reference)
        await self.database.save_details(details)
        return details

    async def clear_cache(self, include_details: bool = False) -> bool:
        """Clears cached data from this service.

        Args:
            include_details: Also drop persisted detail records

        Returns:
            True if a loaded reference list was discarded
        """
        cleared = await self.references.clear()

        if include_details and self.database is not None:
            await self._ensure_tables()
            removed = await self.database.clear_details()
            self.logger.info("Cleared details cache", removed=removed)

        return cleared

    async def _ensure_tables(self) -> None:
        if not self._tables_ready and self.database is not None:
            await self.database.create_tables()
            self._tables_ready = True

    async def close(self) -> None:
        """Release the HTTP client and database connections."""
        close = getattr(self.source, "close", None)
        if close is not None:
            await close()
        if self.database is not None:
            await self.database.close()
