# ABOUTME: Database manager for the optional details cache
# ABOUTME: Async SQLAlchemy engine with upsert, lookup and bulk clear helpers

from __future__ import annotations

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from bulbapedia_crawler.core.models import PokemonDetails
from bulbapedia_crawler.persistence.models import DetailsSnapshot, utcnow
from bulbapedia_crawler.utils.logging import get_logger


class DatabaseManager:
    """Manages async database operations for cached detail records."""

    def __init__(self, database_url: str = "sqlite+aiosqlite:///./bulbapedia_cache.db"):
        """Initialize the database manager.

        Args:
            database_url: SQLAlchemy async database URL (e.g. sqlite+aiosqlite:///./db.db)
        """
        self.database_url = database_url
        self.logger = get_logger(__name__)
        self.engine = create_async_engine(database_url, echo=False)
        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Allow access to attributes after commit
        )

    async def create_tables(self) -> None:
        """Create all database tables if they don't exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def get_details(self, number: int) -> PokemonDetails | None:
        """Get the cached detail record of a catalog number, if any."""
        async with self.async_session() as session:
            snapshot = await session.get(DetailsSnapshot, number)
            return snapshot.details_json if snapshot else None

    async def save_details(self, details: PokemonDetails) -> DetailsSnapshot:
        """Insert or replace the cached detail record of an entry."""
        async with self.async_session() as session:
            snapshot = await session.get(DetailsSnapshot, details.number)
            if snapshot:
                snapshot.name = details.name
                snapshot.details_json = details
                snapshot.fetched_at = utcnow()
            else:
                snapshot = DetailsSnapshot(number=details.number, name=details.name, details_json=details)
            session.add(snapshot)
            await session.commit()
            await session.refresh(snapshot)

        self.logger.debug("Saved details snapshot", number=details.number, name=details.name)
        return snapshot

    async def clear_details(self) -> int:
        """Delete every cached detail record.

        Returns:
            Number of removed records
        """
        async with self.async_session() as session:
            result = await session.exec(delete(DetailsSnapshot))
            await session.commit()
            return result.rowcount or 0

    async def close(self) -> None:
        """Close the database connection."""
        await self.engine.dispose()
