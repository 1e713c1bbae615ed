# ABOUTME: Tests for the details cache DatabaseManager
# ABOUTME: Validates upsert, lookup and clearing of detail snapshots

from __future__ import annotations

import pytest
import pytest_asyncio
from sqlalchemy.pool import StaticPool

from bulbapedia_crawler.core.models import PokemonDetails, PokemonReference
from bulbapedia_crawler.persistence.manager import DatabaseManager


@pytest_asyncio.fixture
async def temp_db() -> DatabaseManager:
    """Provide an in-memory database manager for async tests."""
    from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
    from sqlmodel.ext.asyncio.session import AsyncSession

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    db = DatabaseManager("sqlite+aiosqlite:///:memory:")
    db.engine = engine
    db.async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await db.create_tables()
    yield db
    await db.close()


def _details(number: int = 1, name: str = "Bulbasaur", catch_rate: int = 45) -> PokemonDetails:
    return PokemonDetails(
        reference=PokemonReference(number=number, name=name),
        description=f"{name} is a Pokémon.",
        types=["Grass", "Poison"],
        catch_rate=catch_rate,
        base_experience_yield=64,
        hatch_time_min=5140,
        hatch_time_max=5396,
        base_friendship=50,
    )


@pytest.mark.asyncio
async def test_get_missing_details(temp_db: DatabaseManager):
    assert await temp_db.get_details(1) is None


@pytest.mark.asyncio
async def test_save_and_load_details(temp_db: DatabaseManager):
    details = _details()
    snapshot = await temp_db.save_details(details)

    assert snapshot.number == 1
    assert snapshot.name == "Bulbasaur"
    assert snapshot.fetched_at is not None

    loaded = await temp_db.get_details(1)
    assert loaded == details
    assert loaded.reference.name == "Bulbasaur"
    assert loaded.types == ("Grass", "Poison")


@pytest.mark.asyncio
async def test_save_replaces_existing_snapshot(temp_db: DatabaseManager):
    await temp_db.save_details(_details(catch_rate=45))
    await temp_db.save_details(_details(catch_rate=190))

    loaded = await temp_db.get_details(1)
    assert loaded is not None
    assert loaded.catch_rate == 190


@pytest.mark.asyncio
async def test_clear_details(temp_db: DatabaseManager):
    await temp_db.save_details(_details(1, "Bulbasaur"))
    await temp_db.save_details(_details(25, "Pikachu"))

    assert await temp_db.clear_details() == 2
    assert await temp_db.get_details(1) is None
    assert await temp_db.clear_details() == 0
