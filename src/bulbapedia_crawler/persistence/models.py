# ABOUTME: Persistence models for the optional details cache
# ABOUTME: One row per catalog number holding the extracted detail record as JSON

from __future__ import annotations

from datetime import UTC, datetime

from sqlmodel import Column, Field, SQLModel

from bulbapedia_crawler.core.models import PokemonDetails
from bulbapedia_crawler.persistence.json_types import PydanticJson


def utcnow() -> datetime:
    """Returns the current UTC timestamp."""

    return datetime.now(UTC)


class DetailsSnapshot(SQLModel, table=True):
    """Cached detail record of one catalog entry."""

    __tablename__ = "details_snapshot"  # type: ignore[assignment]

    number: int = Field(primary_key=True, description="Catalog number")
    name: str = Field(description="Canonical name at the time of extraction")
    details_json: PokemonDetails = Field(
        sa_column=Column(PydanticJson(PokemonDetails), nullable=False),
        description="Extracted detail record",
    )
    fetched_at: datetime = Field(default_factory=utcnow, description="Timestamp when the page was extracted")
