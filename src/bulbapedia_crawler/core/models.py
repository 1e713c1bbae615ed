# ABOUTME: Domain models for catalog references and per-entry detail records
# ABOUTME: References compare by catalog number only; details embed a reference

from pydantic import BaseModel, ConfigDict, Field, PositiveInt
from pydantic.alias_generators import to_camel

MISSING_VALUE = -1
"""Sentinel for numeric fields that are absent or unparseable on the wiki page."""

DEFAULT_HATCH_TIME = 0


class PokemonReference(BaseModel):
    """A simple reference to a Pokemon, without additional data."""

    model_config = ConfigDict(frozen=True)

    number: PositiveInt = Field(description="Number of the Pokemon in the national Pokedex")
    name: str = Field(description="Canonical (English) name of the Pokemon")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PokemonReference):
            return NotImplemented
        return self.number == other.number

    def __hash__(self) -> int:
        return hash(self.number)

    def __lt__(self, other: "PokemonReference") -> bool:
        if not isinstance(other, PokemonReference):
            return NotImplemented
        return self.number < other.number

    def __str__(self) -> str:
        return f"#{self.number} - {self.name}"


class PokemonDetails(BaseModel):
    """Detailed information about a Pokemon, as scraped from its wiki page.

    Numeric fields hold MISSING_VALUE when the page does not state them.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    reference: PokemonReference
    description: str = Field(default="", description="Leading introduction paragraphs, newline-joined")
    types: tuple[str, ...] = Field(default=(), description="Types in page order, usually one or two")
    catch_rate: int = Field(default=MISSING_VALUE)
    base_experience_yield: int = Field(default=MISSING_VALUE)
    hatch_time_min: int = Field(default=DEFAULT_HATCH_TIME, description="Minimum steps needed to hatch")
    hatch_time_max: int = Field(default=DEFAULT_HATCH_TIME, description="Maximum steps needed to hatch")
    base_friendship: int = Field(default=MISSING_VALUE)

    @property
    def number(self) -> int:
        return self.reference.number

    @property
    def name(self) -> str:
        return self.reference.name
