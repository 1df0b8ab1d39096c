"""Game Schemas — Pydantic models for the narrowed store responses.

Invariants:
    - Output JSON keys are camelCase (isFree, headerImage) for the client app
    - Models are built once per request and never mutated afterwards

Design Decisions:
    - alias_generator=to_camel over per-field aliases: Python attributes stay
      snake_case, FastAPI serializes by alias on the way out
    - GameIdInfo is opaque: tab items are forwarded as the store sent them
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Opaque store item from a genre tab (usually {"id": ...}).
GameIdInfo = Any


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True,
    )


class GenreInfo(_CamelModel):
    """One entry of the genre list."""
    name: str | None = None


class GameDetails(_CamelModel):
    """Projection of a store app-details record."""
    name: str | None = None
    is_free: bool = False
    about: str | None = None
    header_image: str | None = None
    website: str | None = None
    developers: list[str] | None = None
    publishers: list[str] | None = None
