"""Movie model"""
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    """A catalog movie.

    ``seed_favorite`` only seeds the favorites set at startup; the live flag
    is always computed from the store.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    release_year: int
    genre_ids: Tuple[int, ...] = Field(..., min_length=1)
    rating: float
    poster_url: str
    description: str
    duration_min: int
    seed_favorite: bool = False
