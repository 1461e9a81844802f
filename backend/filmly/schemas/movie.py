"""Catalog schemas"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from filmly.models import Genre, Movie


class GenreResponse(BaseModel):
    id: int
    name: str
    slug: str

    @classmethod
    def from_genre(cls, genre: Genre) -> "GenreResponse":
        return cls(id=genre.id, name=genre.name, slug=genre.slug)


class MovieResponse(BaseModel):
    """Movie as returned to clients, with the live favorite flag"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    release_year: int = Field(..., alias="releaseYear")
    genre_ids: List[int] = Field(..., alias="genreIds")
    rating: float
    poster_url: str = Field(..., alias="posterUrl")
    is_favorite: bool = Field(..., alias="isFavorite")
    description: str
    duration_min: int = Field(..., alias="durationMin")

    @classmethod
    def from_movie(cls, movie: Movie, is_favorite: bool) -> "MovieResponse":
        return cls(
            id=movie.id,
            title=movie.title,
            release_year=movie.release_year,
            genre_ids=list(movie.genre_ids),
            rating=movie.rating,
            poster_url=movie.poster_url,
            is_favorite=is_favorite,
            description=movie.description,
            duration_min=movie.duration_min,
        )


class MovieListResponse(BaseModel):
    items: List[MovieResponse]
    total: int


class FavoritesResponse(BaseModel):
    items: List[MovieResponse]
