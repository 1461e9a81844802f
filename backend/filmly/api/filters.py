"""Shared query filters for movie listings"""
from typing import Iterable, List, NamedTuple, Optional

from fastapi import Query

from filmly.errors import ValidationError
from filmly.models import Movie
from filmly.utils.validation import INVALID, MISSING, parse_ids, parse_sort, parse_year, sort_movies


class MovieFilters(NamedTuple):
    genre_ids: Optional[List[int]] = None
    year_from: Optional[int] = None
    year_to: Optional[int] = None
    sort: Optional[str] = None

    def matches(self, movie: Movie) -> bool:
        if self.genre_ids is not None and not any(genre in self.genre_ids for genre in movie.genre_ids):
            return False
        if self.year_from is not None and movie.release_year < self.year_from:
            return False
        if self.year_to is not None and movie.release_year > self.year_to:
            return False
        return True

    def apply(self, movies: Iterable[Movie]) -> List[Movie]:
        """Filter, then sort"""
        return sort_movies([movie for movie in movies if self.matches(movie)], self.sort)


def movie_filters(
    genre_ids: Optional[List[str]] = Query(None, alias="id", description="Genre id; repeat for several"),
    year_from: Optional[str] = Query(None, alias="from", description="Earliest release year, inclusive"),
    year_to: Optional[str] = Query(None, alias="to", description="Latest release year, inclusive"),
    sort: Optional[str] = Query(None, description="rating, name or genre"),
) -> MovieFilters:
    """Parse listing query parameters, rejecting any that are present but unusable."""
    parsed_ids = parse_ids(genre_ids)
    if parsed_ids is INVALID:
        raise ValidationError("Invalid genre ids", details={"id": genre_ids})

    parsed_from = parse_year(year_from)
    if parsed_from is INVALID:
        raise ValidationError('Invalid "from" year', details={"from": year_from})

    parsed_to = parse_year(year_to)
    if parsed_to is INVALID:
        raise ValidationError('Invalid "to" year', details={"to": year_to})

    sort_key = parse_sort(sort)
    if sort_key is INVALID:
        raise ValidationError("Invalid sort key", details={"sort": sort, "allowed": ["rating", "name", "genre"]})

    return MovieFilters(
        genre_ids=None if parsed_ids is MISSING else parsed_ids,
        year_from=None if parsed_from is MISSING else parsed_from,
        year_to=None if parsed_to is MISSING else parsed_to,
        sort=None if sort_key is MISSING else sort_key,
    )
