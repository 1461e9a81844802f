"""Movie catalog endpoints"""
from fastapi import APIRouter, Depends

from filmly.api.deps import get_store, require_auth
from filmly.api.filters import MovieFilters, movie_filters
from filmly.schemas import ErrorResponse, MovieListResponse, MovieResponse
from filmly.store import FilmStore

router = APIRouter(
    tags=["movies"],
    dependencies=[Depends(require_auth)],
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)


@router.get("/movies", response_model=MovieListResponse)
def list_movies(
    filters: MovieFilters = Depends(movie_filters),
    store: FilmStore = Depends(get_store),
) -> MovieListResponse:
    """List catalog movies.

    - **id**: keep movies having at least one of these genres
    - **from** / **to**: inclusive release-year bounds
    - **sort**: `rating` (highest first), `name` (A-Z) or `genre` (first genre id)
    """
    favorites = store.favorite_ids()
    items = [
        MovieResponse.from_movie(movie, is_favorite=movie.id in favorites)
        for movie in filters.apply(store.list_movies())
    ]
    return MovieListResponse(items=items, total=len(items))
