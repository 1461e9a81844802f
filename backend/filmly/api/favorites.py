"""Favorites endpoints"""
from fastapi import APIRouter, Depends, Request

from filmly.api.deps import AuthContext, get_store, require_auth
from filmly.api.filters import MovieFilters, movie_filters
from filmly.errors import ConflictError, NotFoundError, ValidationError
from filmly.middleware.monitoring import record_favorite_change
from filmly.schemas import ErrorResponse, FavoriteRequest, FavoritesResponse, MovieResponse
from filmly.store import FilmStore, UnknownMovieError
from filmly.utils.logger import logger
from filmly.utils.validation import parse_movie_id

router = APIRouter(
    prefix="/favorites",
    tags=["favorites"],
    responses={401: {"model": ErrorResponse}},
)

_FAVORITE_BODY_DOC = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": FavoriteRequest.model_json_schema(by_alias=True)}},
    }
}


def _favorites_response(store: FilmStore) -> FavoritesResponse:
    return FavoritesResponse(
        items=[MovieResponse.from_movie(movie, is_favorite=True) for movie in store.favorite_movies()]
    )


async def favorite_body(
    request: Request,
    auth: AuthContext = Depends(require_auth),
) -> FavoriteRequest:
    """Read the `{movieId}` body once the caller is authenticated."""
    if not await request.body():
        return FavoriteRequest()
    try:
        data = await request.json()
    except ValueError:
        raise ValidationError("Request body is not valid JSON")
    if not isinstance(data, dict):
        return FavoriteRequest()
    return FavoriteRequest.model_validate(data)


def _require_movie_id(body: FavoriteRequest) -> str:
    movie_id = parse_movie_id(body.movie_id)
    if movie_id is None:
        raise ValidationError("movieId is required")
    return movie_id


@router.get("", response_model=FavoritesResponse, responses={400: {"model": ErrorResponse}})
def list_favorites(
    auth: AuthContext = Depends(require_auth),
    filters: MovieFilters = Depends(movie_filters),
    store: FilmStore = Depends(get_store),
) -> FavoritesResponse:
    """List favorite movies, with the same filters as `GET /movies`."""
    items = [
        MovieResponse.from_movie(movie, is_favorite=True)
        for movie in filters.apply(store.favorite_movies())
    ]
    return FavoritesResponse(items=items)


@router.patch(
    "",
    response_model=FavoritesResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    openapi_extra=_FAVORITE_BODY_DOC,
)
def add_favorite(
    auth: AuthContext = Depends(require_auth),
    body: FavoriteRequest = Depends(favorite_body),
    store: FilmStore = Depends(get_store),
) -> FavoritesResponse:
    """Add a movie to favorites. Adding a movie twice is a 409."""
    movie_id = _require_movie_id(body)

    try:
        added = store.add_favorite(movie_id)
    except UnknownMovieError:
        raise NotFoundError("Movie not found", details={"movieId": movie_id})

    if not added:
        raise ConflictError("Movie is already in favorites", details={"movieId": movie_id})

    record_favorite_change("add")
    logger.info("Favorite added", extra={"email": auth.email, "movie_id": movie_id, "action": "add_favorite"})
    return _favorites_response(store)


@router.delete(
    "",
    response_model=FavoritesResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    openapi_extra=_FAVORITE_BODY_DOC,
)
def remove_favorite(
    auth: AuthContext = Depends(require_auth),
    body: FavoriteRequest = Depends(favorite_body),
    store: FilmStore = Depends(get_store),
) -> FavoritesResponse:
    """Remove a movie from favorites."""
    movie_id = _require_movie_id(body)

    if not store.remove_favorite(movie_id):
        raise NotFoundError("Movie not found in favorites", details={"movieId": movie_id})

    record_favorite_change("remove")
    logger.info("Favorite removed", extra={"email": auth.email, "movie_id": movie_id, "action": "remove_favorite"})
    return _favorites_response(store)
