"""Pydantic schemas for request/response validation"""
from filmly.schemas.auth import LoginRequest, LogoutResponse, TokenResponse
from filmly.schemas.common import ErrorResponse, HealthResponse
from filmly.schemas.favorite import FavoriteRequest
from filmly.schemas.movie import FavoritesResponse, GenreResponse, MovieListResponse, MovieResponse

__all__ = [
    "LoginRequest",
    "LogoutResponse",
    "TokenResponse",
    "ErrorResponse",
    "HealthResponse",
    "FavoriteRequest",
    "FavoritesResponse",
    "GenreResponse",
    "MovieListResponse",
    "MovieResponse",
]
