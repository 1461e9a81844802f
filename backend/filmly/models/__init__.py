"""Catalog models"""
from filmly.models.catalog import GENRES, MOVIES
from filmly.models.genre import Genre
from filmly.models.movie import Movie

__all__ = ["Genre", "Movie", "GENRES", "MOVIES"]
