"""Favorites schemas"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FavoriteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    movie_id: Any = Field(None, alias="movieId")
