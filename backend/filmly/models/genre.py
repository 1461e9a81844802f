"""Genre model"""
from pydantic import BaseModel, ConfigDict


class Genre(BaseModel):
    """A catalog genre; id 0 is the "all" sentinel."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    slug: str
