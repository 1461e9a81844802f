"""Genre endpoints"""
from typing import List

from fastapi import APIRouter, Depends

from filmly.api.deps import get_store, require_auth
from filmly.schemas import ErrorResponse, GenreResponse
from filmly.store import FilmStore

router = APIRouter(
    tags=["genres"],
    dependencies=[Depends(require_auth)],
    responses={401: {"model": ErrorResponse}},
)


@router.get("/genres", response_model=List[GenreResponse])
def list_genres(store: FilmStore = Depends(get_store)) -> List[GenreResponse]:
    """List every genre in declared order (id 0 is "all")."""
    return [GenreResponse.from_genre(genre) for genre in store.list_genres()]
