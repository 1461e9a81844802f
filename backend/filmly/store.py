"""In-memory dataset store"""
import threading
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Set

from filmly.models import GENRES, MOVIES, Genre, Movie


class UnknownMovieError(KeyError):
    """Movie id is not in the catalog."""


class FilmStore:
    """Owns the catalog, the favorites set and the token blacklist.

    The catalog is immutable. The two sets are guarded by one lock; readers
    get copies so a listing never sees a half-applied update.
    """

    def __init__(
        self,
        genres: Sequence[Genre] = GENRES,
        movies: Sequence[Movie] = MOVIES,
        favorites: Optional[Iterable[str]] = None,
    ):
        self._genres = tuple(genres)
        self._movies = tuple(movies)
        self._movies_by_id: Dict[str, Movie] = {movie.id: movie for movie in self._movies}

        if favorites is None:
            favorites = (movie.id for movie in self._movies if movie.seed_favorite)
        self._favorites: Set[str] = set()
        for movie_id in favorites:
            if movie_id not in self._movies_by_id:
                raise UnknownMovieError(movie_id)
            self._favorites.add(movie_id)

        self._revoked_tokens: Set[str] = set()
        self._lock = threading.Lock()

    # ----- catalog -----

    def list_genres(self) -> List[Genre]:
        return list(self._genres)

    def list_movies(self) -> List[Movie]:
        return list(self._movies)

    def get_movie(self, movie_id: str) -> Optional[Movie]:
        return self._movies_by_id.get(movie_id)

    # ----- favorites -----

    def favorite_ids(self) -> FrozenSet[str]:
        """Snapshot of the favorites set"""
        with self._lock:
            return frozenset(self._favorites)

    def is_favorite(self, movie_id: str) -> bool:
        with self._lock:
            return movie_id in self._favorites

    def favorite_movies(self) -> List[Movie]:
        """Favorite movies in catalog order"""
        favorites = self.favorite_ids()
        return [movie for movie in self._movies if movie.id in favorites]

    def add_favorite(self, movie_id: str) -> bool:
        """Add a movie to favorites.

        Returns False if it was already a favorite.

        Raises:
            UnknownMovieError: the id is not in the catalog.
        """
        if self.get_movie(movie_id) is None:
            raise UnknownMovieError(movie_id)
        with self._lock:
            if movie_id in self._favorites:
                return False
            self._favorites.add(movie_id)
            return True

    def remove_favorite(self, movie_id: str) -> bool:
        """Remove a movie from favorites. Returns False if it was not one."""
        with self._lock:
            if movie_id not in self._favorites:
                return False
            self._favorites.remove(movie_id)
            return True

    # ----- token blacklist -----

    def revoke_token(self, token: str) -> None:
        with self._lock:
            self._revoked_tokens.add(token)

    def is_revoked(self, token: str) -> bool:
        with self._lock:
            return token in self._revoked_tokens

    def revoked_count(self) -> int:
        with self._lock:
            return len(self._revoked_tokens)
