"""Input normalization and query parsing helpers.

Every parser distinguishes three cases for a query parameter:

* absent (``None`` or blank) -> :data:`MISSING`
* present but unusable        -> :data:`INVALID`
* present and usable          -> the parsed value
"""
import math
import re
from typing import Any, Iterable, List, Optional, Sequence, TypeVar, Union

from filmly.models.movie import Movie


class _Marker:
    """Sentinel for a query parameter that did not yield a value."""

    def __init__(self, name: str):
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False


MISSING = _Marker("MISSING")
INVALID = _Marker("INVALID")

SORT_KEYS = ("rating", "name", "genre")

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+(\.0*)?$")

T = TypeVar("T")
Parsed = Union[T, _Marker]


def normalize_email(value: Any) -> str:
    """Trim and lower-case an email; non-strings become ``""``."""
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def is_valid_email(value: Any) -> bool:
    return bool(_EMAIL_RE.match(normalize_email(value)))


def is_valid_password(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def is_blank(value: Any) -> bool:
    """True when a query value counts as not supplied."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return all(is_blank(item) for item in value)
    return False


def _to_int(value: Any) -> Optional[int]:
    """Coerce a query value to an integer, or ``None`` when it is not one.

    ``"2"`` and ``"2.0"`` both give 2; ``"2.5"`` and ``"abc"`` give ``None``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        # plain decimal digits only: no "1_0", "1e1" or "0x10"
        if not _INTEGER_RE.match(text):
            return None
        number = float(text)
    else:
        return None

    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


def parse_ids(raw: Any) -> Parsed[List[int]]:
    """Parse one or more genre ids.

    Unparseable entries are dropped; the parameter is :data:`INVALID` only
    when something was supplied and nothing survived.
    """
    if is_blank(raw):
        return MISSING

    values: Iterable[Any] = raw if isinstance(raw, (list, tuple)) else [raw]
    parsed = [number for number in (_to_int(v) for v in values if not is_blank(v)) if number is not None]
    return parsed if parsed else INVALID


def parse_year(raw: Any) -> Parsed[int]:
    if is_blank(raw):
        return MISSING
    year = _to_int(raw)
    if year is None or year <= 0:
        return INVALID
    return year


def parse_sort(raw: Any) -> Parsed[str]:
    if is_blank(raw):
        return MISSING
    if isinstance(raw, str) and raw in SORT_KEYS:
        return raw
    return INVALID


def parse_movie_id(raw: Any) -> Optional[str]:
    """Return the movie id from a request body, or ``None`` if unusable."""
    if not isinstance(raw, str) or not raw.strip():
        return None
    return raw


def _first_genre(movie: Movie) -> int:
    return movie.genre_ids[0] if movie.genre_ids else 0


def sort_movies(movies: Sequence[Movie], key: Optional[str] = None) -> List[Movie]:
    """Return a sorted copy of ``movies``; ``sorted`` keeps ties in input order."""
    if not key:
        return list(movies)
    if key == "rating":
        return sorted(movies, key=lambda movie: movie.rating, reverse=True)
    if key == "name":
        return sorted(movies, key=lambda movie: (movie.title.casefold(), movie.title))
    if key == "genre":
        return sorted(movies, key=_first_genre)
    raise ValueError(f"Unknown sort key: {key!r}")
