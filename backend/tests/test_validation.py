"""Tests for validation helpers"""
import pytest

from filmly.models import MOVIES
from filmly.utils.validation import (
    INVALID,
    MISSING,
    is_valid_email,
    is_valid_password,
    normalize_email,
    parse_ids,
    parse_movie_id,
    parse_sort,
    parse_year,
    sort_movies,
)


def test_normalize_email():
    assert normalize_email("  User@Example.COM ") == "user@example.com"
    assert normalize_email(None) == ""
    assert normalize_email(42) == ""


@pytest.mark.parametrize("value", ["user@example.com", " A.B@mail.co.uk ", "x@y.z"])
def test_valid_emails(value):
    assert is_valid_email(value)


@pytest.mark.parametrize("value", ["not-an-email", "user@domain", "us er@example.com", "@example.com", "", None])
def test_invalid_emails(value):
    assert not is_valid_email(value)


def test_password_rules():
    assert is_valid_password("x")
    assert not is_valid_password("   ")
    assert not is_valid_password("")
    assert not is_valid_password(12345)


def test_parse_ids_scalar_and_list():
    assert parse_ids("2") == [2]
    assert parse_ids(["1", "abc", "3"]) == [1, 3]
    assert parse_ids(["2.0"]) == [2]


def test_parse_ids_absent_or_unusable():
    assert parse_ids(None) is MISSING
    assert parse_ids("") is MISSING
    assert parse_ids(["", " "]) is MISSING
    assert parse_ids("abc") is INVALID
    assert parse_ids(["2.5", "x"]) is INVALID


@pytest.mark.parametrize("value", ["1_0", "1e1", "0x10", "inf", "\u0662"])
def test_parse_ids_rejects_non_decimal_syntax(value):
    assert parse_ids(value) is INVALID


def test_parse_year():
    assert parse_year("2010") == 2010
    assert parse_year(None) is MISSING
    assert parse_year("") is MISSING
    assert parse_year("0") is INVALID
    assert parse_year("-5") is INVALID
    assert parse_year("20x0") is INVALID
    assert parse_year("2_010") is INVALID


def test_parse_sort():
    assert parse_sort("rating") == "rating"
    assert parse_sort(None) is MISSING
    assert parse_sort("bogus") is INVALID
    assert parse_sort("Rating") is INVALID


def test_parse_movie_id():
    assert parse_movie_id("m_002") == "m_002"
    assert parse_movie_id("   ") is None
    assert parse_movie_id(2) is None
    assert parse_movie_id(None) is None


def test_sort_unset_keeps_order():
    movies = list(MOVIES)
    assert sort_movies(movies) == movies
    assert sort_movies(movies) is not movies


def test_sort_by_rating_descending():
    ratings = [movie.rating for movie in sort_movies(MOVIES, "rating")]
    assert ratings == sorted(ratings, reverse=True)


def test_sort_by_name():
    titles = [movie.title for movie in sort_movies(MOVIES, "name")]
    assert titles == ["Inception", "Interstellar", "Mad Max: Fury Road", "The Notebook"]


def test_sort_by_genre_is_stable():
    ids = [movie.id for movie in sort_movies(MOVIES, "genre")]
    # first genres: m_002=2, m_004=3, m_005=1, m_006=3
    assert ids == ["m_005", "m_002", "m_004", "m_006"]


def test_sort_does_not_mutate_input():
    movies = list(MOVIES)
    sort_movies(movies, "rating")
    assert movies == list(MOVIES)
