"""Tests for the in-memory store"""
import threading

import pytest

from filmly.store import FilmStore, UnknownMovieError


def test_seeded_favorites(store: FilmStore):
    assert store.favorite_ids() == frozenset({"m_002"})
    assert [movie.id for movie in store.favorite_movies()] == ["m_002"]


def test_add_and_remove_favorite(store: FilmStore):
    assert store.add_favorite("m_004") is True
    assert store.add_favorite("m_004") is False
    assert store.is_favorite("m_004")
    assert store.remove_favorite("m_004") is True
    assert store.remove_favorite("m_004") is False
    assert store.favorite_ids() == frozenset({"m_002"})


def test_get_movie(store: FilmStore):
    assert store.get_movie("m_006").title == "Inception"
    assert store.get_movie("m_999") is None


def test_unknown_movie_is_rejected(store: FilmStore):
    with pytest.raises(UnknownMovieError):
        store.add_favorite("m_999")
    assert "m_999" not in store.favorite_ids()


def test_unknown_seed_favorite_is_rejected():
    with pytest.raises(UnknownMovieError):
        FilmStore(favorites=["m_999"])


def test_favorite_movies_in_catalog_order(store: FilmStore):
    store.add_favorite("m_006")
    store.add_favorite("m_004")
    assert [movie.id for movie in store.favorite_movies()] == ["m_002", "m_004", "m_006"]


def test_revoked_tokens(store: FilmStore):
    assert not store.is_revoked("abc")
    store.revoke_token("abc")
    store.revoke_token("abc")
    assert store.is_revoked("abc")
    assert store.revoked_count() == 1


def test_stores_are_isolated():
    first, second = FilmStore(), FilmStore()
    first.add_favorite("m_005")
    assert "m_005" not in second.favorite_ids()


def test_concurrent_adds_only_one_wins(store: FilmStore):
    results = []

    def add():
        results.append(store.add_favorite("m_005"))

    threads = [threading.Thread(target=add) for _ in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count(True) == 1
