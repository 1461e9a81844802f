"""Tests for genre and movie endpoints"""
import pytest
from fastapi.testclient import TestClient

from filmly.store import FilmStore

API = "/api/v1"


def test_list_genres(client: TestClient, auth_headers: dict):
    response = client.get(f"{API}/genres", headers=auth_headers)
    assert response.status_code == 200

    genres = response.json()
    assert [genre["id"] for genre in genres] == [0, 1, 2, 3, 4, 5]
    assert genres[0] == {"id": 0, "name": "Все", "slug": "all"}
    assert genres[2]["name"] == "Фантастика"


def test_genres_are_stable(client: TestClient, auth_headers: dict):
    first = client.get(f"{API}/genres", headers=auth_headers).json()
    second = client.get(f"{API}/genres", headers=auth_headers).json()
    assert first == second


def test_list_movies(client: TestClient, auth_headers: dict):
    response = client.get(f"{API}/movies", headers=auth_headers)
    assert response.status_code == 200

    data = response.json()
    assert data["total"] == 4
    assert [movie["id"] for movie in data["items"]] == ["m_002", "m_004", "m_005", "m_006"]

    interstellar = data["items"][0]
    assert interstellar["title"] == "Interstellar"
    assert interstellar["releaseYear"] == 2014
    assert interstellar["genreIds"] == [2, 4]
    assert interstellar["durationMin"] == 169
    assert interstellar["posterUrl"].startswith("https://")
    assert interstellar["isFavorite"] is True
    assert all(movie["isFavorite"] is False for movie in data["items"][1:])


def test_filter_by_genre(client: TestClient, auth_headers: dict):
    response = client.get(f"{API}/movies?id=2", headers=auth_headers)
    assert response.status_code == 200

    titles = {movie["title"] for movie in response.json()["items"]}
    assert titles == {"Interstellar", "Inception"}


def test_filter_by_several_genres(client: TestClient, auth_headers: dict):
    response = client.get(f"{API}/movies?id=1&id=3", headers=auth_headers)
    ids = [movie["id"] for movie in response.json()["items"]]
    assert ids == ["m_004", "m_005", "m_006"]


def test_filter_by_years(client: TestClient, auth_headers: dict):
    response = client.get(f"{API}/movies?from=2010&to=2014", headers=auth_headers)
    data = response.json()
    assert {movie["id"] for movie in data["items"]} == {"m_002", "m_006"}
    assert data["total"] == 2


def test_empty_parameters_are_ignored(client: TestClient, auth_headers: dict):
    response = client.get(f"{API}/movies?id=&from=&to=&sort=", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["total"] == 4


def test_sort_by_rating(client: TestClient, auth_headers: dict):
    items = client.get(f"{API}/movies?sort=rating", headers=auth_headers).json()["items"]
    ratings = [movie["rating"] for movie in items]
    assert ratings == sorted(ratings, reverse=True)


def test_sort_by_name(client: TestClient, auth_headers: dict):
    items = client.get(f"{API}/movies?sort=name", headers=auth_headers).json()["items"]
    titles = [movie["title"] for movie in items]
    assert titles == sorted(titles)


def test_sort_by_genre(client: TestClient, auth_headers: dict):
    items = client.get(f"{API}/movies?sort=genre", headers=auth_headers).json()["items"]
    assert [movie["genreIds"][0] for movie in items] == [1, 2, 3, 3]


@pytest.mark.parametrize(
    "query,message",
    [
        ("id=abc", "Invalid genre ids"),
        ("from=year", 'Invalid "from" year'),
        ("from=0", 'Invalid "from" year'),
        ("to=-1", 'Invalid "to" year'),
        ("sort=bogus", "Invalid sort key"),
    ],
)
def test_invalid_query(client: TestClient, auth_headers: dict, query: str, message: str):
    response = client.get(f"{API}/movies?{query}", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
    assert response.json()["message"] == message


def test_favorite_flag_is_live(client: TestClient, store: FilmStore, auth_headers: dict):
    store.add_favorite("m_005")
    items = client.get(f"{API}/movies", headers=auth_headers).json()["items"]
    flags = {movie["id"]: movie["isFavorite"] for movie in items}
    assert flags == {"m_002": True, "m_004": False, "m_005": True, "m_006": False}
