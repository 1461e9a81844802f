"""Seed catalog"""
from typing import Tuple

from filmly.models.genre import Genre
from filmly.models.movie import Movie

GENRES: Tuple[Genre, ...] = (
    Genre(id=0, name="Все", slug="all"),
    Genre(id=1, name="Мелодрама", slug="melodrama"),
    Genre(id=2, name="Фантастика", slug="fantasy"),
    Genre(id=3, name="Боевик", slug="action"),
    Genre(id=4, name="Триллер", slug="thriller"),
    Genre(id=5, name="Детектив", slug="detective"),
)

MOVIES: Tuple[Movie, ...] = (
    Movie(
        id="m_002",
        title="Interstellar",
        release_year=2014,
        genre_ids=(2, 4),
        rating=4.8,
        poster_url="https://upload.wikimedia.org/wikipedia/en/b/bc/Interstellar_film_poster.jpg",
        description="Экспедиция за пределы привычного мира ради будущего человечества.",
        duration_min=169,
        seed_favorite=True,
    ),
    Movie(
        id="m_004",
        title="Mad Max: Fury Road",
        release_year=2015,
        genre_ids=(3, 4),
        rating=4.3,
        poster_url="https://upload.wikimedia.org/wikipedia/en/6/6e/Mad_Max_Fury_Road.jpg",
        description="Дорога ярости, топливо и борьба за свободу.",
        duration_min=120,
    ),
    Movie(
        id="m_005",
        title="The Notebook",
        release_year=2004,
        genre_ids=(1,),
        rating=4.2,
        poster_url="https://upload.wikimedia.org/wikipedia/en/8/86/Posternotebook.jpg",
        description="История любви, рассказанная сквозь годы.",
        duration_min=124,
    ),
    Movie(
        id="m_006",
        title="Inception",
        release_year=2010,
        genre_ids=(3, 2, 4),
        rating=4.6,
        poster_url="https://upload.wikimedia.org/wikipedia/en/2/2e/Inception_%282010%29_theatrical_poster.jpg",
        description="Во сне внутри сна, где реальность под вопросом.",
        duration_min=148,
    ),
)
