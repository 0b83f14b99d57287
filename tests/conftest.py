"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from movies_api.core.config import Settings
from movies_api.data_access.memory_store import MovieStore
from movies_api.models.movie import Movie
from movies_api.server import create_app
from movies_api.services.movie_service import MovieService

DRAMA_ACTION_ID = "8fb17ae1-bdfe-45e5-a871-4772d7e526b8"
COMEDY_FREE_ID = "c906673b-3948-4402-ac7f-73ac3a9e3105"
HORROR_ID = "6a360a18-c645-4b47-9a7b-2a71babbf3e0"


@pytest.fixture
def seed_movies():
    return [
        Movie(
            id=DRAMA_ACTION_ID,
            title="Gladiator",
            year=2000,
            director="Ridley Scott",
            duration=155,
            poster="https://img.fruugo.com/product/0/60/14417600_max.jpg",
            genre=["Drama", "Action"],
            rate=8.5,
        ),
        Movie(
            id=COMEDY_FREE_ID,
            title="Interstellar",
            year=2014,
            director="Christopher Nolan",
            duration=169,
            poster="https://m.media-amazon.com/images/I/91obuWzA3XL.jpg",
            genre=["Adventure", "Sci-Fi"],
            rate=8.6,
        ),
        Movie(
            id=HORROR_ID,
            title="The Shining",
            year=1980,
            director="Stanley Kubrick",
            duration=146,
            poster="https://www.themoviedb.org/t/p/original/b6ko0IKC8MdYBBPkkA1aBPLe2yz.jpg",
            genre=["Horror", "Drama"],
        ),
    ]


@pytest.fixture
def store(seed_movies):
    return MovieStore(seed_movies)


@pytest.fixture
def movie_service(store):
    return MovieService(store=store)


@pytest.fixture
def valid_draft():
    return {
        "title": "X",
        "year": 2020,
        "director": "D",
        "duration": 100,
        "poster": "http://p",
        "genre": ["Action"],
    }


@pytest.fixture
def settings():
    return Settings(ACCEPTED_ORIGINS=["http://localhost:8080", "http://localhost:8081"])


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
