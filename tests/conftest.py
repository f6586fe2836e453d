import pytest
from fastapi.testclient import TestClient

from moviestore.core.store import MovieStore
from moviestore.core.validation import validate_movie
from moviestore.main import create_app


@pytest.fixture
def movie_payload():
    return {
        "title": "X",
        "year": 1999,
        "director": "D",
        "duration": 100,
        "poster": "http://a.com/p.jpg",
        "genre": ["Drama"],
    }


@pytest.fixture
def store(movie_payload):
    s = MovieStore()
    s.create(validate_movie(movie_payload).data)
    s.create(validate_movie({
        **movie_payload,
        "title": "Heat",
        "genre": ["Action", "Crime"],
        "rate": 8.3,
    }).data)
    return s


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c
