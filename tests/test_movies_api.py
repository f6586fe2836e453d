from fastapi.testclient import TestClient

from moviestore.core.config import get_settings
from moviestore.core.store import MovieStore
from moviestore.main import create_app, load_seed


def test_list_movies(client):
    resp = client.get("/movies")
    assert resp.status_code == 200
    assert [m["title"] for m in resp.json()] == ["X", "Heat"]


def test_list_movies_by_genre(client):
    lower = client.get("/movies", params={"genre": "crime"}).json()
    upper = client.get("/movies", params={"genre": "Crime"}).json()

    assert lower == upper
    assert [m["title"] for m in lower] == ["Heat"]


def test_empty_genre_param_means_no_filter(client):
    assert len(client.get("/movies?genre=").json()) == 2


def test_get_movie(client, store):
    movie = store.list()[0]
    resp = client.get(f"/movies/{movie.id}")

    assert resp.status_code == 200
    assert resp.json()["id"] == movie.id


def test_get_missing_movie(client):
    resp = client.get("/movies/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Movie not found"}


def test_create_movie(client, movie_payload):
    resp = client.post("/movies", json={**movie_payload, "extra": True})
    body = resp.json()

    assert resp.status_code == 201
    assert body["id"]
    assert body["rate"] == 5
    assert "extra" not in body
    assert client.get(f"/movies/{body['id']}").json() == body


def test_create_invalid_movie(client, movie_payload):
    resp = client.post("/movies", json={**movie_payload, "year": 3000, "genre": None})

    assert resp.status_code == 400
    errors = resp.json()["error"]
    assert "year" in errors
    assert "genre" in errors
    assert len(client.get("/movies").json()) == 2


def test_create_malformed_json(client):
    resp = client.post(
        "/movies",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert "body" in resp.json()["error"]


def test_create_non_utf8_body(client):
    resp = client.post(
        "/movies",
        content=b'{"title": "\xff\xfe"}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert "body" in resp.json()["error"]
    assert len(client.get("/movies").json()) == 2


def test_update_non_utf8_body(client, store):
    movie = store.list()[0]
    resp = client.patch(
        f"/movies/{movie.id}",
        content=b'{"title": "\xff\xfe"}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert "body" in resp.json()["error"]
    assert store.get(movie.id).title == movie.title


def test_update_movie(client, store):
    movie = store.list()[0]
    resp = client.patch(f"/movies/{movie.id}", json={"year": 2000, "id": "other"})
    body = resp.json()

    assert resp.status_code == 200
    assert body["year"] == 2000
    assert body["id"] == movie.id
    assert body["title"] == movie.title


def test_update_invalid(client, store):
    movie = store.list()[0]
    resp = client.patch(f"/movies/{movie.id}", json={"rate": 0})

    assert resp.status_code == 400
    assert "rate" in resp.json()["error"]
    assert store.get(movie.id).rate == movie.rate


def test_update_missing_movie(client):
    resp = client.patch("/movies/nope", json={"year": 2000})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Movie not found"}


def test_delete_movie(client, store):
    movie = store.list()[0]
    resp = client.delete(f"/movies/{movie.id}")

    assert resp.status_code == 200
    assert resp.json() == {"message": "Movie deleted"}
    assert client.get(f"/movies/{movie.id}").status_code == 404


def test_delete_missing_movie(client):
    assert client.delete("/movies/nope").status_code == 404


def test_allowed_origin_gets_cors_headers(client):
    resp = client.get("/movies", headers={"Origin": "http://localhost:5500"})

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:5500"


def test_unknown_origin_is_rejected(client):
    resp = client.get("/movies", headers={"Origin": "https://evil.example"})

    assert resp.status_code == 403
    assert resp.json() == {"message": "Not allowed by CORS"}


def test_seed_file_loads():
    seed = load_seed(get_settings().seed_file)

    assert seed
    assert len({m.id for m in seed}) == len(seed)


def test_app_loads_seed_on_startup():
    with TestClient(create_app()) as c:
        movies = c.get("/movies").json()
    assert len(movies) == len(load_seed(get_settings().seed_file))


def test_injected_store_is_used():
    with TestClient(create_app(MovieStore())) as c:
        assert c.get("/movies").json() == []
