from fastapi.testclient import TestClient

from movie_catalog.catalog import MovieCatalog
from movie_catalog.main import create_app
from movie_catalog.models import MovieDraft

MOVIE = {
    "title": "Arrival",
    "year": 2016,
    "genre": "Science Fiction",
    "description": "Linguists and aliens.",
    "poster": "arrival.jpg",
    "platforms": ["Prime Video"],
}


def _client(*drafts: MovieDraft) -> TestClient:
    return TestClient(create_app(MovieCatalog.create(drafts)))


def _draft(title: str, genre: str = "Drama") -> MovieDraft:
    return MovieDraft(title, 2020, genre, "", "", ("Netflix",))


def test_add_movie_and_get():
    client = _client()
    response = client.post("/movies", json=MOVIE)
    assert response.status_code == 201
    movie = response.json()
    assert movie["id"] == "1"
    assert movie["rating"] == 0
    assert movie["reviews"] == []
    assert client.get("/movies/1").json()["title"] == "Arrival"


def test_add_movie_without_platforms():
    client = _client(_draft("Up"))
    response = client.post("/movies", json={**MOVIE, "platforms": []})
    assert response.status_code == 400
    assert "error" in response.json()
    assert len(client.get("/movies/all").json()) == 1


def test_get_unknown_movie():
    response = _client().get("/movies/42")
    assert response.status_code == 404
    assert response.json() == {"error": "movie ID 42 not found"}


def test_add_review_as_anonymous_author():
    client = _client(_draft("Up"))
    response = client.post(
        "/movies/1/reviews", json={"rating": 5.26, "comment": "ok", "author": "bob"}
    )
    assert response.status_code == 201
    movie = response.json()
    assert movie["rating"] == 5.3
    assert len(movie["reviews"]) == 1
    assert movie["reviews"][0]["user_name"] == "bob"


def test_add_review_uses_session_name():
    client = _client(_draft("Up"))
    client.post("/login", json={"email": "ana@example.com", "password": "anything"})
    movie = client.post("/movies/1/reviews", json={"rating": 8, "comment": "nice"}).json()
    assert movie["reviews"][0]["user_name"] == "ana"


def test_add_review_errors():
    client = _client(_draft("Up"))
    assert client.post("/movies/9/reviews", json={"rating": 8, "comment": "x", "author": "b"}).status_code == 404
    assert client.post("/movies/1/reviews", json={"rating": 8, "comment": "  ", "author": "b"}).status_code == 400
    assert client.post("/movies/1/reviews", json={"rating": 8, "comment": "x"}).status_code == 400
    assert client.post("/movies/1/reviews", json={"rating": 11, "comment": "x", "author": "b"}).status_code == 400
    assert client.get("/movies/1").json()["reviews"] == []


def test_favorites_view():
    client = _client(*(_draft(f"Movie {i}") for i in range(1, 11)))
    client.post("/login", json={"email": "ana@example.com", "password": "anything"})
    assert client.post("/favorites/7").json() == {"movie_id": "7", "favorite": True}
    client.put("/view/favorites", json={"showing": True})
    visible = client.get("/movies").json()
    assert visible["title"] == "My Favorites"
    assert [movie["id"] for movie in visible["movies"]] == ["7"]
    assert visible["movies"][0]["favorite"] is True


def test_category_view():
    client = _client(_draft("A", "Comedy"), _draft("B", "Drama"), _draft("C", "Comedy"))
    response = client.put("/view/category", json={"category": "Comedy"})
    assert response.json()["title"] == "Comedy"
    assert [movie["title"] for movie in client.get("/movies").json()["movies"]] == ["A", "C"]
    assert client.put("/view/category", json={"category": "Western"}).status_code == 400


def test_session_flow():
    client = _client(_draft("Up"))
    assert client.get("/session").json() == {"authenticated": False, "display_name": None}
    session = client.post("/register", json={"name": "Ana", "email": "a@b.c", "password": "pw"}).json()
    assert session == {"authenticated": True, "display_name": "Ana"}
    client.post("/favorites/1")
    assert client.post("/logout").json() == {"authenticated": False, "display_name": None}
    assert client.get("/favorites").json() == []


def test_carousel_next():
    client = _client(_draft("A"), _draft("B"))
    assert client.get("/carousel/next", params={"current": 1}).json() == {"index": 0, "movie_id": "1"}
    assert _client().get("/carousel/next", params={"current": 3}).json() == {"index": 0, "movie_id": None}


def test_anonymous_favorite_toggle():
    client = _client(_draft("Up"))
    response = client.post("/favorites/1")
    assert response.status_code == 400
    assert client.get("/favorites").json() == []


def test_malformed_body_is_bad_request():
    client = _client(_draft("Up"))
    response = client.post("/movies/1/reviews", json={"rating": 0, "comment": "x", "author": "b"})
    assert response.status_code == 400
    assert "error" in response.json()
    assert client.post("/movies", json={**MOVIE, "year": "soon"}).status_code == 400


def test_review_after_login_without_local_part():
    client = _client(_draft("Up"))
    session = client.post("/login", json={"email": "@example.com", "password": "x"}).json()
    assert session["display_name"] == "@example.com"
    response = client.post("/movies/1/reviews", json={"rating": 7, "comment": "fine"})
    assert response.status_code == 201
    assert response.json()["reviews"][0]["user_name"] == "@example.com"
