import threading

import pytest
import requests

from movie_browser.auth import CredentialStore
from movie_browser.storage import KeyValueStore
from movie_browser.tmdb import TMDBClient


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """
    Stands in for requests.Session.

    ``routes`` maps an endpoint path (e.g. "/movie/popular") to a
    FakeResponse or an exception instance to raise. Every requested URL is
    recorded in ``calls``.
    """

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []
        self._lock = threading.Lock()

    def get(self, url, timeout=None):
        with self._lock:
            self.calls.append(url)
        path = url.split("/3", 1)[1].split("?", 1)[0]
        route = self.routes.get(path, FakeResponse(404, {"status_message": "not found"}))
        if isinstance(route, Exception):
            raise route
        return route


def movie(movie_id, title="A Movie", **extra):
    payload = {
        "id": movie_id,
        "title": title,
        "poster_path": f"/poster{movie_id}.jpg",
        "vote_average": 7.25,
        "release_date": "2021-06-04",
        "overview": "Something happens.",
        "genre_ids": [28, 12],
    }
    payload.update(extra)
    return payload


def listing(*movies):
    return FakeResponse(200, {"page": 1, "results": list(movies)})


def category_routes():
    return {
        "/trending/movie/week": listing(movie(1, "Trending")),
        "/movie/popular": listing(movie(2, "Popular")),
        "/movie/top_rated": listing(movie(3, "Top Rated")),
        "/discover/movie": listing(movie(4, "Discovered")),
    }


@pytest.fixture
def store(tmp_path):
    return KeyValueStore(str(tmp_path / "movie_browser.db"))


@pytest.fixture
def credentials(store):
    return CredentialStore(store)


@pytest.fixture
def fake_session():
    return FakeSession(category_routes())


@pytest.fixture
def client(fake_session):
    return TMDBClient(api_key="test-key", session=fake_session)


@pytest.fixture
def offline_error():
    return requests.ConnectionError("Network is unreachable")
