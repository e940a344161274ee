import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from urllib.parse import urlencode

import requests

from movie_browser import genres
from movie_browser.config import (
    BACKDROP_SIZES,
    POSTER_SIZES,
    REQUEST_TIMEOUT,
    TMDB_API_KEY,
    TMDB_BASE_URL,
    TMDB_IMAGE_BASE_URL,
    TMDB_PLACEHOLDER_KEY,
)
from movie_browser.errors import ApiError, CatalogError, TransportError
from movie_browser.models import CatalogEntry

log = logging.getLogger(__name__)

DEFAULT_SORT = "popularity.desc"

# Dashboard rows, in display order
CATEGORIES = ("trending", "popular", "top_rated", "action", "comedy")


@dataclass
class CategoryLoad:
    """Result of a dashboard load: entries per category plus any failures."""

    categories: dict[str, list[CatalogEntry]]
    failures: dict[str, CatalogError] = field(default_factory=dict)


class TMDBClient:
    """
    Read-only client for The Movie Database (TMDb) v3 API.

    Every list call returns ``CatalogEntry`` objects (an empty list when
    there are no results) or raises ``TransportError``/``ApiError``.
    The HTTP session is injectable so tests never touch the network. Without
    one, each thread gets its own ``requests.Session``.
    """

    BASE_URL = TMDB_BASE_URL
    IMAGE_BASE_URL = TMDB_IMAGE_BASE_URL

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(self, api_key: str | None = None, session=None,
                 timeout: float = REQUEST_TIMEOUT):
        self.api_key = TMDB_API_KEY if api_key is None else api_key
        self._session = session
        self._local = threading.local()
        self.timeout = timeout
        if not self.is_configured:
            log.warning("TMDB API key not configured. Set TMDB_API_KEY in .env")

    @property
    def session(self):
        if self._session is not None:
            return self._session
        if not hasattr(self._local, "session"):
            self._local.session = requests.Session()
        return self._local.session

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key) and self.api_key != TMDB_PLACEHOLDER_KEY

    # ------------------------------------------------------------------
    # URLs
    # ------------------------------------------------------------------
    def build_url(self, endpoint: str, params: dict | None = None) -> str:
        query = {"api_key": self.api_key}
        query.update(params or {})
        return f"{self.BASE_URL}{endpoint}?{urlencode(query)}"

    def image_url(self, path: str | None, size: str = "medium") -> str | None:
        """Poster URL for *path* at the given size tier, or None without a path."""
        return self._image(path, size, POSTER_SIZES)

    def backdrop_url(self, path: str | None, size: str = "medium") -> str | None:
        return self._image(path, size, BACKDROP_SIZES)

    def _image(self, path, size, tiers):
        if not path:
            return None
        tier = tiers.get(size, tiers["small"])
        return f"{self.IMAGE_BASE_URL}/{tier}{path}"

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    def _get(self, endpoint: str, **params) -> dict:
        url = self.build_url(endpoint, params)
        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            log.error("TMDb request to %s failed: %s", endpoint, exc)
            raise TransportError("Network request failed") from exc

        if not 200 <= r.status_code < 300:
            log.error("TMDb %s answered %s", endpoint, r.status_code)
            raise ApiError(f"API Error: {r.status_code}", r.status_code)

        try:
            return r.json()
        except ValueError as exc:
            log.error("TMDb %s returned invalid JSON", endpoint)
            raise ApiError("API Error: invalid response body", r.status_code) from exc

    def _results(self, endpoint: str, **params) -> list[CatalogEntry]:
        payload = self._get(endpoint, **params)
        return [CatalogEntry.from_api(m) for m in payload.get("results") or []]

    # ------------------------------------------------------------------
    # Public – catalog lookups
    # ------------------------------------------------------------------
    def trending(self) -> list[CatalogEntry]:
        return self._results("/trending/movie/week")

    def popular(self) -> list[CatalogEntry]:
        return self._results("/movie/popular")

    def top_rated(self) -> list[CatalogEntry]:
        return self._results("/movie/top_rated")

    def by_genre(self, genre_id: int, sort_key: str = DEFAULT_SORT) -> list[CatalogEntry]:
        return self._results("/discover/movie", with_genres=genre_id, sort_by=sort_key)

    def search(self, query: str) -> list[CatalogEntry]:
        """Title search. A blank query returns [] without hitting the API."""
        query = (query or "").strip()
        if not query:
            return []
        return self._results("/search/movie", query=query)

    def detail(self, entry_id: int) -> CatalogEntry:
        return CatalogEntry.from_api(self._get(f"/movie/{entry_id}"))

    @staticmethod
    def genre_names(genre_ids: list[int]) -> list[str]:
        return genres.genre_names(genre_ids)

    # ------------------------------------------------------------------
    # Public – dashboard load
    # ------------------------------------------------------------------
    def category_fetchers(self) -> dict:
        return {
            "trending": self.trending,
            "popular": self.popular,
            "top_rated": self.top_rated,
            "action": lambda: self.by_genre(genres.ACTION),
            "comedy": lambda: self.by_genre(genres.COMEDY),
        }

    def load_categories(self, fail_fast: bool = True) -> CategoryLoad:
        """
        Fetches the five dashboard categories concurrently.

        With ``fail_fast`` the first failing category is re-raised and nothing
        is returned, even for categories that succeeded. Otherwise failures
        are collected in ``CategoryLoad.failures`` next to the successful rows.
        """
        fetchers = self.category_fetchers()
        executor = ThreadPoolExecutor(max_workers=len(fetchers))
        futures = {executor.submit(fn): name for name, fn in fetchers.items()}
        loaded: dict[str, list[CatalogEntry]] = {}
        failures: dict[str, CatalogError] = {}
        try:
            for future in as_completed(futures):
                name = futures[future]
                try:
                    loaded[name] = future.result()
                except CatalogError as exc:
                    if fail_fast:
                        raise
                    log.warning("Category %s failed to load: %s", name, exc.message)
                    failures[name] = exc
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        ordered = {name: loaded[name] for name in CATEGORIES if name in loaded}
        return CategoryLoad(categories=ordered, failures=failures)
