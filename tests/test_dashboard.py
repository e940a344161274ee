from unittest.mock import MagicMock

from conftest import FakeResponse, FakeSession, category_routes, listing, movie
from movie_browser.tmdb import TMDBClient
from movie_browser.tokens import Generation
from movie_browser.ui.components import SEARCH_CONTAINER
from movie_browser.ui.dashboard import (
    API_KEY_MISSING,
    LOAD_FAILED,
    PARTIAL_FAILED,
    SEARCH_FAILED,
    load_all_movies,
    perform_search,
    reset_dashboard,
)


def test_dashboard_renders_all_five_rows(client):
    renderer = MagicMock()

    result = load_all_movies(client, renderer)

    assert result is not None
    rendered = [c.args[0] for c in renderer.render_list.call_args_list]
    assert rendered == [
        "trendingMovies", "popularMovies", "topRatedMovies", "actionMovies", "comedyMovies",
    ]
    renderer.show_loading.assert_called_once()
    renderer.hide_loading.assert_called_once()
    renderer.show_error.assert_not_called()


def test_one_failing_category_blanks_the_dashboard():
    routes = category_routes()
    routes["/movie/popular"] = FakeResponse(500, {"status_message": "boom"})
    client = TMDBClient(api_key="k", session=FakeSession(routes))
    renderer = MagicMock()

    assert load_all_movies(client, renderer) is None

    renderer.render_list.assert_not_called()
    renderer.show_error.assert_called_once_with(LOAD_FAILED)
    renderer.hide_loading.assert_called()


def test_partial_load_renders_survivors_and_warns():
    routes = category_routes()
    routes["/movie/popular"] = FakeResponse(500, {"status_message": "boom"})
    client = TMDBClient(api_key="k", session=FakeSession(routes))
    renderer = MagicMock()

    result = load_all_movies(client, renderer, fail_fast=False)

    assert set(result.failures) == {"popular"}
    assert renderer.render_list.call_count == 4
    renderer.show_error.assert_called_once_with(PARTIAL_FAILED)


def test_unconfigured_key_shows_error_without_requests():
    session = FakeSession(category_routes())
    client = TMDBClient(api_key="", session=session)
    renderer = MagicMock()

    assert load_all_movies(client, renderer) is None
    assert perform_search(client, renderer, "dune", Generation({}, "search")) is None

    assert session.calls == []
    renderer.show_error.assert_called_with(API_KEY_MISSING)


def test_search_renders_results_section():
    session = FakeSession({"/search/movie": listing(movie(9, "Dune"))})
    client = TMDBClient(api_key="k", session=session)
    renderer = MagicMock()

    results = perform_search(client, renderer, "  dune ", Generation({}, "search"))

    assert [r.title for r in results] == ["Dune"]
    renderer.show_search_results.assert_called_once_with("dune")
    renderer.render_list.assert_called_once_with(SEARCH_CONTAINER, results)
    renderer.hide_loading.assert_called_once()


def test_blank_search_does_nothing(client, fake_session):
    renderer = MagicMock()

    assert perform_search(client, renderer, "   ", Generation({}, "search")) is None

    assert fake_session.calls == []
    renderer.show_search_results.assert_not_called()


def test_search_failure_shows_banner(offline_error):
    client = TMDBClient(api_key="k", session=FakeSession({"/search/movie": offline_error}))
    renderer = MagicMock()

    assert perform_search(client, renderer, "dune", Generation({}, "search")) is None

    renderer.show_error.assert_called_once_with(SEARCH_FAILED)
    renderer.render_list.assert_not_called()


def test_superseded_search_is_not_rendered():
    state = {}
    generation = Generation(state, "search")
    client = MagicMock()
    client.is_configured = True

    def search(query):
        # A newer search starts while this one is in flight
        generation.next()
        return []

    client.search.side_effect = search
    renderer = MagicMock()

    assert perform_search(client, renderer, "old", generation) is None
    renderer.render_list.assert_not_called()
    renderer.hide_loading.assert_called_once()


def test_reset_dashboard_drops_cached_views():
    state = {"categories": object(), "search_query": "x", "search_results": [], "other": 1}
    reset_dashboard(state)
    assert state == {"other": 1}
