import logging

import streamlit as st

from movie_browser.errors import CatalogError
from movie_browser.routing import LOGIN
from movie_browser.tokens import Generation
from movie_browser.ui.auth import go_to
from movie_browser.ui.components import SEARCH_CONTAINER, ViewRenderer
from movie_browser.ui.detail import DetailPresenter, show_detail

log = logging.getLogger(__name__)

CATEGORY_ROWS = {
    "trending": ("trendingMovies", "🔥 Trending Now"),
    "popular": ("popularMovies", "⭐ Popular on Netflix"),
    "top_rated": ("topRatedMovies", "🏆 Top Rated"),
    "action": ("actionMovies", "💥 Action Movies"),
    "comedy": ("comedyMovies", "😂 Comedy Movies"),
}

API_KEY_MISSING = (
    "TMDB API key not configured. Please add your API key to .env "
    "and refresh the page."
)
LOAD_FAILED = (
    "Failed to load movies. Please check your internet connection and try again."
)
PARTIAL_FAILED = "Some categories failed to load. Please try again."
SEARCH_FAILED = "Search failed. Please try again."


def load_all_movies(client, renderer, fail_fast=True):
    """
    Fetches the five categories in parallel and renders them.

    With ``fail_fast`` a single failing category shows the error banner and
    no row is rendered at all.

    Args:
        client (TMDBClient): Catalog client.
        renderer (ViewRenderer): Target of the rows and banners.
        fail_fast (bool): Abort everything on the first failure.

    Returns:
        CategoryLoad | None: The loaded rows, or None if nothing was rendered.
    """
    if not client.is_configured:
        renderer.show_error(API_KEY_MISSING)
        renderer.hide_loading()
        return None

    renderer.show_loading()
    renderer.hide_error()

    try:
        result = client.load_categories(fail_fast=fail_fast)
    except CatalogError:
        log.exception("Error loading movies")
        renderer.hide_loading()
        renderer.show_error(LOAD_FAILED)
        return None

    render_categories(renderer, result)
    renderer.hide_loading()
    return result


def render_categories(renderer, result):
    for name, entries in result.categories.items():
        container_id, _ = CATEGORY_ROWS[name]
        renderer.render_list(container_id, entries)
    if result.failures:
        renderer.show_error(PARTIAL_FAILED)


def perform_search(client, renderer, query, generation):
    """
    Runs a title search and renders the results section.

    A blank query does nothing. Results are dropped if another search was
    started after this one.

    Returns:
        list[CatalogEntry] | None: The rendered results, or None when
        nothing was rendered.
    """
    query = (query or "").strip()
    if not query:
        return None

    if not client.is_configured:
        renderer.show_error(API_KEY_MISSING)
        return None

    renderer.show_loading()
    renderer.show_search_results(query)
    token = generation.next()

    try:
        results = client.search(query)
    except CatalogError:
        log.exception("Search error")
        renderer.hide_loading()
        renderer.show_error(SEARCH_FAILED)
        return None

    if not generation.is_current(token):
        log.debug("Dropping stale results for %r", query)
        renderer.hide_loading()
        return None

    renderer.render_list(SEARCH_CONTAINER, results)
    renderer.hide_loading()
    return results


def reset_dashboard(state):
    for key in ("categories", "search_query", "search_results"):
        state.pop(key, None)


def clear_search(renderer, state):
    renderer.hide_search_results()
    reset_dashboard(state)
    state["search_input"] = ""


def render_search_bar():
    """
    Draws the search form.

    Returns:
        tuple[str, bool]: The query and whether it was submitted.
    """
    with st.form("search_form"):
        col1, col2 = st.columns([5, 1])
        with col1:
            query = st.text_input(
                "Search",
                key="search_input",
                placeholder="Search movies...",
                label_visibility="collapsed",
            )
        with col2:
            submitted = st.form_submit_button("Search", width="stretch")
    return query, submitted


def dashboard_page(services):
    """
    Renders the dashboard: category rows or search results, plus the
    details dialog for whichever movie was clicked.
    """
    state = st.session_state
    credentials = services.credentials
    client = services.client
    session = credentials.current_session()

    presenter = DetailPresenter(client, state)
    search_generation = Generation(state, "search")

    with st.sidebar:
        st.write(f"Welcome, **{session.name}**")
        if st.button("🔄 Reload"):
            reset_dashboard(state)
        if st.button("Logout"):
            credentials.logout()
            reset_dashboard(state)
            presenter.close()
            go_to(LOGIN)

    renderer = ViewRenderer(client, presenter.open, state)
    query, submitted = render_search_bar()

    if submitted and query.strip():
        state["search_query"] = query.strip()
        state["search_results"] = None

    if renderer.search_query:
        st.button("✖ Clear search", on_click=clear_search, args=(renderer, state))
        cached = state.get("search_results")
        if cached is None:
            state["search_results"] = perform_search(
                client, renderer, renderer.search_query, search_generation
            )
        else:
            renderer.show_search_results(renderer.search_query)
            renderer.render_list(SEARCH_CONTAINER, cached)
    else:
        for container_id, title in CATEGORY_ROWS.values():
            renderer.add_container(container_id, title)
        cached = state.get("categories")
        if cached is None:
            state["categories"] = load_all_movies(client, renderer)
        else:
            render_categories(renderer, cached)

    show_detail(presenter)
