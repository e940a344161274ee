import logging
from dataclasses import dataclass, field
from typing import Optional

import streamlit as st

from movie_browser.errors import CatalogError
from movie_browser.tokens import Generation
from movie_browser.ui.components import PLACEHOLDER_GLYPH, format_rating, release_year

log = logging.getLogger(__name__)

CLOSED = "closed"
OPEN = "open"


@dataclass
class DetailView:
    """Everything the details dialog displays."""

    title: str
    rating: str
    year: str = ""
    runtime: str = ""
    genres: list[str] = field(default_factory=list)
    overview: str = ""
    poster_url: Optional[str] = None
    backdrop_url: Optional[str] = None
    loading: bool = False


def loading_view():
    return DetailView(
        title="Loading...",
        rating="⭐ 0.0",
        overview="Loading movie details...",
        loading=True,
    )


def error_view():
    return DetailView(
        title="Error Loading Details",
        rating="⭐ 0.0",
        overview="Failed to load movie details. Please try again.",
    )


def detail_view(entry, client):
    """
    Builds the dialog content for a detail record.

    Args:
        entry (CatalogEntry): Detail variant from ``TMDBClient.detail``.
        client (TMDBClient): Used to resolve the large poster URL.

    Returns:
        DetailView: The populated view.
    """
    return DetailView(
        title=entry.title,
        rating=f"⭐ {format_rating(entry.vote_average)}",
        year=release_year(entry.release_date),
        runtime=f"{entry.runtime} min" if entry.runtime else "N/A",
        genres=list(entry.genres),
        overview=entry.overview or "No overview available.",
        poster_url=client.image_url(entry.poster_path, "large"),
        backdrop_url=client.backdrop_url(entry.backdrop_path, "large"),
    )


class DetailPresenter:
    """
    Open/closed state machine behind the movie details dialog.

    ``open`` shows the loading view right away and hands out a token;
    ``resolve`` fetches the record and applies it only if that token is
    still current, so a late answer for a previous movie never overwrites
    the one being shown. State lives in ``state`` (Streamlit session state
    in the app, a dict in tests).
    """

    def __init__(self, client, state):
        self.client = client
        self.state = state
        self.generation = Generation(state, "detail")

    @property
    def status(self):
        return self.state.get("detail_status", CLOSED)

    @property
    def is_open(self):
        return self.status == OPEN

    @property
    def entry_id(self):
        return self.state.get("detail_entry_id")

    @property
    def view(self):
        return self.state.get("detail_view")

    @property
    def token(self):
        return self.generation.current

    def open(self, entry_id):
        self.state["detail_status"] = OPEN
        self.state["detail_entry_id"] = entry_id
        self.state["detail_view"] = loading_view()
        self.state["detail_shown"] = False
        return self.generation.next()

    def resolve(self, token):
        """
        Fetches the detail record for the entry opened with *token*.

        Returns:
            DetailView | None: The applied view, or None when the token was
            superseded or the dialog has been closed meanwhile.
        """
        entry_id = self.entry_id
        try:
            view = detail_view(self.client.detail(entry_id), self.client)
        except CatalogError:
            log.exception("Error loading movie details for %s", entry_id)
            view = error_view()

        if not self.generation.is_current(token) or not self.is_open:
            log.debug("Dropping stale detail response for %s", entry_id)
            return None

        self.state["detail_view"] = view
        return view

    def close(self):
        self.state["detail_status"] = CLOSED
        # Any in-flight response becomes stale
        self.generation.next()

    def mark_shown(self):
        self.state["detail_shown"] = True

    def reconcile(self):
        """
        Closes a dialog the user dismissed with Escape or a backdrop click.

        Those dismissals happen in the browser without a callback. A full
        rerun cannot be triggered while the dialog covers the page, so one
        that finds an already shown dialog still open means it was dismissed.
        """
        if self.is_open and self.state.get("detail_shown"):
            self.close()


@st.dialog("Movie details", width="large")
def detail_dialog(presenter):
    slot = st.empty()
    view = presenter.view
    if view is None:
        return

    if view.loading:
        with slot.container():
            render_detail(view)
        with st.spinner("Loading movie details..."):
            view = presenter.resolve(presenter.token) or presenter.view
        slot.empty()

    with slot.container():
        render_detail(view)

    if st.button("Close", key="detail_close"):
        presenter.close()
        st.rerun()


def render_detail(view):
    if view.backdrop_url:
        st.image(view.backdrop_url, width="stretch")
    left, right = st.columns([1, 2])
    with left:
        if view.poster_url:
            st.image(view.poster_url, width="stretch")
        else:
            st.markdown(
                f"<div style='font-size:6rem;text-align:center'>{PLACEHOLDER_GLYPH}</div>",
                unsafe_allow_html=True,
            )
    with right:
        st.markdown(f"### {view.title}")
        st.write(" · ".join(p for p in (view.rating, view.year, view.runtime) if p))
        if view.genres:
            st.markdown(" ".join(f"`{g}`" for g in view.genres))
        st.write(view.overview)


def show_detail(presenter):
    """Draws the dialog if a movie is open; to be called once per full run."""
    presenter.reconcile()
    if presenter.is_open:
        presenter.mark_shown()
        detail_dialog(presenter)
