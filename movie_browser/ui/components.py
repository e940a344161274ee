from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import pandas as pd
import streamlit as st

PLACEHOLDER_GLYPH = "🎬"
NO_MOVIES = "No movies found"
CARDS_PER_ROW = 6
SEARCH_CONTAINER = "searchResultsMovies"


@dataclass
class CardView:
    """Display values of one movie card."""

    entry_id: int
    title: str
    poster_url: Optional[str]
    rating: str
    genres: list[str]


def format_rating(vote_average):
    """
    Formats a 0-10 rating to one decimal place, rounding ties up.

    Args:
        vote_average (float | None): TMDB average rating.

    Returns:
        str: e.g. "7.3", or "N/A" when there is no rating.
    """
    if not vote_average:
        return "N/A"
    return str(Decimal(vote_average).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def release_year(release_date):
    """Returns the part of a 'YYYY-MM-DD' date before the first '-', or "N/A"."""
    return release_date.split("-")[0] if release_date else "N/A"


def card_view(entry, client):
    return CardView(
        entry_id=entry.id,
        title=entry.title,
        poster_url=client.image_url(entry.poster_path, "medium"),
        rating=format_rating(entry.vote_average),
        genres=client.genre_names(entry.genre_ids),
    )


def entries_frame(entries, client):
    """
    Builds a table of catalog entries for the row's table view.

    Args:
        entries (list[CatalogEntry]): Entries to tabulate.
        client (TMDBClient): Used to resolve genre names.

    Returns:
        pd.DataFrame: Columns Title, Rating, Year and Genres.
    """
    rows = [
        {
            "Title": e.title,
            "Rating": e.vote_average,
            "Year": release_year(e.release_date),
            "Genres": ", ".join(client.genre_names(e.genre_ids)),
        }
        for e in entries
    ]
    df = pd.DataFrame(rows, columns=["Title", "Rating", "Year", "Genres"])
    df.index = range(1, len(df) + 1)
    df.index.name = "#"
    return df


class ViewRenderer:
    """
    Draws catalog entries into named containers of the current page.

    Containers, the loading indicator and the error banner are Streamlit
    placeholders, so showing or clearing them replaces what was there.
    Which view is active (category grid or search results) is kept in
    ``state`` so it survives reruns.
    """

    def __init__(self, client, on_select, state):
        self.client = client
        self.on_select = on_select
        self.state = state
        self.loading = st.empty()
        self.error = st.empty()
        self.containers = {}

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------
    def add_container(self, container_id, title):
        st.subheader(title)
        self.containers[container_id] = st.empty()
        return self.containers[container_id]

    def render_list(self, container_id, entries):
        """
        Clears the container and fills it with one card per entry.

        Args:
            container_id (str): Name given to ``add_container``.
            entries (list[CatalogEntry]): Entries to draw.
        """
        slot = self.containers.get(container_id)
        if slot is None:
            return

        slot.empty()
        with slot.container():
            if not entries:
                st.info(NO_MOVIES)
                return

            for start in range(0, len(entries), CARDS_PER_ROW):
                cols = st.columns(CARDS_PER_ROW)
                for col, entry in zip(cols, entries[start:start + CARDS_PER_ROW]):
                    with col:
                        self.render_card(container_id, card_view(entry, self.client))

            with st.expander("View as table"):
                st.dataframe(
                    entries_frame(entries, self.client),
                    column_config={
                        "Rating": st.column_config.NumberColumn(format="%.1f"),
                    },
                    width="stretch",
                )

    def render_card(self, container_id, card):
        if card.poster_url:
            st.image(card.poster_url, width="stretch")
        else:
            st.markdown(
                f"<div style='font-size:4rem;text-align:center'>{PLACEHOLDER_GLYPH}</div>",
                unsafe_allow_html=True,
            )
        st.markdown(f"**{card.title}**")
        st.caption(f"⭐ {card.rating}  ·  {', '.join(card.genres)}")
        st.button(
            "Details",
            key=f"{container_id}_{card.entry_id}",
            on_click=self.on_select,
            args=(card.entry_id,),
            width="stretch",
        )

    # ------------------------------------------------------------------
    # Loading / error banners
    # ------------------------------------------------------------------
    def show_loading(self):
        self.loading.info("⏳ Loading movies...")

    def hide_loading(self):
        self.loading.empty()

    def show_error(self, message):
        self.error.error(message)

    def hide_error(self):
        self.error.empty()

    # ------------------------------------------------------------------
    # Search results vs. category grid
    # ------------------------------------------------------------------
    @property
    def search_query(self):
        return self.state.get("search_query")

    def show_search_results(self, query):
        self.state["search_query"] = query
        if SEARCH_CONTAINER not in self.containers:
            st.markdown(f"Search results for: **{query}**")
            self.add_container(SEARCH_CONTAINER, "📋 Search Results")

    def hide_search_results(self):
        self.state["search_query"] = None
