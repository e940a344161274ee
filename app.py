import logging

import streamlit as st

from movie_browser.config import APP_NAME, LOG_FORMAT, LOG_LEVEL
from movie_browser.routing import DASHBOARD, LOGIN, REGISTER, resolve_route
from movie_browser.services import build_services
from movie_browser.ui.auth import go_to, render_login, render_register
from movie_browser.ui.dashboard import dashboard_page

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, datefmt="%H:%M:%S")


@st.cache_resource
def get_services():
    """
    Builds and caches the application components.

    Returns:
        Services: Storage, credential store and catalog client.
    """
    return build_services()


def main():
    """
    Main entry point for the Streamlit application.

    Sets up the page, then routes to the register, login or dashboard page
    based on the ``page`` query parameter and the stored session,
    redirecting when the user is not allowed on the requested page.
    """
    st.set_page_config(page_title=APP_NAME, page_icon="🎬", layout="wide")
    services = get_services()

    route = resolve_route(
        st.query_params.get("page", ""), services.credentials.is_authenticated()
    )
    if route.redirect:
        go_to(route.redirect)

    st.title(f"🎬 {APP_NAME}")

    if route.role == REGISTER:
        render_register(services.credentials)
    elif route.role == LOGIN:
        render_login(services.credentials)
    elif route.role == DASHBOARD:
        dashboard_page(services)


if __name__ == "__main__":
    main()
