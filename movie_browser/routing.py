from dataclasses import dataclass
from typing import Optional

REGISTER = "register"
LOGIN = "login"
DASHBOARD = "dashboard"


@dataclass
class Route:
    """The page to render, or the page to redirect to instead."""

    role: Optional[str]
    redirect: Optional[str] = None


def resolve_route(path, authenticated):
    """
    Picks the page role for *path*.

    Args:
        path (str): Current page path (the ``page`` query parameter).
        authenticated (bool): Whether a session exists.

    Returns:
        Route: ``role`` set when the page can be rendered, ``redirect`` set
        when the user must be sent elsewhere first.
    """
    path = (path or "").lower()

    if REGISTER in path:
        return Route(role=REGISTER)
    if LOGIN in path:
        if authenticated:
            return Route(role=None, redirect=DASHBOARD)
        return Route(role=LOGIN)
    if DASHBOARD in path:
        if not authenticated:
            return Route(role=None, redirect=LOGIN)
        return Route(role=DASHBOARD)

    # Unknown page: send the user wherever they belong
    return Route(role=None, redirect=DASHBOARD if authenticated else LOGIN)
