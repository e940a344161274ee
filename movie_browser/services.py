from dataclasses import dataclass

from movie_browser.auth import CredentialStore
from movie_browser.config import DB_PATH
from movie_browser.storage import KeyValueStore
from movie_browser.tmdb import TMDBClient


@dataclass
class Services:
    """The application's components, built once and handed to the pages."""

    store: KeyValueStore
    credentials: CredentialStore
    client: TMDBClient


def build_services(db_path=DB_PATH, api_key=None, session=None):
    """
    Wires the storage, credential store and catalog client together.

    Args:
        db_path (str): SQLite file backing the key-value store.
        api_key (str): TMDB key; defaults to the configured one.
        session: Optional HTTP session for the catalog client.

    Returns:
        Services: The constructed components.
    """
    store = KeyValueStore(db_path)
    return Services(
        store=store,
        credentials=CredentialStore(store),
        client=TMDBClient(api_key=api_key, session=session),
    )
