from movie_browser.models import Account, CatalogEntry, Session


def test_catalog_entry_from_summary_payload():
    entry = CatalogEntry.from_api({
        "id": 550,
        "title": "Fight Club",
        "poster_path": "/fc.jpg",
        "vote_average": 8.4,
        "release_date": "1999-10-15",
        "overview": "An insomniac office worker...",
        "genre_ids": [18],
    })

    assert entry.id == 550
    assert entry.genre_ids == [18]
    assert entry.runtime is None
    assert entry.genres == []


def test_catalog_entry_blank_fields_become_none():
    entry = CatalogEntry.from_api({
        "id": 1, "title": "Draft", "poster_path": None, "vote_average": 0,
        "release_date": "", "overview": "", "runtime": 0,
    })

    assert entry.poster_path is None
    assert entry.vote_average is None
    assert entry.release_date is None
    assert entry.overview is None
    assert entry.runtime is None
    assert entry.genre_ids == []


def test_account_round_trip_and_session_projection():
    data = {"id": 1, "name": "Ana", "email": "ana@x.com", "password": "tok",
            "createdAt": "2024-01-01T00:00:00+00:00"}
    account = Account.from_dict(data)

    assert account.to_dict() == data
    assert account.to_session() == Session(id=1, name="Ana", email="ana@x.com")
    assert Session.from_dict(account.to_session().to_dict()) == account.to_session()
