from movie_browser.storage import KeyValueStore


def test_missing_key_reads_none(store):
    assert store.get("netflix_users") is None


def test_values_round_trip_as_json(store):
    store.set("netflix_users", [{"id": 1, "email": "ana@x.com"}])
    assert store.get("netflix_users") == [{"id": 1, "email": "ana@x.com"}]


def test_set_overwrites_and_remove_deletes(store):
    store.set("k", {"a": 1})
    store.set("k", {"a": 2})
    assert store.get("k") == {"a": 2}

    store.remove("k")
    assert store.get("k") is None


def test_values_survive_a_new_store_on_the_same_file(tmp_path):
    path = str(tmp_path / "nested" / "kv.db")
    KeyValueStore(path).set("netflix_current_user", {"id": 7})

    assert KeyValueStore(path).get("netflix_current_user") == {"id": 7}


def test_store_offers_no_bulk_clear(store):
    assert not hasattr(store, "clear")
