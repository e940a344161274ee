from movie_browser.tokens import Generation


def test_only_latest_token_is_current():
    state = {}
    search = Generation(state, "search")

    first = search.next()
    second = search.next()

    assert not search.is_current(first)
    assert search.is_current(second)


def test_generations_are_independent_and_kept_in_state():
    state = {}
    search = Generation(state, "search")
    detail = Generation(state, "detail")

    token = search.next()
    detail.next()

    assert search.is_current(token)
    assert Generation(state, "search").is_current(token)
