class Generation:
    """
    Monotonic request counter kept in a session-state mapping.

    Each new request takes a fresh token; a response is applied only while
    its token is still the latest one, so answers to superseded searches or
    detail lookups are dropped.
    """

    def __init__(self, state, name):
        self.state = state
        self.key = f"_generation_{name}"

    @property
    def current(self):
        return self.state.get(self.key, 0)

    def next(self):
        token = self.current + 1
        self.state[self.key] = token
        return token

    def is_current(self, token):
        return token == self.current
