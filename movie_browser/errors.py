class MovieBrowserError(Exception):
    """
    Base class for every error raised by the application.

    Carries a user-facing ``message``. Details meant only for the logs
    belong in the exception chain, never in the message.
    """

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(MovieBrowserError):
    """Input had the wrong shape (empty field, bad email, short password)."""

    def __init__(self, message, field=None):
        super().__init__(message)
        self.field = field


class DuplicateEmailError(MovieBrowserError):
    pass


class NotFoundError(MovieBrowserError):
    pass


class InvalidCredentialsError(MovieBrowserError):
    pass


class CatalogError(MovieBrowserError):
    """A catalog request could not be completed."""


class TransportError(CatalogError):
    pass


class ApiError(CatalogError):
    """The catalog API answered with a non-2xx status."""

    def __init__(self, message, status_code):
        super().__init__(message)
        self.status_code = status_code
