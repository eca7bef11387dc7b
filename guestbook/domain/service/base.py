"""Base service class for domain services."""


class Service:
    """Base class for guestbook domain services.

    Services hold the rules of the login flow and the guestbook and reach
    storage only through repository interfaces. They are built per request.
    """
