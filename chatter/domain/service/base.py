"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services open a logfire span per operation, named
    ``<service>.<operation>``, with identifiers recorded as strings.
    """
