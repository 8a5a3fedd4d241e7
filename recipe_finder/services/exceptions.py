"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class FetchFailure(ServiceError):
    """The search request could not be completed (transport, HTTP status)."""


class ParseError(FetchFailure):
    """The response body does not have the expected shape."""
