"""Tagged failures raised by the catalog client and the record store.

Handlers pick the HTTP status from the exception class, never from the
message text:

- NotFoundError       -> 404
- ConflictError       -> 409
- UnavailableError    -> 503
- ConfigurationError  -> 500 (details hidden in production)
- anything else       -> 500
"""


class ServiceError(Exception):
    """Base class for downstream failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """The downstream dependency confirmed the item does not exist."""


class ConflictError(ServiceError):
    """The store rejected a write because the key already exists."""


class UnavailableError(ServiceError):
    """The dependency could not be reached (connect failure, timeout, reset, AWS error)."""


class ConfigurationError(ServiceError):
    """A required operational setting is missing."""


class CatalogError(ServiceError):
    """The catalog answered, but not with something usable."""
