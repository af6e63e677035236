"""Domain errors raised by the management services."""


class StoreHiveServiceError(Exception):
    """Base class for errors a router translates into an HTTP status."""


class RequestedResourceNotFoundError(StoreHiveServiceError):
    """Raised when the requested entity (or a referenced parent) does not exist."""


class RequestedResourceHasConflictError(StoreHiveServiceError):
    """Raised when a code is already taken or a purge precondition fails."""
