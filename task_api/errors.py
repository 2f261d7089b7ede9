"""Errors raised by the task, comment and profile services.

Routers translate these into HTTP responses; services never retry.
"""


class TaskApiError(Exception):
    """Base class for all service-level errors."""


class ValidationError(TaskApiError):
    """Malformed input that must be rejected before reaching the store."""


class InvalidIdentifierError(ValidationError):
    def __init__(self, value: str):
        super().__init__(f"invalid identifier: {value!r}")
        self.value = value


class NotFoundError(TaskApiError):
    """A single-entity read matched no document."""


class PersistenceError(TaskApiError):
    """Any store, network or decode failure."""


class StoreTimeoutError(PersistenceError):
    """The store did not answer before the operation deadline."""


class IdentifierDecodeError(TaskApiError):
    """The store acknowledged an insert without an ObjectId."""
