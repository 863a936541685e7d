class ServiceError(Exception):
    """Base exception for service layer failures."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ValidationError(ServiceError):
    """Raised when caller input breaks one of the field rules."""


class NotFoundError(ServiceError):
    """Raised when a lookup by identifier finds nothing."""


class StorageError(ServiceError):
    """Base class for failures of the underlying document storage."""

    def __init__(self, message: str, key: str | None = None, *, cause: Exception | None = None):
        super().__init__(message, cause=cause)
        self.key = key


class CorruptDataError(StorageError):
    """Raised when a stored document is not valid JSON.

    The file is left untouched so it can be inspected and repaired by hand.
    """


class StorageIOError(StorageError):
    """Raised when reading or writing a document fails at the OS level."""
