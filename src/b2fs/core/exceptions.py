"""Exception hierarchy for b2fs."""


class B2FSError(Exception):
    """Base exception for all b2fs errors."""

    pass


class ValidationError(B2FSError):
    """Raised when validation fails."""

    pass


class InvalidQueryError(ValidationError):
    """Raised when a listing query falls outside the supported matching cases."""

    pass


class StorageOperationError(B2FSError):
    """Raised when a call to the storage service fails."""

    pass


class ObjectNotFoundError(StorageOperationError):
    """Raised when an object key does not exist in the bucket."""

    pass


class UnsupportedOperationError(B2FSError):
    """Raised for filesystem operations B2 has no equivalent for."""

    pass
