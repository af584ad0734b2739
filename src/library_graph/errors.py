"""Exception types shared by the store and the GraphQL layer."""


class LibraryError(Exception):
    """Base exception for library operations."""

    pass


class ValidationError(LibraryError):
    """A mutation or lookup was invoked without a required argument."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class StoreError(LibraryError):
    """The backing store is unreachable or rejected an operation.

    Distinct from a lookup that found nothing, which is reported as None.
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
