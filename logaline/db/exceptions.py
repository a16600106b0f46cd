"""Draft store exceptions."""


class StoreError(Exception):
    """Base exception for draft store errors."""

    pass


class StoreInitError(StoreError):
    """Raised when the store cannot be opened or its schema initialized."""

    pass


class StoreReadError(StoreError):
    """Raised when reading a draft fails."""

    pass


class StoreWriteError(StoreError):
    """Raised when writing a draft fails."""

    pass
