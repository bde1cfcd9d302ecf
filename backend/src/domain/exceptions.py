"""Domain-level exceptions."""


class StorageError(Exception):
    """Raised by key-value storage adapters when a read or write fails."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key
