# ABOUTME: Exception types shared across the Bookshelf storage and expression layers.
# ABOUTME: Every failure the core raises is one of these, never a swallowed error.


class BookshelfError(Exception):
    """Base class for all Bookshelf errors."""


class ConnectivityError(BookshelfError):
    """Raised when the database session cannot be opened or is no longer open."""


class UsageError(BookshelfError):
    """Raised when a caller breaks the one-predicate-per-lookup contract."""


class NotFoundError(BookshelfError):
    """Raised when a lookup expression matches no book."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"No book found with {field} = {value!r}")
        self.field = field
        self.value = value


class StorageError(BookshelfError):
    """Raised when a statement fails after being sent to the database."""

    def __init__(self, operation: str, cause: BaseException | str) -> None:
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause


class ConfigError(BookshelfError):
    """Raised when the configuration file is missing or incomplete."""
