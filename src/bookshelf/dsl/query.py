# ABOUTME: Fluent lookup-then-update expressions over a BookGateway.
# ABOUTME: Resolves exactly one filter predicate, then writes each chained setter through immediately.

import logging
from collections.abc import Callable

from bookshelf.db.gateway import BookGateway
from bookshelf.db.mapping import BookRecord
from bookshelf.errors import NotFoundError, StorageError, UsageError

logger = logging.getLogger(__name__)


class BookFilter:
    """Collects a single filter predicate and holds the book it resolves to.

    Each predicate method looks the book up as soon as it is called. Only one
    may be called per filter; a second call raises UsageError before touching
    the database or the held result.
    """

    def __init__(self, gateway: BookGateway) -> None:
        self._gateway = gateway
        self.field: str | None = None
        self.value: str | None = None
        self.result: BookRecord | None = None

    def _lookup(self, field: str, value: str) -> None:
        if self.field is not None:
            raise UsageError(
                f"Only one filter may be used at a time. Already filtered by "
                f"'{self.field}', cannot also use '{field}'."
            )
        self.field = field
        self.value = value
        self.result = self._gateway.find_by_field(field, value)

    def publisher_id(self, value: str) -> None:
        self._lookup("publisher_id", value)

    def title(self, value: str) -> None:
        self._lookup("title", value)

    def author(self, value: str) -> None:
        self._lookup("author", value)

    def file_path(self, value: str) -> None:
        self._lookup("file_path", value)


class BookUpdater:
    """Applies field changes to one resolved book, persisting each before returning.

    Setters return the updater so they can be chained. Nothing is batched: if a
    setter fails, the ones before it stay committed and the rest never run.
    """

    def __init__(self, gateway: BookGateway, book: BookRecord) -> None:
        self._gateway = gateway
        self._book = book

    @property
    def book(self) -> BookRecord:
        return self._book

    def _check(self, operation: str, affected: int) -> "BookUpdater":
        if affected == 0:
            raise StorageError(operation, f"book {self._book.id} no longer exists")
        return self

    def title(self, value: str) -> "BookUpdater":
        self._book.title = value
        return self._check("update_title", self._gateway.update_title(self._book.id, value))

    def author(self, value: str | None) -> "BookUpdater":
        self._book.author = value
        return self._check("update_author", self._gateway.update_author(self._book.id, value))

    def file_path(self, value: str | None) -> "BookUpdater":
        self._book.file_path = value
        return self._check(
            "update_file_path", self._gateway.update_file_path(self._book.id, value)
        )

    def publisher_id(self, value: str | None) -> "BookUpdater":
        self._book.publisher_id = value
        return self._check(
            "update_publisher_id", self._gateway.update_publisher_id(self._book.id, value)
        )

    def is_read(self, value: bool) -> "BookUpdater":
        self._book.is_read = value
        return self._write_status()

    def is_favorite(self, value: bool) -> "BookUpdater":
        self._book.is_favorite = value
        return self._write_status()

    def _write_status(self) -> "BookUpdater":
        # Both flags share one statement, so the untouched one is re-sent as held.
        affected = self._gateway.update_status(
            self._book.id, self._book.is_read, self._book.is_favorite
        )
        return self._check("update_status", affected)


class BookSetter:
    """A resolved book waiting for its update block."""

    def __init__(self, gateway: BookGateway, book: BookRecord) -> None:
        self._gateway = gateway
        self._book = book

    @property
    def record(self) -> BookRecord:
        return self._book

    def set(self, updates: Callable[[BookUpdater], object]) -> BookUpdater:
        """Run ``updates`` against an updater bound to the resolved book."""
        updater = BookUpdater(self._gateway, self._book)
        updates(updater)
        return updater


class BookQuery:
    """Entry point of one expression, bound to an explicit gateway."""

    def __init__(self, gateway: BookGateway) -> None:
        self._gateway = gateway

    def where(self, criteria: Callable[[BookFilter], object]) -> BookSetter:
        """Resolve the book selected by ``criteria``.

        Raises:
            UsageError: If the block calls more than one predicate, or none.
            NotFoundError: If the predicate matched no book.
        """
        book_filter = BookFilter(self._gateway)
        criteria(book_filter)

        if book_filter.field is None:
            raise UsageError("A filter block must use exactly one predicate.")
        if book_filter.result is None:
            raise NotFoundError(book_filter.field, book_filter.value)

        logger.debug(
            "Resolved %s=%r to book %s", book_filter.field, book_filter.value, book_filter.result.id
        )
        return BookSetter(self._gateway, book_filter.result)


def book(gateway: BookGateway) -> BookQuery:
    """Start an expression against ``gateway``.

    Example::

        book(gateway).where(lambda f: f.publisher_id("AB-1004")).set(
            lambda u: u.title("Some Title").is_read(True)
        )
    """
    if gateway is None:
        raise TypeError("book() requires an explicit BookGateway")
    return BookQuery(gateway)
