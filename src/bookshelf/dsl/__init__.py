# ABOUTME: Public API for the Bookshelf lookup-then-update expression engine.
# ABOUTME: Exports the book() entry point and the filter, setter, and updater types.

from bookshelf.dsl.query import BookFilter, BookQuery, BookSetter, BookUpdater, book

__all__ = [
    "BookFilter",
    "BookQuery",
    "BookSetter",
    "BookUpdater",
    "book",
]
