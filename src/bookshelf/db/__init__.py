# ABOUTME: Public API for the Bookshelf database layer.
# ABOUTME: Exports the storage gateway, connection management, and the BookRecord type.

from bookshelf.db.connection import open_library
from bookshelf.db.gateway import LOOKUP_COLUMNS, BookGateway
from bookshelf.db.mapping import BookRecord

__all__ = [
    "LOOKUP_COLUMNS",
    "BookGateway",
    "BookRecord",
    "open_library",
]
