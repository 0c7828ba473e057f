# ABOUTME: SQL DDL statements for the Bookshelf catalog database.
# ABOUTME: Defines the single books table and its publisher_id index.

SCHEMA = """
-- Core book catalog table
CREATE TABLE books (
    id            INTEGER PRIMARY KEY AUTOINCREMENT,
    title         TEXT NOT NULL,
    author        TEXT,
    file_path     TEXT,
    publisher_id  TEXT,
    is_read       BOOLEAN DEFAULT FALSE,
    is_favorite   BOOLEAN DEFAULT FALSE
);

CREATE INDEX idx_books_publisher_id ON books(publisher_id);
"""
