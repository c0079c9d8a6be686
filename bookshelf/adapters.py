"""SQLite-backed repository implementations."""

from __future__ import annotations

import sqlite3
import uuid

from bookshelf.database import ConnectionPool
from bookshelf.errors import SpecificOperationError
from bookshelf.ids import BookId
from bookshelf.models import Book, BookRow, CreateBook
from bookshelf.repository import BookRepository, HealthCheckRepository

_INSERT_BOOK = """
    INSERT INTO books (book_id, title, author, isbn, description)
    VALUES (?, ?, ?, ?, ?)
"""

_SELECT_BOOKS = """
    SELECT book_id, title, author, isbn, description
    FROM books
    ORDER BY created_at DESC, rowid DESC
"""

_SELECT_BOOK = """
    SELECT book_id, title, author, isbn, description
    FROM books
    WHERE book_id = ?
"""


def _row_to_book(row: sqlite3.Row) -> Book:
    return BookRow(
        book_id=BookId(uuid.UUID(row["book_id"])),
        title=row["title"],
        author=row["author"],
        isbn=row["isbn"],
        description=row["description"],
    ).into_book()


class BookRepositoryImpl(BookRepository):
    """Book storage in the books table."""

    def __init__(self, db: ConnectionPool) -> None:
        self._db = db

    async def create(self, event: CreateBook) -> None:
        book_id = BookId.new()
        params = (str(book_id.value), event.title, event.author, event.isbn, event.description)
        try:
            async with self._db.connect() as conn:
                await conn.execute(_INSERT_BOOK, params)
                await conn.commit()
        except sqlite3.Error as exc:
            raise SpecificOperationError(exc) from exc

    async def find_all(self) -> list[Book]:
        try:
            async with self._db.connect() as conn:
                rows = await conn.execute_fetchall(_SELECT_BOOKS)
        except sqlite3.Error as exc:
            raise SpecificOperationError(exc) from exc
        return [_row_to_book(row) for row in rows]

    async def find_by_id(self, book_id: BookId) -> Book | None:
        try:
            async with self._db.connect() as conn:
                async with conn.execute(_SELECT_BOOK, (str(book_id.value),)) as cursor:
                    row = await cursor.fetchone()
        except sqlite3.Error as exc:
            raise SpecificOperationError(exc) from exc
        return None if row is None else _row_to_book(row)


class HealthCheckRepositoryImpl(HealthCheckRepository):
    """Checks that the database can be queried."""

    def __init__(self, db: ConnectionPool) -> None:
        self._db = db

    async def check_db(self) -> bool:
        try:
            async with self._db.connect() as conn:
                async with conn.execute("SELECT 1") as cursor:
                    return await cursor.fetchone() is not None
        except (sqlite3.Error, OSError):
            return False