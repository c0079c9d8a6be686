"""Repository interfaces used by the application."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookshelf.ids import BookId
from bookshelf.models import Book, CreateBook


class BookRepository(ABC):
    """Storage of books."""

    @abstractmethod
    async def create(self, event: CreateBook) -> None:
        """Store a new book."""

    @abstractmethod
    async def find_all(self) -> list[Book]:
        """Return every book, newest first."""

    @abstractmethod
    async def find_by_id(self, book_id: BookId) -> Book | None:
        """Return the book with this id, or None."""


class HealthCheckRepository(ABC):
    """Checks of backing services."""

    @abstractmethod
    async def check_db(self) -> bool:
        """Return True when the database answers."""