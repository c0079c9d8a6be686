"""Domain models for books."""

from __future__ import annotations

from dataclasses import dataclass

from bookshelf.ids import BookId


@dataclass
class Book:
    """A book on the shelf."""

    id: BookId
    title: str
    author: str
    isbn: str
    description: str


@dataclass
class CreateBook:
    """Request to add a new book."""

    title: str
    author: str
    isbn: str
    description: str


@dataclass
class BookRow:
    """A book as stored in the database."""

    book_id: BookId
    title: str
    author: str
    isbn: str
    description: str

    def into_book(self) -> Book:
        """Convert the stored row into a domain book."""
        return Book(
            id=self.book_id,
            title=self.title,
            author=self.author,
            isbn=self.isbn,
            description=self.description,
        )