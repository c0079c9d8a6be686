"""Request and response bodies of the book API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from bookshelf.errors import UnprocessableEntityError
from bookshelf.ids import BookId
from bookshelf.models import Book, CreateBook


@dataclass(frozen=True)
class CreateBookRequest:
    """Body of a request to register a book."""

    title: str
    author: str
    isbn: str
    description: str

    @classmethod
    def from_json(cls, data: Any) -> CreateBookRequest:
        """Build a request from decoded JSON.

        Raises UnprocessableEntityError when the data is not an object or a
        field is missing or not a string. Unknown fields are ignored.
        """
        if not isinstance(data, Mapping):
            raise UnprocessableEntityError("invalid type: expected a JSON object")
        values: dict[str, str] = {}
        for spec in fields(cls):
            if spec.name not in data:
                raise UnprocessableEntityError(f"missing field `{spec.name}`")
            value = data[spec.name]
            if not isinstance(value, str):
                raise UnprocessableEntityError(
                    f"invalid type for field `{spec.name}`: expected a string"
                )
            values[spec.name] = value
        return cls(**values)

    def into_event(self) -> CreateBook:
        """Turn the request into a domain event."""
        return CreateBook(
            title=self.title,
            author=self.author,
            isbn=self.isbn,
            description=self.description,
        )


@dataclass(frozen=True)
class BookResponse:
    """A book as returned by the API."""

    id: BookId
    title: str
    author: str
    isbn: str
    description: str

    @classmethod
    def from_book(cls, book: Book) -> BookResponse:
        """Build the response body for a domain book."""
        return cls(
            id=book.id,
            title=book.title,
            author=book.author,
            isbn=book.isbn,
            description=book.description,
        )

    def to_json(self) -> dict[str, str]:
        """Return the body as a JSON-ready mapping with camelCase keys."""
        return {
            "id": str(self.id),
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "description": self.description,
        }