"""Typed identifiers backed by UUIDs."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import TypeVar

from bookshelf.errors import ConvertToUuidError

_IdT = TypeVar("_IdT", bound="EntityId")


@dataclass(frozen=True)
class EntityId:
    """A UUID-based identifier; subclasses never compare equal to each other."""

    value: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def new(cls: type[_IdT]) -> _IdT:
        """Create a fresh random identifier."""
        return cls(uuid.uuid4())

    @classmethod
    def parse(cls: type[_IdT], text: str) -> _IdT:
        """Parse an identifier, raising ConvertToUuidError on bad input."""
        try:
            return cls(uuid.UUID(text))
        except (ValueError, TypeError, AttributeError) as exc:
            raise ConvertToUuidError(exc) from exc

    def __str__(self) -> str:
        return self.value.hex


@dataclass(frozen=True)
class UserId(EntityId):
    """Identifier of a user."""


@dataclass(frozen=True)
class BookId(EntityId):
    """Identifier of a book."""


@dataclass(frozen=True)
class CheckoutId(EntityId):
    """Identifier of a checkout."""