"""Wiring of repositories shared by the request handlers."""

from __future__ import annotations

from bookshelf.adapters import BookRepositoryImpl, HealthCheckRepositoryImpl
from bookshelf.database import ConnectionPool
from bookshelf.repository import BookRepository, HealthCheckRepository


class AppRegistry:
    """Holds the repositories the application uses, all backed by one pool."""

    health_check_repository: HealthCheckRepository
    book_repository: BookRepository

    def __init__(self, pool: ConnectionPool) -> None:
        self.health_check_repository = HealthCheckRepositoryImpl(pool)
        self.book_repository = BookRepositoryImpl(pool)

    def __repr__(self) -> str:
        return (
            f"AppRegistry(health_check_repository={self.health_check_repository!r}, "
            f"book_repository={self.book_repository!r})"
        )