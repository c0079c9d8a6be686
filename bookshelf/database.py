"""Database connection handling."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiosqlite

from bookshelf.config import DatabaseConfig

_SCHEMA = """
CREATE TABLE IF NOT EXISTS books (
    book_id TEXT PRIMARY KEY NOT NULL,
    title TEXT NOT NULL,
    author TEXT NOT NULL,
    isbn TEXT NOT NULL,
    description TEXT NOT NULL,
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%d %H:%M:%f', 'now')),
    updated_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%d %H:%M:%f', 'now'))
);
"""


class ConnectionPool:
    """Opens connections to a SQLite database file on demand."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)

    def __repr__(self) -> str:
        return f"ConnectionPool({self.path!r})"

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[aiosqlite.Connection]:
        """Open a connection whose rows can be read by column name."""
        async with aiosqlite.connect(self.path) as conn:
            conn.row_factory = aiosqlite.Row
            yield conn

    async def init_schema(self) -> None:
        """Create the tables if they do not exist yet."""
        async with self.connect() as conn:
            await conn.executescript(_SCHEMA)
            await conn.commit()


def connect_database_with(cfg: DatabaseConfig) -> ConnectionPool:
    """Make a pool for the configured database; nothing is opened yet."""
    return ConnectionPool(cfg.database)