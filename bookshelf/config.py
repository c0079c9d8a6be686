"""Application configuration read from the process environment."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

_PORT_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_PORT = 65535


@dataclass(frozen=True)
class DatabaseConfig:
    """Where and how to reach the database."""

    host: str
    port: int
    username: str
    password: str = field(repr=False)
    database: str


def _parse_port(raw: str) -> int:
    if not _PORT_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid port number: {raw!r}")
    port = int(raw)
    if port > _MAX_PORT:
        raise ValueError(f"port number out of range: {raw!r}")
    return port


@dataclass(frozen=True)
class AppConfig:
    """Top-level application settings."""

    database: DatabaseConfig

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Build the configuration from environment variables.

        Raises KeyError for a missing variable and ValueError for a bad port.
        """
        env = os.environ if environ is None else environ
        database = DatabaseConfig(
            host=env["DATABASE_HOST"],
            port=_parse_port(env["DATABASE_PORT"]),
            username=env["DATABASE_USERNAME"],
            password=env["DATABASE_PASSWORD"],
            database=env["DATABASE_NAME"],
        )
        return cls(database=database)