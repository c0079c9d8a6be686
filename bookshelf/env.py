"""Detection of the runtime environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum


class Environment(Enum):
    """The environment the application runs in."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"


def _default_environment() -> Environment:
    return Environment.DEVELOPMENT if __debug__ else Environment.PRODUCTION


def which(environ: Mapping[str, str] | None = None) -> Environment:
    """Return the environment named by ENV, or the build default."""
    env = os.environ if environ is None else environ
    default = _default_environment()
    value = env.get("ENV")
    if value is None:
        return default
    try:
        return Environment(value)
    except ValueError:
        return default