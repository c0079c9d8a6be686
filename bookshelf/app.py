"""Application assembly and the server entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import time
from collections.abc import Mapping, Sequence

import uvicorn
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from bookshelf.config import AppConfig
from bookshelf.database import connect_database_with
from bookshelf.env import Environment, which
from bookshelf.errors import AppError
from bookshelf.registry import AppRegistry
from bookshelf.routes import build_book_routes, build_health_check_routes

logger = logging.getLogger(__name__)

HOST = "127.0.0.1"
PORT = 8080

_DEFAULT_LEVELS = {
    Environment.DEVELOPMENT: logging.DEBUG,
    Environment.PRODUCTION: logging.INFO,
}
_LOG_FORMAT = "%(asctime)s %(levelname)s %(pathname)s:%(lineno)d: %(message)s"


class _AccessLogMiddleware(BaseHTTPMiddleware):
    """Logs each request and its latency in milliseconds."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        logger.info("started processing request %s %s", request.method, request.url.path)
        response = await call_next(request)
        latency_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "finished processing request %s %s status=%d latency=%.0f ms",
            request.method,
            request.url.path,
            response.status_code,
            latency_ms,
        )
        return response


def _handle_app_error(request: Request, exc: Exception) -> Response:
    if isinstance(exc, AppError):
        return exc.to_response()
    raise exc


def create_app(registry: AppRegistry) -> Starlette:
    """Build the web application around a registry."""
    app = Starlette(
        routes=[*build_health_check_routes(), *build_book_routes()],
        middleware=[Middleware(_AccessLogMiddleware)],
        exception_handlers={AppError: _handle_app_error},
    )
    app.state.registry = registry
    return app


def init_logger(environ: Mapping[str, str] | None = None) -> int:
    """Configure root logging and return the chosen level.

    The level follows the environment (debug in development, info in
    production) unless LOG_LEVEL names a valid level.
    """
    env = os.environ if environ is None else environ
    level = _DEFAULT_LEVELS[which(env)]
    override = env.get("LOG_LEVEL")
    if override:
        named = logging.getLevelName(override.strip().upper())
        if isinstance(named, int):
            level = named
    logging.basicConfig(level=level, format=_LOG_FORMAT, force=True)
    return level


def main(argv: Sequence[str] | None = None) -> int:
    """Run the HTTP server; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="bookshelf",
        description="Serve the bookshelf HTTP API. Configuration comes from the environment.",
    )
    parser.parse_args(argv)

    init_logger()
    try:
        config = AppConfig.from_env()
    except KeyError as exc:
        logger.error("Missing configuration variable: %s", exc)
        return 1
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    pool = connect_database_with(config.database)
    asyncio.run(pool.init_schema())
    app = create_app(AppRegistry(pool))

    logger.info("Listening on %s:%d", HOST, PORT)
    try:
        uvicorn.run(app, host=HOST, port=PORT, log_config=None)
    except Exception:
        logger.exception("Unexpected error happened in server")
        return 1
    return 0