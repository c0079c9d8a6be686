"""URL routes of the API."""

from __future__ import annotations

from starlette.routing import Route

from bookshelf.handlers import (
    health_check,
    health_check_db,
    register_book,
    show_book,
    show_book_list,
)


def build_book_routes() -> list[Route]:
    """Routes under /books."""
    return [
        Route("/books", register_book, methods=["POST"]),
        Route("/books", show_book_list, methods=["GET"]),
        Route("/books/{book_id}", show_book, methods=["GET"]),
    ]


def build_health_check_routes() -> list[Route]:
    """Routes under /health."""
    return [
        Route("/health", health_check, methods=["GET"]),
        Route("/health/db", health_check_db, methods=["GET"]),
    ]