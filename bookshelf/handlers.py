"""HTTP handlers for books and health checks."""

from __future__ import annotations

import json
from typing import Any

from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from bookshelf.api_models import BookResponse, CreateBookRequest
from bookshelf.errors import EntityNotFoundError
from bookshelf.ids import BookId
from bookshelf.registry import AppRegistry


def _registry(request: Request) -> AppRegistry:
    return request.app.state.registry


def _is_json_mime(content_type: str) -> bool:
    mime = content_type.split(";", 1)[0].strip().lower()
    return mime == "application/json" or (
        mime.startswith("application/") and mime.endswith("+json")
    )


async def _read_json(request: Request) -> Any:
    if not _is_json_mime(request.headers.get("content-type", "")):
        raise HTTPException(
            status_code=415,
            detail="Expected request with `Content-Type: application/json`",
        )
    body = await request.body()
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise HTTPException(
            status_code=400,
            detail=f"Failed to parse the request body as JSON: {exc}",
        ) from exc


async def register_book(request: Request) -> Response:
    """Store the book described by the JSON body; answer 201."""
    book_request = CreateBookRequest.from_json(await _read_json(request))
    await _registry(request).book_repository.create(book_request.into_event())
    return Response(status_code=201)


async def show_book_list(request: Request) -> Response:
    """Return every book, newest first."""
    books = await _registry(request).book_repository.find_all()
    return JSONResponse([BookResponse.from_book(book).to_json() for book in books])


async def show_book(request: Request) -> Response:
    """Return one book by its id, or 404."""
    book_id = BookId.parse(request.path_params["book_id"])
    book = await _registry(request).book_repository.find_by_id(book_id)
    if book is None:
        raise EntityNotFoundError("not found")
    return JSONResponse(BookResponse.from_book(book).to_json())


async def health_check(request: Request) -> Response:
    """Answer 200 while the server runs."""
    return Response(status_code=200)


async def health_check_db(request: Request) -> Response:
    """Answer 200 when the database responds, else 500."""
    healthy = await _registry(request).health_check_repository.check_db()
    return Response(status_code=200 if healthy else 500)