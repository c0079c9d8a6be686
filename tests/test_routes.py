import asyncio
from http import HTTPStatus

from starlette.applications import Starlette
from starlette.testclient import TestClient

from bookshelf import handlers
from bookshelf.database import ConnectionPool
from bookshelf.registry import AppRegistry
from bookshelf.routes import build_book_routes, build_health_check_routes


def test_book_routes_map_methods_to_handlers():
    table = {
        (route.path, method): route.endpoint
        for route in build_book_routes()
        for method in route.methods
    }
    assert table[("/books", "POST")] is handlers.register_book
    assert table[("/books", "GET")] is handlers.show_book_list
    assert table[("/books/{book_id}", "GET")] is handlers.show_book
    assert ("/books/{book_id}", "POST") not in table


def test_health_routes_map_to_handlers():
    endpoints = {route.path: route.endpoint for route in build_health_check_routes()}
    assert endpoints == {
        "/health": handlers.health_check,
        "/health/db": handlers.health_check_db,
    }


def test_health_routes_serve_requests(tmp_path):
    pool = ConnectionPool(tmp_path / "books.sqlite3")
    asyncio.run(pool.init_schema())
    app = Starlette(routes=build_health_check_routes())
    app.state.registry = AppRegistry(pool)
    client = TestClient(app)

    assert client.get("/health").status_code == HTTPStatus.OK
    assert client.get("/health/db").status_code == HTTPStatus.OK
    assert client.post("/health").status_code == HTTPStatus.METHOD_NOT_ALLOWED


def test_book_routes_serve_list(tmp_path):
    pool = ConnectionPool(tmp_path / "books.sqlite3")
    asyncio.run(pool.init_schema())
    app = Starlette(routes=build_book_routes())
    app.state.registry = AppRegistry(pool)
    client = TestClient(app)

    response = client.get("/books")
    assert response.status_code == HTTPStatus.OK
    assert response.json() == []