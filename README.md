# bookshelf

bookshelf is a small HTTP service for keeping a catalogue of books. It serves
a JSON API with Starlette and uvicorn and keeps its data in a SQLite database
file through aiosqlite.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Configuration

At startup the service reads these environment variables:

| Variable            | Meaning                                           |
|---------------------|---------------------------------------------------|
| `DATABASE_HOST`     | database host (required, not used for SQLite)     |
| `DATABASE_PORT`     | database port, 0–65535 (required, not used)       |
| `DATABASE_USERNAME` | database user name (required, not used)           |
| `DATABASE_PASSWORD` | database password (required, not used)            |
| `DATABASE_NAME`     | path of the SQLite database file                  |

All five must be set. If one is missing, or `DATABASE_PORT` is not a number
from 0 to 65535, the service logs the problem and exits with status 1.

`ENV` selects the environment and may be `development` or `production`. An
unset or unknown value falls back to `development`, or to `production` when
Python runs with `-O`. Logging is at `debug` level in development and `info`
level in production. `LOG_LEVEL` (for example `WARNING`) overrides this when
it names a valid logging level.

## Running

```
bookshelf
```

The command creates the `books` table in the database file if it is not
there yet, then serves on `127.0.0.1:8080`. Each request is logged with its
status and latency in milliseconds. The command takes no options apart from
`--help`.

## API

| Method | Path               | Result                                         |
|--------|--------------------|------------------------------------------------|
| GET    | `/health`          | `200` while the server is up                   |
| GET    | `/health/db`       | `200` if the database answers, otherwise `500` |
| POST   | `/books`           | `201` once the book has been stored            |
| GET    | `/books`           | every book, newest first                       |
| GET    | `/books/{book_id}` | one book, or `404` if it does not exist        |

The body of `POST /books` must be sent with `Content-Type: application/json`:

```json
{
  "title": "Test Title",
  "author": "Test Author",
  "isbn": "Test ISBN",
  "description": "Test Description"
}
```

All four fields are required strings. Other keys are ignored. The responses
for errors are:

- `415` when the content type is not JSON
- `400` when the body is not valid JSON
- `422` when the body is not an object, or a field is missing or not a string

A book in a response has the same fields plus `id`. The `id` is a UUID
written as 32 lower-case hexadecimal digits with no hyphens. When you look up
a book, `{book_id}` may be written in any form Python's `uuid.UUID` accepts.
An invalid id gives `400`. Unexpected failures, such as database errors, are
logged and give `500` with an empty body.

## Use as a library

```python
from bookshelf.app import create_app
from bookshelf.config import AppConfig
from bookshelf.database import connect_database_with
from bookshelf.registry import AppRegistry

config = AppConfig.from_env()
pool = connect_database_with(config.database)
# await pool.init_schema() once before serving
app = create_app(AppRegistry(pool))
```

`app` is an ASGI application that any ASGI server can run. The repositories
are available on their own: `bookshelf.adapters.BookRepositoryImpl` with
`create`, `find_all` and `find_by_id`, and
`bookshelf.adapters.HealthCheckRepositoryImpl` with `check_db`. Errors are
raised as subclasses of `bookshelf.errors.AppError`. Each one turns into an
HTTP response with `to_response()`.

## What it does not do

- Storage is a local SQLite file. The service does not connect to a database
  server. The host, port, user name and password are read and checked, but
  they are not used.
- There are no accounts, logins or book checkouts. Books can be created and
  read, but they cannot be changed or deleted.
- The listening address and port are fixed at `127.0.0.1:8080`.