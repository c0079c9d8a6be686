import pytest

from bookshelf.config import AppConfig, DatabaseConfig


def _environ(**overrides):
    env = {
        "DATABASE_HOST": "localhost",
        "DATABASE_PORT": "5432",
        "DATABASE_USERNAME": "app",
        "DATABASE_PASSWORD": "password",
        "DATABASE_NAME": "app",
    }
    env.update(overrides)
    return env


def test_from_env_reads_all_fields():
    config = AppConfig.from_env(_environ())
    password = "password"
    assert config.database == DatabaseConfig(
        host="localhost",
        port=5432,
        username="app",
        password=password,
        database="app",
    )


def test_from_env_uses_process_environment(monkeypatch):
    for key, value in _environ(DATABASE_NAME="books.db").items():
        monkeypatch.setenv(key, value)
    config = AppConfig.from_env()
    assert config.database.database == "books.db"
    assert config.database.port == 5432


@pytest.mark.parametrize(
    "missing",
    [
        "DATABASE_HOST",
        "DATABASE_PORT",
        "DATABASE_USERNAME",
        "DATABASE_PASSWORD",
        "DATABASE_NAME",
    ],
)
def test_missing_variable_raises_key_error(missing):
    env = _environ()
    del env[missing]
    with pytest.raises(KeyError) as info:
        AppConfig.from_env(env)
    assert info.value.args[0] == missing


@pytest.mark.parametrize("port", ["abc", "", "-1", "65536", " 80", "8.0"])
def test_bad_port_raises_value_error(port):
    with pytest.raises(ValueError):
        AppConfig.from_env(_environ(DATABASE_PORT=port))


def test_password_is_hidden_from_repr():
    config = AppConfig.from_env(_environ())
    assert "password=" not in repr(config.database)
    assert "host='localhost'" in repr(config.database)