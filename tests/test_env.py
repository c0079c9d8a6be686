import pytest

from bookshelf.env import Environment, which


def test_production_is_recognised():
    assert which({"ENV": "production"}) is Environment.PRODUCTION


def test_development_is_recognised():
    assert which({"ENV": "development"}) is Environment.DEVELOPMENT


def test_missing_variable_gives_default():
    assert which({}) is Environment.DEVELOPMENT


@pytest.mark.parametrize("value", ["Production", "PRODUCTION", "prod", ""])
def test_unknown_value_gives_default(value):
    assert which({"ENV": value}) is Environment.DEVELOPMENT


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    assert which() is Environment.PRODUCTION


@pytest.mark.parametrize("member", list(Environment))
def test_lowercase_name_selects_member(member):
    assert which({"ENV": member.name.lower()}) is member