from pathlib import Path

import pytest
from pydantic import ValidationError

from todo_graphql.core.config import Settings


def test_database_url_is_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg2://u:p@db:5432/todo")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("GRAPHIQL", "false")

    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL == "postgresql+psycopg2://u:p@db:5432/todo"
    assert settings.PORT == 9000
    assert settings.GRAPHIQL is False


def test_defaults(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    for name in ("PORT", "DEBUG", "SEED_DB", "SEED_FILE", "GRAPHQL_PATH", "GRAPHIQL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.PORT == 8080
    assert settings.DEBUG is False
    assert settings.SEED_DB is False
    assert settings.SEED_FILE == Path("seed_data.json")
    assert settings.GRAPHQL_PATH == "/graphql"
