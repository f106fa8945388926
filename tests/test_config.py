import pytest
from pydantic import ValidationError

from rssagg.core.config import Settings
from rssagg.core.database import engine_options


@pytest.mark.parametrize(
    "url,expected",
    [
        ("postgres://u:p@db:5432/rssagg", "postgresql+asyncpg://u:p@db:5432/rssagg"),
        ("postgresql://u:p@db/rssagg?sslmode=disable", "postgresql+asyncpg://u:p@db/rssagg?sslmode=disable"),
        ("postgresql+asyncpg://u:p@db/rssagg", "postgresql+asyncpg://u:p@db/rssagg"),
        ("sqlite+aiosqlite:///rssagg.db", "sqlite+aiosqlite:///rssagg.db"),
    ],
)
def test_db_url_uses_async_driver(url, expected):
    assert Settings(PORT=8080, DB_URL=url).DB_URL == expected


@pytest.mark.parametrize("missing", ["PORT", "DB_URL"])
def test_required_settings(monkeypatch, missing):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DB_URL", "postgres://localhost/rssagg")
    monkeypatch.delenv(missing)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_sqlite_engine_skips_pool_sizing():
    options = engine_options("sqlite+aiosqlite:///rssagg.db")
    assert "pool_size" not in options


def test_postgres_engine_uses_pool_sizing():
    options = engine_options("postgresql+asyncpg://u:p@db/rssagg")
    assert options["pool_pre_ping"] is True
    assert "pool_size" in options


def test_empty_db_url_is_rejected():
    with pytest.raises(ValidationError):
        Settings(PORT=8080, DB_URL="", _env_file=None)
