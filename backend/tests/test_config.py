"""Settings — environment-driven configuration."""

from hackerhire.config import Settings


def test_defaults_use_memory_storage():
    settings = Settings(_env_file=None)
    assert settings.storage_backend == "memory"
    assert settings.seed_admin_users is True


def test_postgres_url_converted_to_asyncpg():
    settings = Settings(database_url="postgresql://u:p@db:5432/hackerhire")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/hackerhire"


def test_env_override(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "sql")
    monkeypatch.setenv("SESSION_MAX_AGE_SECONDS", "60")
    settings = Settings(_env_file=None)
    assert settings.storage_backend == "sql"
    assert settings.session_max_age_seconds == 60
