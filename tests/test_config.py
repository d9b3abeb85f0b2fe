import pytest

from app.crm import create_app
from app.crm.config import load_config, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for k in ("SECRET_KEY", "ENV", "DATABASE_URL", "STORE_BACKEND", "LOG_LEVEL", "CUSTOMERS_API_URL"):
        monkeypatch.delenv(k, raising=False)


def test_defaults():
    s = load_settings()
    assert s.env == "development"
    assert s.database_url == "sqlite:///customers.db"
    assert s.store_backend == "database"
    assert s.log_level == "INFO"
    assert s.customers_api_url == "http://localhost:3333"


def test_env_overrides_are_normalized(monkeypatch):
    monkeypatch.setenv("STORE_BACKEND", "  Memory ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg["STORE_BACKEND"] == "memory"
    assert cfg["LOG_LEVEL"] == "DEBUG"


def test_unknown_store_backend_rejected(monkeypatch):
    monkeypatch.setenv("STORE_BACKEND", "redis")
    with pytest.raises(RuntimeError, match="STORE_BACKEND"):
        load_config()


def test_production_requires_postgres(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "a-strong-secret")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///prod.db")
    with pytest.raises(RuntimeError, match="Postgres"):
        create_app()


def test_production_requires_secret_key(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("STORE_BACKEND", "memory")
    with pytest.raises(RuntimeError, match="SECRET_KEY"):
        create_app()


def test_production_memory_store_needs_no_database(monkeypatch):
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("STORE_BACKEND", "memory")
    monkeypatch.setenv("SECRET_KEY", "a-strong-secret")
    app = create_app()
    assert app.config["STORE_BACKEND"] == "memory"


def test_postgres_scheme_normalized(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgres://u:p@db:5432/customers")
    assert load_settings().database_url == "postgresql://u:p@db:5432/customers"
