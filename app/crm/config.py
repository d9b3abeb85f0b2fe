import os
from dataclasses import dataclass

from app.crm.constants import STORE_BACKENDS


@dataclass(frozen=True)
class Settings:
    secret_key: str
    env: str
    database_url: str

    store_backend: str
    log_level: str
    customers_api_url: str


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def _normalize_database_url(url: str) -> str:
    # Hosted Postgres often hands out postgres:// URLs, which SQLAlchemy 2.x rejects.
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def load_settings() -> Settings:
    return Settings(
        secret_key=_getenv("SECRET_KEY", "change-me"),
        env=_getenv("ENV", "development"),
        database_url=_normalize_database_url(_getenv("DATABASE_URL", "sqlite:///customers.db")),
        store_backend=_getenv("STORE_BACKEND", "database").lower(),
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
        customers_api_url=_getenv("CUSTOMERS_API_URL", "http://localhost:3333"),
    )


def load_config() -> dict:
    s = load_settings()
    if s.store_backend not in STORE_BACKENDS:
        raise RuntimeError(
            f"STORE_BACKEND must be one of {', '.join(sorted(STORE_BACKENDS))} (got {s.store_backend!r})."
        )
    return {
        "SECRET_KEY": s.secret_key,
        "ENV": s.env,
        "DATABASE_URL": s.database_url,
        "STORE_BACKEND": s.store_backend,
        "LOG_LEVEL": s.log_level,
        "CUSTOMERS_API_URL": s.customers_api_url,
        # request bodies are tiny JSON documents
        "MAX_CONTENT_LENGTH": 1 * 1024 * 1024,
    }
