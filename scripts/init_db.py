"""
Create the schema directly from the models (local SQLite / quick setups).

Production databases should go through `python scripts/release.py` (Alembic) instead.

Usage:
  python scripts/init_db.py [--database-url URL]
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from sqlalchemy import create_engine

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.crm.models import Base  # noqa: E402


def create_schema(*, database_url: str | None = None) -> str:
    db_url = (database_url or os.environ.get("DATABASE_URL") or "sqlite:///customers.db").strip()
    engine = create_engine(db_url, future=True)
    try:
        Base.metadata.create_all(bind=engine)
    finally:
        engine.dispose()
    return db_url


def main() -> None:
    parser = argparse.ArgumentParser(description="Create customer registry tables.")
    parser.add_argument("--database-url", default=None, help="defaults to $DATABASE_URL")
    args = parser.parse_args()
    db_url = create_schema(database_url=args.database_url)
    print(f"Schema ready on {db_url.split('@')[-1]}", flush=True)


if __name__ == "__main__":
    main()
