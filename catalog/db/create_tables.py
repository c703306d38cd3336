"""Create the products export table on DATABASE_URL."""
from __future__ import annotations

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers Product on Base.metadata


def create_all() -> list[str]:
    """Create missing tables and return the table names now present."""
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    return sorted(inspect(engine).get_table_names())


if __name__ == "__main__":
    try:
        tables = create_all()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print("Tables ready: " + ", ".join(tables))
