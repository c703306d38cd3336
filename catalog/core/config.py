"""
Configuration helpers for the product catalog.

Settings are read once from environment variables so that repositories and
services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    products_file: str
    initial_product_id: Optional[int]
    database_url: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: Optional[int] = None) -> Optional[int]:
        if value is None or not value.strip():
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        products_file=os.getenv("PRODUCTS_FILE") or os.path.join(os.getcwd(), "products.json"),
        initial_product_id=_int(os.getenv("PRODUCTS_INITIAL_ID")),
        database_url=os.getenv("DATABASE_URL", ""),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
