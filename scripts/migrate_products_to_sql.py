"""One-off migration script: products JSON file -> SQL database."""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Make the catalog package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from catalog.core.config import get_settings
from catalog.db.create_tables import create_all
from catalog.repositories.json_storage import JsonProductRepository
from catalog.repositories.sql_repository import SQLProductRepository


def migrate(products_file: str | None = None) -> int:
    """Copy every JSON record into the products table; return how many."""
    path = products_file or get_settings().products_file
    if not Path(path).exists():
        raise SystemExit(f"File not found: {path}")
    create_all()
    repo = SQLProductRepository()
    records = JsonProductRepository(path, create=False).load()
    count = 0
    for record in records:
        if isinstance(record, dict) and record.get("id") is not None:
            repo.sync_product_from_json(record)
            count += 1
    return count


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Copy the products JSON file into DATABASE_URL")
    ap.add_argument("--file", help="Products JSON file (default: PRODUCTS_FILE)")
    args = ap.parse_args()
    total = migrate(args.file)
    print(f"{total} product(s) migrated to the SQL database successfully.")
