#!/usr/bin/env python3
"""
Exercise the product store end to end against a JSON file.

Usage:
  python scripts/products_demo.py [--file ./prueba.json]
"""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from catalog.repositories.json_storage import JsonProductRepository
from catalog.services.product_service import ProductNotFoundError, ProductService

SAMPLE = {
    "title": "producto prueba",
    "description": "Este es un producto prueba",
    "price": 200,
    "img": "Sin imagen",
    "code": "abc123",
    "stock": 25,
}


class CheckFailed(Exception):
    pass


def check(condition: bool, message: str) -> None:
    if not condition:
        raise CheckFailed(message)


def run(path: str) -> None:
    service = ProductService(JsonProductRepository(path))
    print(f"1. Store ready on {path}")

    before = service.get_all()
    print(f"2. get_all on a fresh store: {before}")
    check(before == [], "get_all did not return an empty list")

    service.create(SAMPLE)
    after = service.get_all()
    print(f"3. create added a product: {after}")

    added = next((p for p in after if p.get("code") == SAMPLE["code"]), None)
    check(added is not None and isinstance(added.get("id"), int), "product was not stored with a generated id")
    print(f"4. Generated id: {added['id']}")

    found = service.get_by_id(added["id"])
    print(f"5. get_by_id returned: {found}")
    check(found == added, "get_by_id returned a different product")

    updated = service.update(added["id"], {"price": 250})
    print(f"6. update changed the price: {updated}")
    check(updated["id"] == added["id"] and updated["price"] == 250, "update failed or lost the id")

    service.remove(added["id"])
    remaining = service.get_all()
    print(f"7. remove deleted the product: {remaining}")
    check(all(p.get("id") != added["id"] for p in remaining), "product still present after remove")

    try:
        service.remove(added["id"])
    except ProductNotFoundError as exc:
        print(f"8. Second remove failed as expected: {exc}")
    else:
        raise CheckFailed("second remove did not fail")


def main() -> None:
    ap = argparse.ArgumentParser(description="Run the product store walkthrough")
    ap.add_argument("--file", default="./prueba.json", help="JSON file to use (created when missing)")
    args = ap.parse_args()
    run(args.file)
    print("OK: all checks passed")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI use
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
