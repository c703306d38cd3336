"""Domain helpers for product validation and record shaping."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

REQUIRED_FIELDS = ("title", "description", "price", "img", "code", "stock")


def missing_fields(payload: Mapping[str, Any] | None) -> list[str]:
    """Return required fields that are absent or falsy, in declared order."""
    data = payload or {}
    return [name for name in REQUIRED_FIELDS if not data.get(name)]


def code_in_use(records: Iterable[Mapping[str, Any]], code: str | None) -> bool:
    """Check if any stored product already owns the provided code."""
    if not code:
        return False
    return any(isinstance(item, Mapping) and item.get("code") == code for item in records)


def max_id(records: Iterable[Mapping[str, Any]]) -> int:
    highest = 0
    for item in records:
        value = item.get("id") if isinstance(item, Mapping) else None
        # bool is an int subclass; never treat it as an id
        if isinstance(value, int) and not isinstance(value, bool) and value > highest:
            highest = value
    return highest


def build_product(product_id: int, payload: Mapping[str, Any]) -> dict:
    """New record with the generated id followed by the required fields only."""
    product = {"id": product_id}
    for name in REQUIRED_FIELDS:
        product[name] = payload[name]
    return product


def merge_update(existing: Mapping[str, Any], changes: Mapping[str, Any] | None) -> dict:
    """Shallow-merge changes over an existing record, keeping its id."""
    merged = dict(existing)
    for key, value in (changes or {}).items():
        if key == "id":
            continue
        merged[key] = value
    return merged
