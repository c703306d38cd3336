from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from catalog.domain.products import (  # noqa: E402
    REQUIRED_FIELDS,
    build_product,
    code_in_use,
    max_id,
    merge_update,
    missing_fields,
)


def test_missing_fields_treats_falsy_values_alike():
    payload = {"title": "x", "description": "", "price": 0, "img": None, "code": "c"}
    assert missing_fields(payload) == ["description", "price", "img", "stock"]
    assert missing_fields(None) == list(REQUIRED_FIELDS)


def test_code_in_use():
    records = [{"id": 1, "code": "abc"}, {"id": 2, "code": "def"}]
    assert code_in_use(records, "def")
    assert not code_in_use(records, "zzz")
    assert not code_in_use(records, "")


def test_max_id_ignores_missing_and_non_integer_ids():
    assert max_id([]) == 0
    assert max_id([{"id": 3}, {"id": "9"}, {"id": True}, {}, {"id": 7}]) == 7


def test_build_product_orders_id_first():
    payload = {"stock": 1, "code": "c", "img": "i", "price": 2, "description": "d", "title": "t", "extra": 1}
    product = build_product(4, payload)
    assert list(product) == ["id", *REQUIRED_FIELDS]
    assert "extra" not in product


def test_merge_update_keeps_id_and_other_fields():
    existing = {"id": 1, "title": "t", "price": 10}
    merged = merge_update(existing, {"id": 2, "price": 12})
    assert merged == {"id": 1, "title": "t", "price": 12}
    assert existing["price"] == 10
