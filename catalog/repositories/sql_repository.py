"""SQL mirror of the product file, backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select

from catalog.db.models import Product
from catalog.db.session import get_session


class SQLProductRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def get_product(self, product_id: int) -> Optional[Product]:
        with get_session() as session:
            return session.get(Product, product_id)

    def get_product_by_code(self, code: str) -> Optional[Product]:
        with get_session() as session:
            stmt = select(Product).where(Product.code == code)
            return session.execute(stmt).scalar_one_or_none()

    def list_products(self) -> list[Product]:
        with get_session() as session:
            return session.execute(select(Product).order_by(Product.id)).scalars().all()

    def sync_product_from_json(self, data: dict | None) -> None:
        """Insert or overwrite the row whose id matches the JSON record."""
        if not data or data.get("id") is None:
            return
        product_id = int(data["id"])
        now = datetime.now(timezone.utc)
        values = {
            "title": str(data.get("title") or ""),
            "description": str(data.get("description") or ""),
            "price": float(data.get("price") or 0),
            "img": str(data.get("img") or ""),
            "code": str(data.get("code") or ""),
            "stock": float(data.get("stock") or 0),
        }
        with get_session() as session:
            product = session.get(Product, product_id)
            if not product:
                product = Product(id=product_id, created_at=now, updated_at=now, **values)
                session.add(product)
            else:
                for key, value in values.items():
                    setattr(product, key, value)
                product.updated_at = now
            session.commit()

    def delete_product(self, product_id: int) -> None:
        with get_session() as session:
            session.execute(delete(Product).where(Product.id == product_id))
            session.commit()
