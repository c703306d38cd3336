"""SQLAlchemy model mirroring the JSON product records."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Float, Integer, String, Text, func

from .session import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    img = Column(String(512), nullable=False)
    code = Column(String(64), unique=True, nullable=False)
    stock = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
