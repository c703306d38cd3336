"""
Product CRUD use cases on top of the JSON repository.

Each call re-reads the whole file, changes the list in memory and, for
mutations, writes the whole list back while holding the per-path lock.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from catalog.core.config import get_settings
from catalog.core.log import get_logger
from catalog.domain.products import (
    build_product,
    code_in_use,
    max_id,
    merge_update,
    missing_fields,
)
from catalog.repositories.json_storage import JsonProductRepository, StorageError

logger = get_logger(__name__)

RETRIEVE = "retrieve"
UPDATE = "update"
DELETE = "delete"

_OPERATION_MESSAGES = {
    RETRIEVE: "Error retrieving product by id",
    UPDATE: "Error updating product",
    DELETE: "Error deleting product",
}


class ProductError(Exception):
    """Base exception for product workflow."""


class ProductValidationError(ProductError):
    """Raised when a product cannot be created; nothing is written."""


class InvalidProductError(ProductValidationError):
    def __init__(self, missing: list[str]):
        super().__init__("All fields are required: " + ", ".join(missing))
        self.missing = list(missing)


class DuplicateCodeError(ProductValidationError):
    def __init__(self, code: str):
        super().__init__(f"Product code {code!r} is already in use")
        self.code = code


class ProductOperationError(ProductError):
    """Generic failure of a lookup/update/delete; the cause is only logged."""

    def __init__(self, operation: str):
        super().__init__(_OPERATION_MESSAGES[operation])
        self.operation = operation


class ProductNotFoundError(ProductOperationError):
    def __init__(self, operation: str, product_id: Any):
        super().__init__(operation)
        self.product_id = product_id


class ProductService:
    """CRUD access to the product list with id generation and code uniqueness."""

    def __init__(self, repository: JsonProductRepository, initial_id: Optional[int] = None) -> None:
        self.repository = repository
        if initial_id is None:
            with repository.lock():
                initial_id = max_id(repository.load())
        self._last_id = int(initial_id)

    @property
    def last_id(self) -> int:
        return self._last_id

    def create(self, payload: Mapping[str, Any]) -> dict:
        missing = missing_fields(payload)
        if missing:
            logger.warning("Product rejected, missing fields: %s", ", ".join(missing))
            raise InvalidProductError(missing)
        with self.repository.lock():
            products = self.repository.load()
            code = payload["code"]
            if code_in_use(products, code):
                logger.warning("Product rejected, code %r already in use", code)
                raise DuplicateCodeError(code)
            new_id = max(self._last_id, max_id(products)) + 1
            product = build_product(new_id, payload)
            products.append(product)
            self.repository.save(products)
            self._last_id = new_id
        logger.info("Product %s created (code=%r)", new_id, code)
        return dict(product)

    def get_all(self) -> list[dict]:
        with self.repository.lock():
            return self.repository.load()

    def get_by_id(self, product_id: int) -> dict:
        try:
            with self.repository.lock():
                products = self.repository.load()
        except StorageError as exc:
            logger.error("Product %s lookup failed", product_id, exc_info=True)
            raise ProductOperationError(RETRIEVE) from exc
        for item in products:
            if item.get("id") == product_id:
                return item
        logger.warning("Product with id %s not found", product_id)
        raise ProductNotFoundError(RETRIEVE, product_id)

    def update(self, product_id: int, changes: Mapping[str, Any]) -> dict:
        try:
            with self.repository.lock():
                products = self.repository.load()
                index = next((i for i, item in enumerate(products) if item.get("id") == product_id), -1)
                if index == -1:
                    logger.warning("Product with id %s not found", product_id)
                    raise ProductNotFoundError(UPDATE, product_id)
                products[index] = merge_update(products[index], changes)
                self.repository.save(products)
                return products[index]
        except StorageError as exc:
            logger.error("Product %s update failed", product_id, exc_info=True)
            raise ProductOperationError(UPDATE) from exc

    def remove(self, product_id: int) -> bool:
        try:
            with self.repository.lock():
                products = self.repository.load()
                remaining = [item for item in products if item.get("id") != product_id]
                if len(remaining) == len(products):
                    logger.warning("Product with id %s not found", product_id)
                    raise ProductNotFoundError(DELETE, product_id)
                self.repository.save(remaining)
        except StorageError as exc:
            logger.error("Product %s deletion failed", product_id, exc_info=True)
            raise ProductOperationError(DELETE) from exc
        logger.info("Product %s deleted", product_id)
        return True


def get_product_service() -> ProductService:
    """Build a service bound to the configured products file."""
    settings = get_settings()
    repository = JsonProductRepository(settings.products_file)
    return ProductService(repository, initial_id=settings.initial_product_id)
