"""product-catalog: a JSON-file backed product store."""

from .repositories.json_storage import (
    JsonProductRepository,
    StorageError,
    StorageParseError,
    StorageReadError,
    StorageWriteError,
)
from .services.product_service import (
    DuplicateCodeError,
    InvalidProductError,
    ProductError,
    ProductNotFoundError,
    ProductOperationError,
    ProductService,
    ProductValidationError,
    get_product_service,
)

__version__ = "0.1.0"
__all__ = [
    "DuplicateCodeError",
    "InvalidProductError",
    "JsonProductRepository",
    "ProductError",
    "ProductNotFoundError",
    "ProductOperationError",
    "ProductService",
    "ProductValidationError",
    "StorageError",
    "StorageParseError",
    "StorageReadError",
    "StorageWriteError",
    "get_product_service",
]
