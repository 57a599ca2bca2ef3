"""Custom exceptions for the storefront."""
from __future__ import annotations


class StorefrontException(Exception):
    """Base exception for all storefront errors."""

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)
        self.message = message


class MalformedProductException(StorefrontException):
    """Product reference is structurally invalid (missing id, names or price)."""

    def __init__(self, product_id: object, reason: str) -> None:
        super().__init__(f"Malformed product {product_id!r}: {reason}")
        self.product_id = product_id
        self.reason = reason


class InvalidSizeException(StorefrontException):
    """Size label is not offered for the product."""

    def __init__(self, product_id: str, size: str) -> None:
        super().__init__(f"Size {size!r} is not available for product {product_id}")
        self.product_id = product_id
        self.size = size


class ProductNotFoundException(StorefrontException):
    """Product not found in catalog."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id


class CatalogException(StorefrontException):
    """Catalog source could not be read."""

    pass


class ConfigurationException(StorefrontException):
    """Configuration errors."""

    pass
