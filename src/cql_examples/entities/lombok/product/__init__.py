"""Entity package: Product (mutable and immutable pydantic models)."""

from .dao import ProductDao, ProductMapper
from .entity import ImmutableProduct, Product
from .table import ProductTable

__all__ = ["Product", "ImmutableProduct", "ProductDao", "ProductMapper", "ProductTable"]
