"""Entity package: Product (frozen dataclass record)."""

from .dao import ProductDao, ProductMapper
from .entity import Product
from .table import ProductTable

__all__ = ["Product", "ProductDao", "ProductMapper", "ProductTable"]
