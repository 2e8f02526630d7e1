"""Data access for products stored in the ``record`` keyspace."""

from dataclasses import asdict

from loguru import logger

from src.cql_examples.core.repositories.base import CqlMapper, KeyspaceDao

from .entity import Product
from .table import ProductTable


class ProductDao(KeyspaceDao):
    """Data-access layer for product records."""

    def get(self, id: int) -> Product | None:
        with self._tables(ProductTable) as table:
            row = table.objects.filter(id=id).first()
        if row is None:
            return None
        return Product(id=row.id, description=row.description)

    def save(self, product: Product) -> None:
        logger.debug("Saving product {} in keyspace {}", product.id, self.keyspace)
        with self._tables(ProductTable) as table:
            # Null fields are not written
            values = {name: value for name, value in asdict(product).items() if value is not None}
            table.create(**values)


class ProductMapper(CqlMapper):
    def dao(self) -> ProductDao:
        return self._dao(ProductDao)
