"""Data access for products stored in the ``lombok`` keyspace."""

from loguru import logger

from src.cql_examples.core.repositories.base import CqlMapper, KeyspaceDao

from .entity import ImmutableProduct, Product
from .table import ProductTable


class ProductDao(KeyspaceDao):
    """Data-access layer for products."""

    def get(self, id: int) -> Product | None:
        """Select the product with the given id, ``None`` when there is no such row."""
        with self._tables(ProductTable) as table:
            row = table.objects.filter(id=id).first()
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def get_immutable(self, id: int) -> ImmutableProduct | None:
        """Select the same row as :meth:`get`, mapped to the immutable entity."""
        with self._tables(ProductTable) as table:
            row = table.objects.filter(id=id).first()
        if row is None:
            return None
        return ImmutableProduct.model_validate(row, from_attributes=True)

    def save(self, product: Product) -> None:
        """Insert the product, overwriting the columns it sets.

        Null fields are left out of the INSERT, so saving never clears a column.
        """
        logger.debug("Saving product {} in keyspace {}", product.id, self.keyspace)
        with self._tables(ProductTable) as table:
            table.create(**product.model_dump(exclude_none=True))


class ProductMapper(CqlMapper):
    def dao(self) -> ProductDao:
        return self._dao(ProductDao)
