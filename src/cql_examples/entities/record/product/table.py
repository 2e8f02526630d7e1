"""Product table model."""

from cassandra.cqlengine import columns
from cassandra.cqlengine.models import Model


class ProductTable(Model):
    """Persistence model for products: ``product(id int PRIMARY KEY, description text)``."""

    __table_name__ = "product"

    id = columns.Integer(partition_key=True)
    description = columns.Text()
