"""Schema shared by the product examples."""

from cassandra.cluster import Session
from cassandra.metadata import protect_name

from src.cql_examples.core.services.database.cql_schema import (
    create_keyspace_if_not_exists,
    execute_schema_statement,
)

PRODUCT_TABLE_CQL = (
    "CREATE TABLE IF NOT EXISTS {keyspace}.product( id int PRIMARY KEY, description text)"
)


def maybe_create_product_schema(session: Session, keyspace: str, replication_factor: int = 1) -> None:
    """Create ``keyspace`` and its ``product`` table unless they already exist."""
    create_keyspace_if_not_exists(session, keyspace, replication_factor)
    execute_schema_statement(session, PRODUCT_TABLE_CQL.format(keyspace=protect_name(keyspace)))
