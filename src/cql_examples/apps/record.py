"""Frozen dataclass ("record") entity."""

import typer
from cassandra.cluster import Session

from src.cql_examples.apps.product_schema import maybe_create_product_schema
from src.cql_examples.core.exceptions import ensure_found
from src.cql_examples.core.services.database.cql_session import CqlSessionService
from src.cql_examples.entities.record.product import Product, ProductMapper
from src.cql_examples.runtime.context import get_config
from src.cql_examples.runtime.logging import configure_logging

KEYSPACE = "record"


def maybe_create_schema(session: Session) -> None:
    maybe_create_product_schema(session, KEYSPACE, get_config().app.replication_factor)


def run(session: Session, connection: str | None = None) -> None:
    maybe_create_schema(session)

    mapper = ProductMapper(connection).with_default_keyspace(KEYSPACE)
    dao = mapper.dao()

    initial_product = Product(1, "test")
    typer.echo(f"Saving {initial_product!r}...")
    dao.save(initial_product)

    retrieved_product = ensure_found(dao.get(1), "Product", 1)
    typer.echo(f"Retrieved {retrieved_product!r}")


def main(log_level: str | None = None) -> None:
    configure_logging(log_level)
    service = CqlSessionService()
    with service.session_scope() as session:
        run(session, service.connection_name)


if __name__ == "__main__":
    main()
