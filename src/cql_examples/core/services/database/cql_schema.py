"""Idempotent schema creation for the example keyspaces."""

from collections.abc import Iterable
from importlib import resources

from cassandra.cluster import Session
from cassandra.metadata import protect_name
from cassandra.query import SimpleStatement
from loguru import logger

from src.cql_examples.core.services.database.cql_session import SLOW_PROFILE

CREATE_KEYSPACE_CQL = (
    "CREATE KEYSPACE IF NOT EXISTS {keyspace} "
    "WITH replication = {{'class': 'SimpleStrategy', 'replication_factor': {replication_factor}}}"
)


def execute_schema_statement(session: Session, cql: str) -> None:
    """Run a single DDL statement under the slow execution profile."""
    logger.debug("Executing schema statement: {}", cql)
    session.execute(SimpleStatement(cql), execution_profile=SLOW_PROFILE)


def execute_schema_statements(session: Session, statements: Iterable[str]) -> None:
    for cql in statements:
        execute_schema_statement(session, cql)


def create_keyspace_if_not_exists(
    session: Session, keyspace: str, replication_factor: int = 1
) -> None:
    """Create ``keyspace`` with SimpleStrategy replication unless it already exists."""
    logger.info("Ensuring keyspace {} exists", keyspace)
    execute_schema_statement(
        session,
        CREATE_KEYSPACE_CQL.format(
            keyspace=protect_name(keyspace), replication_factor=replication_factor
        ),
    )


def split_statements(script: str) -> list[str]:
    """Split a CQL script on ``;`` into trimmed, non-empty statements."""
    return [statement.strip() for statement in script.split(";") if statement.strip()]


def load_statements(package: str, file_name: str) -> list[str]:
    """Read a CQL script shipped as package data and split it into statements."""
    script = resources.files(package).joinpath(file_name).read_text(encoding="utf-8")
    return split_statements(script)
