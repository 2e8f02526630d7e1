"""Keyspace-bound building blocks for the example DAOs and mappers."""

from datetime import UTC, datetime
from typing import Self, TypeVar

from cassandra.cqlengine.models import Model
from cassandra.cqlengine.query import ContextQuery

# Range of the CQL `int` type
CQL_INT_MIN = -(2**31)
CQL_INT_MAX = 2**31 - 1


class KeyspaceDao:
    """Data-access object bound to one keyspace and one registered connection.

    Table models carry no keyspace of their own; every query runs through
    ``_tables`` which rebinds them to the DAO's keyspace.
    """

    def __init__(self, keyspace: str, connection: str | None = None) -> None:
        self._keyspace = keyspace
        self._connection = connection

    @property
    def keyspace(self) -> str:
        return self._keyspace

    def _tables(self, *tables: type[Model]) -> ContextQuery:
        """Context manager yielding ``tables`` bound to this DAO's keyspace.

        Yields a single model when one table is given, a tuple otherwise.
        """
        return ContextQuery(*tables, keyspace=self._keyspace, connection=self._connection)


D = TypeVar("D", bound=KeyspaceDao)


class CqlMapper:
    """Builds DAOs that share a default keyspace and connection."""

    def __init__(self, connection: str | None = None) -> None:
        self._connection = connection
        self._keyspace: str | None = None

    def with_default_keyspace(self, keyspace: str) -> Self:
        self._keyspace = keyspace
        return self

    @property
    def default_keyspace(self) -> str:
        if self._keyspace is None:
            raise ValueError(f"{type(self).__name__} has no default keyspace")
        return self._keyspace

    def _dao(self, dao_class: type[D]) -> D:
        return dao_class(self.default_keyspace, connection=self._connection)


def now_millis() -> datetime:
    """Current UTC time truncated to the millisecond precision of CQL timestamps."""
    now = datetime.now(UTC)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)
