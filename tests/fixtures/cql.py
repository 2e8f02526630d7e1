"""Fixtures standing in for cqlengine and the cluster connection."""

from contextlib import ExitStack, nullcontext
from unittest.mock import MagicMock

import pytest
from cassandra import OperationTimedOut
from cassandra.cluster import NoHostAvailable, Session

from src.cql_examples.core.repositories import base
from src.cql_examples.core.services.database.cql_session import CqlSessionService


class FakeContextQuery:
    """Replacement for ``ContextQuery`` handing out one mock per table model.

    The same mock is returned every time a model is bound, so tests can
    configure rows up front and inspect the calls afterwards.
    """

    def __init__(self) -> None:
        self.tables: dict[type, MagicMock] = {}
        self.calls: list[tuple[tuple[type, ...], str | None, str | None]] = []

    def table(self, model: type) -> MagicMock:
        return self.tables.setdefault(model, MagicMock(name=model.__name__))

    def __call__(self, *models, keyspace=None, connection=None):
        self.calls.append((models, keyspace, connection))
        bound = tuple(self.table(model) for model in models)
        return nullcontext(bound[0] if len(bound) == 1 else bound)


@pytest.fixture
def context_query(monkeypatch: pytest.MonkeyPatch) -> FakeContextQuery:
    fake = FakeContextQuery()
    monkeypatch.setattr(base, "ContextQuery", fake)
    return fake


@pytest.fixture
def cql_session() -> MagicMock:
    """Driver session that records executed statements."""
    return MagicMock(spec=Session)


@pytest.fixture(scope="module")
def live_session():
    """Session on the configured cluster; skips the test when no node answers."""
    service = CqlSessionService()
    with ExitStack() as stack:
        try:
            session = stack.enter_context(service.session_scope())
        except (NoHostAvailable, OperationTimedOut) as e:
            pytest.skip(f"No Cassandra node reachable: {e}")
        yield service, session
