"""Unit tests for schema creation."""

from cassandra.query import SimpleStatement

from src.cql_examples.apps import killrvideo
from src.cql_examples.apps.product_schema import maybe_create_product_schema
from src.cql_examples.core.services.database.cql_schema import (
    create_keyspace_if_not_exists,
    execute_schema_statement,
    load_statements,
    split_statements,
)


def _executed(session) -> list[str]:
    return [call.args[0].query_string for call in session.execute.call_args_list]


class TestSchemaStatements:
    def test_runs_under_slow_profile(self, cql_session):
        execute_schema_statement(cql_session, "CREATE TABLE IF NOT EXISTS t (k int PRIMARY KEY)")

        statement = cql_session.execute.call_args.args[0]
        assert isinstance(statement, SimpleStatement)
        assert cql_session.execute.call_args.kwargs == {"execution_profile": "slow"}

    def test_keyspace_uses_simple_strategy(self, cql_session):
        create_keyspace_if_not_exists(cql_session, "lombok")

        assert _executed(cql_session) == [
            "CREATE KEYSPACE IF NOT EXISTS lombok WITH replication = "
            "{'class': 'SimpleStrategy', 'replication_factor': 1}"
        ]

    def test_keyspace_name_is_quoted_when_needed(self, cql_session):
        create_keyspace_if_not_exists(cql_session, "MixedCase", replication_factor=3)

        (cql,) = _executed(cql_session)
        assert cql.startswith('CREATE KEYSPACE IF NOT EXISTS "MixedCase" ')
        assert "'replication_factor': 3" in cql

    def test_split_statements(self):
        script = "CREATE TABLE a (k int PRIMARY KEY);\n\n  CREATE TABLE b (k int PRIMARY KEY);\n"

        assert split_statements(script) == [
            "CREATE TABLE a (k int PRIMARY KEY)",
            "CREATE TABLE b (k int PRIMARY KEY)",
        ]

    def test_killrvideo_script_is_packaged(self):
        statements = load_statements(killrvideo.SCHEMA_PACKAGE, killrvideo.SCHEMA_FILE)

        assert len(statements) == 6
        assert all(statement.startswith("CREATE TABLE IF NOT EXISTS") for statement in statements)


class TestExampleSchemas:
    """Test the schemas each example creates before running."""

    def test_product_schema(self, cql_session):
        maybe_create_product_schema(cql_session, "record")

        executed = _executed(cql_session)
        assert len(executed) == 2
        assert executed[0].startswith("CREATE KEYSPACE IF NOT EXISTS record ")
        assert executed[1] == (
            "CREATE TABLE IF NOT EXISTS record.product( id int PRIMARY KEY, description text)"
        )

    def test_product_schema_is_idempotent(self, cql_session):
        maybe_create_product_schema(cql_session, "lombok")
        maybe_create_product_schema(cql_session, "lombok")

        executed = _executed(cql_session)
        assert executed[:2] == executed[2:]
        assert all("IF NOT EXISTS" in cql for cql in executed)

    def test_killrvideo_schema(self, cql_session):
        killrvideo.maybe_create_schema(cql_session)

        executed = _executed(cql_session)
        assert len(executed) == 7
        assert executed[0].startswith("CREATE KEYSPACE IF NOT EXISTS killrvideo ")
        cql_session.set_keyspace.assert_called_once_with("killrvideo")
        assert any("videos_by_tag" in cql for cql in executed[1:])
