"""Integration tests against a live Cassandra node.

Run with ``pytest -m integration`` once a node listens on the configured
contact points; every test is skipped when none answers.
"""

from uuid import uuid4

import pytest

from src.cql_examples.apps import killrvideo, lombok, record
from src.cql_examples.entities.killrvideo import KillrVideoMapper
from src.cql_examples.entities.killrvideo.user import User
from src.cql_examples.entities.killrvideo.video import Video
from src.cql_examples.entities.lombok.product import Product as LombokProduct
from src.cql_examples.entities.lombok.product import ProductMapper as LombokProductMapper
from src.cql_examples.entities.record.product import Product as RecordProduct
from src.cql_examples.entities.record.product import ProductMapper as RecordProductMapper

pytestmark = pytest.mark.integration


def _row_count(session, keyspace: str, product_id: int) -> int:
    row = session.execute(
        f"SELECT COUNT(*) AS n FROM {keyspace}.product WHERE id = %s", (product_id,)
    ).one()
    return row["n"]


class TestProductExamples:
    def test_schema_creation_is_idempotent(self, live_session):
        service, session = live_session

        lombok.maybe_create_schema(session)
        lombok.maybe_create_schema(session)

        keyspace = session.cluster.metadata.keyspaces["lombok"]
        assert "product" in keyspace.tables
        assert keyspace.replication_strategy.replication_factor == 1

    def test_lombok_round_trip(self, live_session, capsys):
        service, session = live_session
        lombok.run(session, service.connection_name)

        dao = LombokProductMapper(service.connection_name).with_default_keyspace("lombok").dao()
        product = dao.get(1)
        immutable = dao.get_immutable(1)

        assert product == LombokProduct(id=1, description="test")
        assert (immutable.id, immutable.description) == (product.id, product.description)
        assert "Retrieved ImmutableProduct(id=1, description='test')" in capsys.readouterr().out

    def test_save_overwrites_existing_row(self, live_session):
        service, session = live_session
        record.maybe_create_schema(session)
        dao = RecordProductMapper(service.connection_name).with_default_keyspace("record").dao()

        dao.save(RecordProduct(42, "first"))
        dao.save(RecordProduct(42, "second"))

        assert dao.get(42) == RecordProduct(42, "second")
        assert _row_count(session, "record", 42) == 1

    def test_null_description_keeps_stored_value(self, live_session):
        service, session = live_session
        lombok.maybe_create_schema(session)
        record.maybe_create_schema(session)
        lombok_dao = (
            LombokProductMapper(service.connection_name).with_default_keyspace("lombok").dao()
        )
        record_dao = (
            RecordProductMapper(service.connection_name).with_default_keyspace("record").dao()
        )

        lombok_dao.save(LombokProduct(id=42, description="first"))
        lombok_dao.save(LombokProduct(id=42, description=None))
        record_dao.save(RecordProduct(43, "first"))
        record_dao.save(RecordProduct(43, None))

        assert lombok_dao.get(42) == LombokProduct(id=42, description="first")
        assert record_dao.get(43) == RecordProduct(43, "first")

    def test_missing_product(self, live_session):
        service, session = live_session
        record.maybe_create_schema(session)
        dao = RecordProductMapper(service.connection_name).with_default_keyspace("record").dao()

        assert dao.get(-1) is None


class TestKillrVideo:
    def test_user_and_video_flow(self, live_session):
        service, session = live_session
        killrvideo.maybe_create_schema(session)
        mapper = KillrVideoMapper(service.connection_name).with_default_keyspace("killrvideo")
        user_dao = mapper.user_dao()
        video_dao = mapper.video_dao()

        email = f"{uuid4().hex}@example.com"
        user = User(userid=uuid4(), firstname="test", lastname="user", email=email)

        assert user_dao.create(user, "password123") is True
        assert user_dao.create(User(userid=uuid4(), email=email), "other") is False
        assert user_dao.login(email, "password123").userid == user.userid
        assert user_dao.login(email, "wrong") is None

        video = video_dao.create(
            Video(userid=user.userid, name="integration", tags={"it", "cassandra"})
        )
        assert [v.videoid for v in video_dao.get_by_user(user.userid)] == [video.videoid]
        assert video.videoid in {v.videoid for v in video_dao.get_by_tag("it")}

        video_dao.update(Video(videoid=video.videoid, name="renamed"))
        updated = video_dao.get(video.videoid)
        assert updated.name == "renamed"
        assert updated.tags == {"it", "cassandra"}
