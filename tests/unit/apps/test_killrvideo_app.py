"""Unit tests for the KillrVideo example flow."""

from unittest.mock import patch
from uuid import uuid4

import pytest

from src.cql_examples.apps import killrvideo
from src.cql_examples.core.exceptions import EntityNotFoundError
from src.cql_examples.entities.killrvideo.user import User
from src.cql_examples.entities.killrvideo.video import LatestVideo, UserVideo, Video, VideoByTag


@pytest.fixture
def mapper():
    with patch.object(killrvideo, "KillrVideoMapper") as mapper_class:
        mapper = mapper_class.return_value.with_default_keyspace.return_value
        mapper.mapper_class = mapper_class
        yield mapper


@pytest.fixture
def user_dao(mapper):
    dao = mapper.user_dao.return_value
    # First user is new, the duplicate email is rejected
    dao.create.side_effect = [True, False]
    dao.login.side_effect = lambda email, password: (
        User(userid=uuid4(), email=email) if password == "password123" else None
    )
    return dao


@pytest.fixture
def video_dao(mapper):
    dao = mapper.video_dao.return_value
    videoid = uuid4()
    dao.create.side_effect = lambda video: video.model_copy(update={"videoid": videoid})
    dao.get_by_user.return_value = iter([UserVideo(videoid=videoid, name="trailer")])
    dao.get_latest.return_value = iter([LatestVideo(videoid=videoid, name="trailer")])
    dao.get_by_tag.return_value = iter([VideoByTag(videoid=videoid, name="trailer")])
    dao.get.return_value = Video(videoid=videoid, name="renamed")
    return dao


class TestKillrVideoRun:
    """Test the user, login and video steps of the example."""

    def test_full_flow(self, cql_session, mapper, user_dao, video_dao, capsys):
        killrvideo.run(cql_session, "examples")

        out = capsys.readouterr().out
        mapper.mapper_class.assert_called_once_with("examples")
        mapper.mapper_class.return_value.with_default_keyspace.assert_called_once_with(
            "killrvideo"
        )
        cql_session.set_keyspace.assert_called_once_with("killrvideo")

        assert "Created User(" in out
        assert "Logging in with testuser@example.com/password123: Success" in out
        assert "Logging in with testuser@example.com/secret123: Failure" in out
        assert out.count("  [") == 3
        assert "Updated name for video" in out

        first_user, password = user_dao.create.call_args_list[0].args
        assert first_user.email == killrvideo.EMAIL
        assert password == "password123"
        duplicate, _ = user_dao.create.call_args_list[1].args
        assert duplicate.userid != first_user.userid

        created = video_dao.create.call_args.args[0]
        assert created.userid == first_user.userid
        assert created.tags == {"apachecassandra", "nosql", "hybridcloud"}
        video_dao.get_by_user.assert_called_once_with(first_user.userid)
        video_dao.get_by_tag.assert_called_once_with("apachecassandra")

        template = video_dao.update.call_args.args[0]
        assert template.name == "Accelerate: A NoSQL Original Series - join us online!"
        assert template.userid is None

    def test_reuses_existing_user(self, cql_session, mapper, user_dao, video_dao, capsys):
        existing = User(userid=uuid4(), firstname="test", email=killrvideo.EMAIL)
        user_dao.create.side_effect = [False, False]
        user_dao.get_by_email.return_value = existing

        killrvideo.run(cql_session)

        assert "Reusing existing User(" in capsys.readouterr().out
        assert video_dao.create.call_args.args[0].userid == existing.userid

    def test_duplicate_email_must_be_rejected(self, cql_session, mapper, user_dao, video_dao):
        user_dao.create.side_effect = [True, True]

        with pytest.raises(RuntimeError, match="second user"):
            killrvideo.run(cql_session)

        video_dao.create.assert_not_called()

    def test_missing_video_after_update(self, cql_session, mapper, user_dao, video_dao):
        video_dao.get.return_value = None

        with pytest.raises(EntityNotFoundError):
            killrvideo.run(cql_session)


def test_try_login_reports_outcome(capsys):
    with patch.object(killrvideo, "UserDao") as dao_class:
        dao = dao_class.return_value
        dao.login.return_value = None

        assert killrvideo.try_login(dao, "a@example.com", "pw") is False

    assert capsys.readouterr().out == "Logging in with a@example.com/pw: Failure\n"
