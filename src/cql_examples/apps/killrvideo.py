"""KillrVideo: DAOs spanning several denormalized tables."""

from uuid import uuid4

import typer
from cassandra.cluster import Session
from loguru import logger

from src.cql_examples.core.exceptions import ensure_found
from src.cql_examples.core.repositories.base import now_millis
from src.cql_examples.core.services.database.cql_schema import (
    create_keyspace_if_not_exists,
    execute_schema_statements,
    load_statements,
)
from src.cql_examples.core.services.database.cql_session import CqlSessionService
from src.cql_examples.entities.killrvideo import KillrVideoMapper
from src.cql_examples.entities.killrvideo.user import User, UserDao
from src.cql_examples.entities.killrvideo.video import Video
from src.cql_examples.entities.killrvideo.video.dao import day_bucket
from src.cql_examples.runtime.context import get_config
from src.cql_examples.runtime.logging import configure_logging

KEYSPACE = "killrvideo"
SCHEMA_PACKAGE = "src.cql_examples.entities.killrvideo"
SCHEMA_FILE = "killrvideo_schema.cql"

EMAIL = "testuser@example.com"


def maybe_create_schema(session: Session) -> None:
    create_keyspace_if_not_exists(session, KEYSPACE, get_config().app.replication_factor)
    # The script uses unqualified table names
    session.set_keyspace(KEYSPACE)
    execute_schema_statements(session, load_statements(SCHEMA_PACKAGE, SCHEMA_FILE))


def try_login(user_dao: UserDao, email: str, password: str) -> bool:
    user = user_dao.login(email, password)
    outcome = "Success" if user is not None else "Failure"
    typer.echo(f"Logging in with {email}/{password}: {outcome}")
    return user is not None


def run(session: Session, connection: str | None = None) -> None:
    maybe_create_schema(session)
    mapper = KillrVideoMapper(connection).with_default_keyspace(KEYSPACE)

    # Create a new user
    user_dao = mapper.user_dao()
    user = User(
        userid=uuid4(),
        firstname="test",
        lastname="user",
        email=EMAIL,
        created_date=now_millis(),
    )
    if user_dao.create(user, "password123"):
        typer.echo(f"Created {user!r}")
    else:
        user = ensure_found(user_dao.get_by_email(EMAIL), "User", EMAIL)
        typer.echo(f"Reusing existing {user!r}")

    duplicate = User(
        userid=uuid4(), firstname="test2", lastname="user", email=EMAIL, created_date=now_millis()
    )
    if user_dao.create(duplicate, "secret123"):
        raise RuntimeError(f"A second user was created with email {EMAIL}")
    logger.info("Second user with email {} was rejected", EMAIL)

    # Simulate login attempts
    try_login(user_dao, EMAIL, "password123")
    try_login(user_dao, EMAIL, "secret123")

    # Insert a video
    video_dao = mapper.video_dao()
    video = video_dao.create(
        Video(
            userid=user.userid,
            name="Accelerate: A NoSQL Original Series (TRAILER)",
            location="https://www.youtube.com/watch?v=LulWy8zmrog",
            tags={"apachecassandra", "nosql", "hybridcloud"},
        )
    )
    typer.echo(f"Created video [{video.videoid}] {video.name}")

    # Check that associated denormalized tables have also been updated
    typer.echo(f"Videos for {user.firstname} {user.lastname}:")
    for user_video in video_dao.get_by_user(user.userid):
        typer.echo(f"  [{user_video.videoid}] {user_video.name}")

    typer.echo("Latest videos:")
    for latest_video in video_dao.get_latest(day_bucket(now_millis())):
        typer.echo(f"  [{latest_video.videoid}] {latest_video.name}")

    typer.echo("Videos tagged with apachecassandra:")
    for video_by_tag in video_dao.get_by_tag("apachecassandra"):
        typer.echo(f"  [{video_by_tag.videoid}] {video_by_tag.name}")

    # Update the existing video, then reload the whole entity
    video_dao.update(
        Video(videoid=video.videoid, name="Accelerate: A NoSQL Original Series - join us online!")
    )
    updated_video = ensure_found(video_dao.get(video.videoid), "Video", video.videoid)
    typer.echo(f"Updated name for video {updated_video.videoid}: {updated_video.name}")


def main(log_level: str | None = None) -> None:
    configure_logging(log_level)
    service = CqlSessionService()
    with service.session_scope() as session:
        run(session, service.connection_name)


if __name__ == "__main__":
    main()
