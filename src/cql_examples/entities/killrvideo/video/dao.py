"""Data access for videos and their denormalized views."""

from collections.abc import Iterator
from datetime import UTC, datetime
from uuid import UUID, uuid4

from cassandra.cqlengine.query import BatchQuery
from loguru import logger
from pydantic import BaseModel

from src.cql_examples.core.repositories.base import KeyspaceDao, now_millis

from .entity import LatestVideo, UserVideo, Video, VideoByTag
from .table import LatestVideoTable, UserVideoTable, VideoByTagTable, VideoTable


def day_bucket(moment: datetime) -> str:
    """Format ``moment`` as the ``yyyymmdd`` partition of ``latest_videos`` (UTC).

    Naive datetimes are taken to be UTC already, as Cassandra returns them.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).strftime("%Y%m%d")


def to_user_video(video: Video) -> UserVideo:
    return UserVideo(
        userid=video.userid,
        added_date=video.added_date,
        videoid=video.videoid,
        name=video.name,
        preview_image_location=video.preview_image_location,
    )


def to_latest_video(video: Video) -> LatestVideo:
    return LatestVideo(
        yyyymmdd=day_bucket(video.added_date),
        added_date=video.added_date,
        videoid=video.videoid,
        userid=video.userid,
        name=video.name,
        preview_image_location=video.preview_image_location,
    )


def to_video_by_tag(video: Video, tag: str) -> VideoByTag:
    return VideoByTag(
        tag=tag,
        videoid=video.videoid,
        added_date=video.added_date,
        userid=video.userid,
        name=video.name,
        preview_image_location=video.preview_image_location,
        tagged_date=video.added_date,
    )


def _set_values(entity: BaseModel) -> dict:
    # Null fields are not written, so they never overwrite existing columns
    return entity.model_dump(exclude_none=True)


class VideoDao(KeyspaceDao):
    """Data-access layer for videos.

    A DAO is not limited to a single table: the selects below read the
    denormalized views, and ``create`` writes to all of them at once.
    """

    def get(self, videoid: UUID) -> Video | None:
        """Simple selection by full primary key."""
        with self._tables(VideoTable) as table:
            row = table.objects.filter(videoid=videoid).first()
        if row is None:
            return None
        return Video.model_validate(row, from_attributes=True)

    def get_by_user(self, userid: UUID) -> Iterator[UserVideo]:
        """Selection by partial primary key; yields every video of the user."""
        with self._tables(UserVideoTable) as table:
            for row in table.objects.filter(userid=userid):
                yield UserVideo.model_validate(row, from_attributes=True)

    def get_latest(self, yyyymmdd: str) -> Iterator[LatestVideo]:
        with self._tables(LatestVideoTable) as table:
            for row in table.objects.filter(yyyymmdd=yyyymmdd):
                yield LatestVideo.model_validate(row, from_attributes=True)

    def get_by_tag(self, tag: str) -> Iterator[VideoByTag]:
        with self._tables(VideoByTagTable) as table:
            for row in table.objects.filter(tag=tag):
                yield VideoByTag.model_validate(row, from_attributes=True)

    def create(self, video: Video) -> Video:
        """Insert the video in ``videos`` and in every denormalized view.

        All rows go in a single logged batch. ``videoid`` and ``added_date``
        are generated when missing.

        Returns:
            The input video, or a completed copy if some fields had to be filled.
        """
        updates = {}
        if video.videoid is None:
            updates["videoid"] = uuid4()
        if video.added_date is None:
            updates["added_date"] = now_millis()
        if updates:
            video = video.model_copy(update=updates)

        with self._tables(VideoTable, UserVideoTable, LatestVideoTable, VideoByTagTable) as (
            videos,
            user_videos,
            latest_videos,
            videos_by_tag,
        ):
            with BatchQuery(connection=self._connection) as batch:
                videos.batch(batch).create(**_set_values(video))
                user_videos.batch(batch).create(**_set_values(to_user_video(video)))
                latest_videos.batch(batch).create(**_set_values(to_latest_video(video)))
                for tag in sorted(video.tags or ()):
                    videos_by_tag.batch(batch).create(**_set_values(to_video_by_tag(video, tag)))

        logger.debug("Created video {} with tags {}", video.videoid, video.tags)
        return video

    def update(self, template: Video) -> None:
        """Update using a template.

        The template must have its full primary key set; beyond that, any
        non-null field is SET on the target row and null fields are left alone.
        """
        if template.videoid is None:
            raise ValueError("template must have its primary key (videoid) set")
        values = template.model_dump(exclude_none=True, exclude={"videoid"})
        if not values:
            logger.debug("Nothing to update for video {}", template.videoid)
            return
        with self._tables(VideoTable) as table:
            table.objects.filter(videoid=template.videoid).update(**values)
