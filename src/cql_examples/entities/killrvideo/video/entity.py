"""Entities: Video and the rows it is denormalized into."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class _VideoRow(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)


class Video(_VideoRow):
    """A video, as stored in ``videos``.

    Doubles as an update template: fields left to ``None`` are not written.
    """

    videoid: UUID | None = None
    userid: UUID | None = None
    name: str | None = None
    description: str | None = None
    location: str | None = None
    location_type: int | None = None
    preview_image_location: str | None = None
    tags: set[str] | None = None
    added_date: datetime | None = None


class UserVideo(_VideoRow):
    """Videos of a user, newest first."""

    userid: UUID | None = None
    added_date: datetime | None = None
    videoid: UUID | None = None
    name: str | None = None
    preview_image_location: str | None = None


class LatestVideo(_VideoRow):
    """Videos added on a given day (``yyyymmdd``, UTC), newest first."""

    yyyymmdd: str | None = None
    added_date: datetime | None = None
    videoid: UUID | None = None
    userid: UUID | None = None
    name: str | None = None
    preview_image_location: str | None = None


class VideoByTag(_VideoRow):
    tag: str | None = None
    videoid: UUID | None = None
    added_date: datetime | None = None
    userid: UUID | None = None
    name: str | None = None
    preview_image_location: str | None = None
    tagged_date: datetime | None = None
