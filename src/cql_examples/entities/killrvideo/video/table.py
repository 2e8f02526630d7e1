"""Video table models: the main table and its denormalized lookups."""

from cassandra.cqlengine import columns
from cassandra.cqlengine.models import Model


class VideoTable(Model):
    __table_name__ = "videos"

    videoid = columns.UUID(partition_key=True)
    userid = columns.UUID()
    name = columns.Text()
    description = columns.Text()
    location = columns.Text()
    location_type = columns.Integer()
    preview_image_location = columns.Text()
    tags = columns.Set(columns.Text)
    added_date = columns.DateTime()


class UserVideoTable(Model):
    __table_name__ = "user_videos"

    userid = columns.UUID(partition_key=True)
    added_date = columns.DateTime(primary_key=True, clustering_order="DESC")
    videoid = columns.UUID(primary_key=True, clustering_order="ASC")
    name = columns.Text()
    preview_image_location = columns.Text()


class LatestVideoTable(Model):
    __table_name__ = "latest_videos"

    yyyymmdd = columns.Text(partition_key=True)
    added_date = columns.DateTime(primary_key=True, clustering_order="DESC")
    videoid = columns.UUID(primary_key=True, clustering_order="ASC")
    userid = columns.UUID()
    name = columns.Text()
    preview_image_location = columns.Text()


class VideoByTagTable(Model):
    __table_name__ = "videos_by_tag"

    tag = columns.Text(partition_key=True)
    videoid = columns.UUID(primary_key=True)
    added_date = columns.DateTime()
    userid = columns.UUID()
    name = columns.Text()
    preview_image_location = columns.Text()
    tagged_date = columns.DateTime()
