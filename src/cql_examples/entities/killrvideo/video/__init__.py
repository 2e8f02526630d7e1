"""Entity package: Video and its denormalized views."""

from .dao import VideoDao
from .entity import LatestVideo, UserVideo, Video, VideoByTag
from .table import LatestVideoTable, UserVideoTable, VideoByTagTable, VideoTable

__all__ = [
    "Video",
    "UserVideo",
    "LatestVideo",
    "VideoByTag",
    "VideoDao",
    "VideoTable",
    "UserVideoTable",
    "LatestVideoTable",
    "VideoByTagTable",
]
