from src.cql_examples.core.repositories.base import CqlMapper

from .user.dao import UserDao
from .video.dao import VideoDao


class KillrVideoMapper(CqlMapper):
    """Builds the KillrVideo DAOs, all bound to the mapper's default keyspace."""

    def user_dao(self) -> UserDao:
        return self._dao(UserDao)

    def video_dao(self) -> VideoDao:
        return self._dao(VideoDao)
