"""Entities of the ``killrvideo`` keyspace: users, credentials and denormalized videos."""

from .mapper import KillrVideoMapper

__all__ = ["KillrVideoMapper"]
