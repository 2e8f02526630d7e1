"""Shared pytest fixtures and helpers."""

from .cql import *  # noqa: F401,F403
