"""Entities: User and UserCredentials."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """A registered user. The password never lives on this entity."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    userid: UUID | None = None
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    created_date: datetime | None = None


class UserCredentials(BaseModel):
    """Login credentials, keyed by email so that an address can only be used once."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    email: str
    password: str
    userid: UUID
