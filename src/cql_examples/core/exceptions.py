from typing import TypeVar

T = TypeVar("T")


class EntityNotFoundError(LookupError):
    """Raised when a row that is expected to exist cannot be found."""

    def __init__(self, entity: str, key: object):
        super().__init__(f"{entity} not found for key {key!r}")
        self.entity = entity
        self.key = key


def ensure_found(value: T | None, entity: str, key: object) -> T:
    """Return ``value``, raising :class:`EntityNotFoundError` when it is ``None``."""
    if value is None:
        raise EntityNotFoundError(entity, key)
    return value
