"""Entity: Product."""

from dataclasses import dataclass

from src.cql_examples.core.repositories.base import CQL_INT_MAX, CQL_INT_MIN


@dataclass(frozen=True)
class Product:
    """Product record: immutable, compared and hashed by value."""

    id: int
    description: str | None

    def __post_init__(self):
        if not CQL_INT_MIN <= self.id <= CQL_INT_MAX:
            raise ValueError(f"id {self.id} is outside the range of a CQL int")
