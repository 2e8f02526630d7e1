"""Entity: Product."""

from pydantic import BaseModel, ConfigDict, Field

from src.cql_examples.core.repositories.base import CQL_INT_MAX, CQL_INT_MIN


class Product(BaseModel):
    """Mutable product entity.

    Fields can be reassigned after construction and every field has a default,
    so ``Product()`` is a valid empty instance to fill in later.
    """

    model_config = ConfigDict(validate_assignment=True, from_attributes=True)

    id: int = Field(
        default=0, ge=CQL_INT_MIN, le=CQL_INT_MAX, description="Partition key of the product row"
    )
    description: str | None = Field(default=None, description="Free-form description")


class ImmutableProduct(BaseModel):
    """Immutable view of the same ``product`` row.

    You would typically pick either this or :class:`Product`, whichever fits
    your programming style; both are mapped here for demonstration purposes.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int = Field(ge=CQL_INT_MIN, le=CQL_INT_MAX)
    description: str | None = None
