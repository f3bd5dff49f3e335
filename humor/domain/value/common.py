"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, compared by value.

    Used for data handed across layers, such as a provider identity.
    """

    model_config = ConfigDict(frozen=True)
