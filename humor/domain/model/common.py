"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Entity read from or written to the caption store.

    Entities are frozen: a vote change produces a new ``CaptionVote`` via
    ``model_copy(update=...)``, never an in-place edit.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
