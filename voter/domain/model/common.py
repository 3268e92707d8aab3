"""Base model for board voting entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen: a status change or a settings update produces a new
    instance which the owning service hands to its repository.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # NewType identifiers, value objects
    )
