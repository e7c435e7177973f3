"""Base models for domain entities."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DomainModel(BaseModel):
    """Immutable base for entities; changes go through ``model_copy(update=...)``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class CreatedModel(DomainModel):
    """Entity stamped with its creation time.

    Rows read from storage carry the database timestamp; entities built in
    memory fall back to the local clock.
    """

    created_at: datetime = Field(default_factory=datetime.now)
