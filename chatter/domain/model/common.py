"""Shared base for domain entities."""

from datetime import datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


class DomainModel(BaseModel):
    """Immutable entity with ``created_at``/``updated_at`` timestamps.

    Entities change by producing a new copy; stores replace the old copy
    wholesale.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def touched(self, **changes: Any) -> Self:
        """Copy with ``changes`` applied and ``updated_at`` set to now."""
        return self.model_copy(update={**changes, "updated_at": datetime.now()})
