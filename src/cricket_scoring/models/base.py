"""Base model classes for the scoring engine."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ScoringModel(BaseModel):
    """Base class for all mutable scoring state."""

    model_config = ConfigDict(extra="forbid")

    def to_dict(self) -> dict[str, Any]:
        """Convert model instance to a JSON-compatible dictionary."""
        return self.model_dump(mode="json")


class ValueModel(ScoringModel):
    """Base class for immutable value objects."""

    model_config = ConfigDict(extra="forbid", frozen=True)
