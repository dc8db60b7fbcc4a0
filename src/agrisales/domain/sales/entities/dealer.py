"""Dealer entity."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Dealer(BaseModel):
    """A sales-channel partner owning a disjoint set of customers."""

    id: int
    name: str

    model_config = ConfigDict(
        frozen=True,  # Immutable
        str_strip_whitespace=True,  # Auto-strip whitespace
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        if not v or len(str(v).strip()) == 0:
            msg = "Dealer name cannot be empty"
            raise ValueError(msg)
        return str(v).strip()

    def matches(self, dealer_id: str) -> bool:
        """Compare against a dealer filter given as a string id."""
        return str(self.id) == dealer_id
