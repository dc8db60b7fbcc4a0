"""Customer entity."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Customer(BaseModel):
    """A buyer bound to exactly one dealer."""

    id: int
    name: str
    dealer_id: int

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        if not v or len(str(v).strip()) == 0:
            msg = "Customer name cannot be empty"
            raise ValueError(msg)
        return str(v).strip()
