"""Product entity."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from agrisales.domain.sales.value_objects.category import SalesCategory


class Product(BaseModel):
    """A sellable product; its category never changes."""

    id: int
    name: str
    category: SalesCategory

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        if not v or len(str(v).strip()) == 0:
            msg = "Product name cannot be empty"
            raise ValueError(msg)
        return str(v).strip()
