"""Sales transaction entity."""

from datetime import date
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from agrisales.domain.sales.entities.customer import Customer
from agrisales.domain.sales.entities.dealer import Dealer
from agrisales.domain.sales.entities.product import Product
from agrisales.domain.sales.value_objects.category import SalesCategory

# Constants for validation
DECIMAL_PLACES_LIMIT = -2


class Transaction(BaseModel):
    """Immutable sales fact: one customer buying from one dealer on one day."""

    amount: Decimal
    category: SalesCategory
    customer: Customer
    date: date
    dealer: Dealer
    product: Optional[Product] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Decimal:
        if not isinstance(v, Decimal):
            v = Decimal(str(v))

        if not v.is_finite():
            msg = "Transaction amount must be a finite number"
            raise ValueError(msg)

        decimal_places = v.as_tuple().exponent
        if isinstance(decimal_places, int) and decimal_places < DECIMAL_PLACES_LIMIT:
            msg = "Transaction amount cannot have more than 2 decimal places"
            raise ValueError(msg)

        if v < 0:
            msg = f"Transaction amount cannot be negative: {v}"
            raise ValueError(msg)

        return v

    @property
    def dealer_key(self) -> str:
        """Dealer id in the string form used by dealer filters."""
        return str(self.dealer.id)
