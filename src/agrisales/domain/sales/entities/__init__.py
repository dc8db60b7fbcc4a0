"""Entities of the sales domain."""

from agrisales.domain.sales.entities.customer import Customer
from agrisales.domain.sales.entities.dealer import Dealer
from agrisales.domain.sales.entities.product import Product
from agrisales.domain.sales.entities.transaction import Transaction

__all__ = [
    "Customer",
    "Dealer",
    "Product",
    "Transaction",
]
