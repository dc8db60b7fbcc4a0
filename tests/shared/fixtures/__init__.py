"""Shared test fixtures."""

from tests.shared.fixtures.factories import (
    TestCustomerFactory,
    TestDealerFactory,
    TestProductFactory,
    TestStoreFactory,
    TestTransactionFactory,
)

__all__ = [
    "TestCustomerFactory",
    "TestDealerFactory",
    "TestProductFactory",
    "TestStoreFactory",
    "TestTransactionFactory",
]
