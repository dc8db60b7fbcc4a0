"""Transaction store aggregate.

The store is the single dataset every report reads from. It is constructed
once (by the demo generator or any other loader), validated on construction,
and never mutated afterwards. Rebuilding the dataset means constructing a new
store.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, TypeVar

from agrisales.domain.sales.exceptions import (
    DuplicateReferenceError,
    InconsistentReferenceError,
    MixedCategorySetError,
)
from agrisales.domain.sales.value_objects.category import CategorySet, SalesCategory

if TYPE_CHECKING:
    from agrisales.domain.sales.entities import (
        Customer,
        Dealer,
        Product,
        Transaction,
    )

logger = logging.getLogger(__name__)

ALL_DEALERS_LABEL = "All Dealers"
UNKNOWN_DEALER_LABEL = "Selected Dealer"

_RecordT = TypeVar("_RecordT", "Dealer", "Customer", "Product")


def _index_by_id(table: str, records: Iterable[_RecordT]) -> dict[int, _RecordT]:
    index: dict[int, _RecordT] = {}
    for record in records:
        if record.id in index:
            raise DuplicateReferenceError(table, record.id)
        index[record.id] = record
    return index


class TransactionStore:
    """Read-only collection of transactions plus their reference tables."""

    def __init__(
        self,
        dealers: Iterable[Dealer],
        customers: Iterable[Customer],
        products: Iterable[Product],
        transactions: Iterable[Transaction],
        category_set: CategorySet = CategorySet.CURRENT,
    ):
        """
        Build and validate a store.

        Parameters
        ----------
        dealers
            Dealer reference table (ids must be unique)
        customers
            Customer reference table (ids must be unique)
        products
            Product reference table (ids must be unique)
        transactions
            Sales facts; their order is the tie-break order of every ranking
        category_set
            The category enum every product and transaction is bound to

        Raises
        ------
        DuplicateReferenceError
            If a reference table repeats an id
        MixedCategorySetError
            If a product or transaction uses a category outside the set
        """
        self._category_set = category_set

        dealer_index = _index_by_id("dealer", dealers)
        customer_index = _index_by_id("customer", customers)
        product_index = _index_by_id(
            "product",
            (self._bind_product(p) for p in products),
        )

        self._dealers = MappingProxyType(dealer_index)
        self._customers = MappingProxyType(customer_index)
        self._products = MappingProxyType(product_index)
        self._transactions = tuple(self._bind_transaction(t) for t in transactions)
        self._categories = tuple(category_set.members())

        logger.debug(
            "Transaction store built: %d dealers, %d customers, %d products, "
            "%d transactions (%s categories)",
            len(self._dealers),
            len(self._customers),
            len(self._products),
            len(self._transactions),
            category_set.value,
        )

    def _coerce_category(self, value: SalesCategory | str) -> SalesCategory:
        try:
            return self._category_set.coerce(value)
        except ValueError:
            raw = getattr(value, "value", value)
            raise MixedCategorySetError(str(raw), self._category_set.value) from None

    def _bind_product(self, product: Product) -> Product:
        category = self._coerce_category(product.category)
        if category is product.category:
            return product
        return product.model_copy(update={"category": category})

    def _bind_transaction(self, transaction: Transaction) -> Transaction:
        update: dict[str, object] = {}
        category = self._coerce_category(transaction.category)
        if category is not transaction.category:
            update["category"] = category
        if transaction.product is not None:
            product = self._bind_product(transaction.product)
            if product is not transaction.product:
                update["product"] = product
        if not update:
            return transaction
        return transaction.model_copy(update=update)

    @property
    def category_set(self) -> CategorySet:
        return self._category_set

    @property
    def categories(self) -> tuple[SalesCategory, ...]:
        """The full category universe, in canonical order."""
        return self._categories

    @property
    def dealers(self) -> tuple[Dealer, ...]:
        return tuple(self._dealers.values())

    @property
    def customers(self) -> tuple[Customer, ...]:
        return tuple(self._customers.values())

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products.values())

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self._transactions

    @property
    def dealer_index(self) -> Mapping[int, Dealer]:
        return self._dealers

    @property
    def customer_index(self) -> Mapping[int, Customer]:
        return self._customers

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    def dealer(self, dealer_id: int) -> Dealer | None:
        return self._dealers.get(dealer_id)

    def customer(self, customer_id: int) -> Customer | None:
        return self._customers.get(customer_id)

    def product(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def products_in(self, category: SalesCategory) -> list[Product]:
        """Reference products of one category, in reference-table order."""
        return [p for p in self._products.values() if p.category is category]

    def dealer_name(self, dealer_id: str | None) -> str:
        """Display name for a dealer filter value."""
        if not dealer_id:
            return ALL_DEALERS_LABEL
        for dealer in self._dealers.values():
            if dealer.matches(dealer_id):
                return dealer.name
        return UNKNOWN_DEALER_LABEL

    def check_references(self, transaction: Transaction) -> None:
        """Verify a transaction against the reference tables.

        Raises
        ------
        InconsistentReferenceError
            If the dealer, customer or product is unknown, or if the
            customer/dealer or product/category bindings disagree.
        """
        details = {
            "dealer_id": transaction.dealer.id,
            "customer_id": transaction.customer.id,
            "product_id": transaction.product.id if transaction.product else None,
        }

        if transaction.dealer.id not in self._dealers:
            raise InconsistentReferenceError("unknown dealer", details)

        customer = self._customers.get(transaction.customer.id)
        if customer is None:
            raise InconsistentReferenceError("unknown customer", details)
        if customer.dealer_id != transaction.dealer.id:
            raise InconsistentReferenceError(
                "customer belongs to another dealer",
                details,
            )

        if transaction.product is None:
            return
        product = self._products.get(transaction.product.id)
        if product is None:
            raise InconsistentReferenceError("unknown product", details)
        if product.category is not transaction.category:
            raise InconsistentReferenceError(
                "product category does not match transaction category",
                details,
            )
