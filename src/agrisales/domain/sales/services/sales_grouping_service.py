"""Group filtered transactions by a key and sum their amounts."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Optional, TypeVar

if TYPE_CHECKING:
    from agrisales.domain.sales.entities import Product, Transaction
    from agrisales.domain.sales.value_objects import SalesCategory

K = TypeVar("K", bound=Hashable)

ZERO = Decimal("0")


class GroupingKey(str, Enum):
    """Dimension by which transaction amounts are summed."""

    CATEGORY = "category"
    CATEGORY_PRODUCT = "category_product"
    CUSTOMER = "customer"
    BUCKET = "bucket"
    DEALER = "dealer"


@dataclass
class CategoryProductTotals:
    """Per-category total with nested per-product totals."""

    category: SalesCategory
    total: Decimal = ZERO
    products: dict[int, Decimal] = field(default_factory=dict)
    unassigned: Decimal = ZERO  # Transactions without a product


_KEY_FUNCS: dict[GroupingKey, Callable[[Transaction], Hashable]] = {
    GroupingKey.CATEGORY: lambda t: t.category,
    GroupingKey.CUSTOMER: lambda t: t.customer.id,
    GroupingKey.DEALER: lambda t: t.dealer.id,
}


class SalesGroupingService:
    """Pure keyed summation; inputs are never mutated."""

    @staticmethod
    def group(
        transactions: Iterable[Transaction],
        key: GroupingKey,
        universe: Optional[Sequence[K]] = None,
        key_func: Optional[Callable[[Transaction], K]] = None,
    ) -> dict[K, Decimal]:
        """Sum amounts per group key.

        Keys listed in ``universe`` are always present (zero when nothing
        matched) and come first, in universe order. Other keys follow in
        order of first occurrence.
        """
        if key is GroupingKey.CATEGORY_PRODUCT:
            msg = "Use group_category_products for two-level grouping"
            raise ValueError(msg)

        func = key_func or _KEY_FUNCS.get(key)
        if func is None:
            msg = f"Grouping by {key.value} requires a key_func"
            raise ValueError(msg)

        totals: dict[K, Decimal] = {k: ZERO for k in universe or ()}
        for transaction in transactions:
            group_key = func(transaction)
            totals[group_key] = totals.get(group_key, ZERO) + transaction.amount
        return totals

    @staticmethod
    def group_category_products(
        transactions: Iterable[Transaction],
        categories: Sequence[SalesCategory],
        products: Sequence[Product],
    ) -> dict[SalesCategory, CategoryProductTotals]:
        """Two-level grouping: category, then product within category.

        The product universe of each category comes from ``products`` (the
        full reference list), so products without sales are present with 0.
        """
        totals: dict[SalesCategory, CategoryProductTotals] = {
            category: CategoryProductTotals(category=category)
            for category in categories
        }
        for product in products:
            bucket = totals.setdefault(
                product.category,
                CategoryProductTotals(category=product.category),
            )
            bucket.products[product.id] = ZERO

        for transaction in transactions:
            bucket = totals.setdefault(
                transaction.category,
                CategoryProductTotals(category=transaction.category),
            )
            bucket.total += transaction.amount
            if transaction.product is None:
                bucket.unassigned += transaction.amount
            else:
                product_id = transaction.product.id
                bucket.products[product_id] = (
                    bucket.products.get(product_id, ZERO) + transaction.amount
                )
        return totals
