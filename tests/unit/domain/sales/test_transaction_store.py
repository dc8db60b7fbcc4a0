"""Tests for the TransactionStore aggregate."""

from datetime import date
from decimal import Decimal

import pytest

from agrisales.domain.sales.aggregates import (
    ALL_DEALERS_LABEL,
    UNKNOWN_DEALER_LABEL,
    TransactionStore,
)
from agrisales.domain.sales.entities import Customer, Product
from agrisales.domain.sales.exceptions import (
    DuplicateReferenceError,
    InconsistentReferenceError,
    MixedCategorySetError,
)
from agrisales.domain.sales.value_objects import Category, CategorySet, LegacyCategory
from agrisales.domain.shared.exceptions import ErrorCode
from tests.shared.fixtures.factories import (
    TestCustomerFactory,
    TestDealerFactory,
    TestProductFactory,
    TestStoreFactory,
    TestTransactionFactory,
)


class TestTransactionStoreConstruction:
    """Validation performed when a store is built."""

    def test_holds_records_in_order(self):
        store = TestStoreFactory.scenario_store()

        assert len(store) == 3
        assert [t.amount for t in store] == [
            Decimal("100"),
            Decimal("200"),
            Decimal("50"),
        ]
        assert [d.id for d in store.dealers] == [1, 2, 3]

    def test_duplicate_dealer_id_rejected(self):
        with pytest.raises(DuplicateReferenceError) as exc_info:
            TransactionStore(
                dealers=[TestDealerFactory.barrett(), TestDealerFactory.barrett()],
                customers=[],
                products=[],
                transactions=[],
            )

        assert exc_info.value.code is ErrorCode.DUPLICATE_REFERENCE
        assert exc_info.value.details == {"table": "dealer", "id": 1}

    def test_duplicate_product_id_rejected(self):
        clash = Product(id=1, name="Clash", category=Category.FUNGICIDE)

        with pytest.raises(DuplicateReferenceError):
            TransactionStore(
                dealers=TestDealerFactory.all(),
                customers=TestCustomerFactory.all(),
                products=[TestProductFactory.armour(), clash],
                transactions=[],
            )

    def test_category_outside_active_set_rejected(self):
        transaction = TestTransactionFactory.create(
            "10",
            date(2025, 1, 1),
            category=LegacyCategory.SEED,
        )

        with pytest.raises(MixedCategorySetError) as exc_info:
            TestStoreFactory.with_transactions([transaction])

        assert exc_info.value.code is ErrorCode.MIXED_CATEGORY_SET
        assert exc_info.value.details["category"] == "seed"

    def test_shared_literal_bound_to_active_set(self):
        transaction = TestTransactionFactory.create(
            "10",
            date(2025, 1, 1),
            category=LegacyCategory.HERBICIDE,
        )

        store = TestStoreFactory.with_transactions([transaction])

        assert store.transactions[0].category is Category.HERBICIDE

    def test_legacy_store_keeps_legacy_categories(self):
        store = TestStoreFactory.legacy_store()

        assert store.category_set is CategorySet.LEGACY
        assert len(store.categories) == 9
        assert store.transactions[1].category is LegacyCategory.FUNGICIDEE


class TestTransactionStoreLookups:
    def test_reference_lookups(self):
        store = TestStoreFactory.scenario_store()

        assert store.dealer(2).name == "Landus"
        assert store.customer(1).name == "Alpha Farms"
        assert store.product(3).name == "Akito"
        assert store.customer(99) is None

    def test_products_in_category(self):
        store = TestStoreFactory.scenario_store()

        assert [p.name for p in store.products_in(Category.FUNGICIDE)] == [
            "Bluestone",
        ]
        assert store.products_in(Category.ADJUVANTS) == []

    def test_dealer_name_labels(self):
        store = TestStoreFactory.scenario_store()

        assert store.dealer_name(None) == ALL_DEALERS_LABEL
        assert store.dealer_name("") == ALL_DEALERS_LABEL
        assert store.dealer_name("3") == "Big Yield"
        assert store.dealer_name("42") == UNKNOWN_DEALER_LABEL

    def test_reference_tables_are_read_only(self):
        store = TestStoreFactory.scenario_store()

        with pytest.raises(TypeError):
            store.dealer_index[9] = TestDealerFactory.barrett()  # type: ignore[index]


class TestCheckReferences:
    """Reference checks used by the filter to skip inconsistent records."""

    def test_consistent_transaction_passes(self):
        store = TestStoreFactory.scenario_store()

        store.check_references(store.transactions[0])

    def test_customer_of_other_dealer(self):
        transaction = TestTransactionFactory.create(
            "10",
            date(2025, 1, 1),
            customer=TestCustomerFactory.alpha(),
            dealer=TestDealerFactory.landus(),
        )
        store = TestStoreFactory.with_transactions([transaction])

        with pytest.raises(InconsistentReferenceError, match="another dealer"):
            store.check_references(transaction)

    def test_unknown_customer(self):
        stranger = Customer(id=77, name="Stranger", dealer_id=1)
        transaction = TestTransactionFactory.create(
            "10",
            date(2025, 1, 1),
            customer=stranger,
        )
        store = TestStoreFactory.with_transactions([transaction])

        with pytest.raises(InconsistentReferenceError, match="unknown customer"):
            store.check_references(transaction)

    def test_product_category_mismatch(self):
        transaction = TestTransactionFactory.create(
            "10",
            date(2025, 1, 1),
            category=Category.INSECTICIDE,
            product=TestProductFactory.armour(),
        )
        store = TestStoreFactory.with_transactions([transaction])

        with pytest.raises(InconsistentReferenceError) as exc_info:
            store.check_references(transaction)

        assert exc_info.value.code is ErrorCode.INCONSISTENT_REFERENCE
        assert exc_info.value.details["product_id"] == TestProductFactory.ARMOUR_ID
