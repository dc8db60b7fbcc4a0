"""Tests for SalesFilterService (dealer and date predicates)."""

import logging
from datetime import date

import pytest

from agrisales.domain.sales.services import SalesFilterService, normalize_dealer_id
from agrisales.domain.sales.value_objects import PeriodKind, ReportingPeriod
from tests.shared.fixtures.factories import (
    TestCustomerFactory,
    TestDealerFactory,
    TestStoreFactory,
    TestTransactionFactory,
)


def _quarter(start: date, end: date) -> ReportingPeriod:
    return ReportingPeriod(
        token="test",
        label="Test",
        start=start,
        end=end,
        kind=PeriodKind.QUARTER,
    )


Q1_2025 = _quarter(date(2025, 1, 1), date(2025, 3, 31))


class TestNormalizeDealerId:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(None, None), ("", None), ("   ", None), (" 2 ", "2"), (3, "3")],
    )
    def test_normalize(self, raw, expected):
        assert normalize_dealer_id(raw) == expected


class TestDealerFilter:
    def test_no_filter_keeps_everything_in_order(self):
        store = TestStoreFactory.scenario_store()

        result = SalesFilterService.apply(store)

        assert result == list(store.transactions)

    def test_empty_string_means_all_dealers(self):
        store = TestStoreFactory.scenario_store()

        assert len(SalesFilterService.apply(store, dealer_id="")) == 3

    def test_dealer_id_compared_as_string(self):
        store = TestStoreFactory.scenario_store()

        result = SalesFilterService.apply(store, dealer_id=" 1 ")

        assert [t.customer.id for t in result] == [1, 1]

    def test_unknown_dealer_matches_nothing(self):
        store = TestStoreFactory.scenario_store()

        assert SalesFilterService.apply(store, dealer_id="9") == []


class TestDateFilter:
    def test_bounds_are_inclusive(self):
        store = TestStoreFactory.with_transactions(
            [
                TestTransactionFactory.create("1", date(2024, 12, 31)),
                TestTransactionFactory.create("2", date(2025, 1, 1)),
                TestTransactionFactory.create("3", date(2025, 3, 31)),
                TestTransactionFactory.create("4", date(2025, 4, 1)),
            ],
        )

        result = SalesFilterService.apply(store, period=Q1_2025)

        assert [t.date for t in result] == [date(2025, 1, 1), date(2025, 3, 31)]

    def test_dealer_and_date_combined(self):
        store = TestStoreFactory.scenario_store()
        january = _quarter(date(2025, 1, 1), date(2025, 1, 31))

        result = SalesFilterService.apply(store, dealer_id="1", period=january)

        assert len(result) == 1
        assert result[0].date == date(2025, 1, 15)


class TestInconsistentRecords:
    def test_inconsistent_transaction_is_skipped_and_logged(self, caplog):
        good = TestTransactionFactory.create("10", date(2025, 1, 2))
        bad = TestTransactionFactory.create(
            "99",
            date(2025, 1, 3),
            customer=TestCustomerFactory.alpha(),
            dealer=TestDealerFactory.landus(),
        )
        store = TestStoreFactory.with_transactions([good, bad])

        with caplog.at_level(logging.WARNING):
            result = SalesFilterService.apply(store)

        assert result == [good]
        assert "customer belongs to another dealer" in caplog.text
        assert "Skipped 1 inconsistent transaction(s)" in caplog.text


class TestForCustomer:
    def test_keeps_only_that_customer(self):
        store = TestStoreFactory.scenario_store()

        result = SalesFilterService.for_customer(list(store), 2)

        assert [t.customer.name for t in result] == ["Bravo Growers"]
