"""Tests for InMemoryReportAdapter against the hand-built scenario dataset.

Scenario: Alpha Farms/Barrett/$100/herbicide/Jan 2025,
Bravo Growers/Landus/$200/fungicide/Feb 2025,
Alpha Farms/Barrett/$50/herbicide/Mar 2025.
"""

from datetime import date
from decimal import Decimal

import pytest

from agrisales.domain.sales.exceptions import (
    CustomerNotFoundError,
    InvalidPeriodError,
    InvalidTopNError,
)
from agrisales.infrastructure.reporting import InMemoryReportAdapter
from tests.shared.fixtures.factories import (
    TestCustomerFactory,
    TestDealerFactory,
    TestStoreFactory,
    TestTransactionFactory,
)

pytestmark = pytest.mark.scenario


class TestCategoryBreakdown:
    def test_scenario_amounts(self, scenario_adapter):
        result = scenario_adapter.category_breakdown(period="Q1 2025")

        amounts = {item.category: item.amount for item in result.items}
        assert amounts == {
            "fungicide": Decimal("200"),
            "herbicide": Decimal("150"),
            "biologicals": Decimal("0"),
            "micronutrients": Decimal("0"),
            "adjuvants": Decimal("0"),
            "insecticide": Decimal("0"),
        }
        assert result.total == Decimal("350")
        assert result.category_count == 2
        assert result.currency == "USD"
        assert result.period_label == "Q1 2025"
        assert result.dealer_name == "All Dealers"

    def test_descending_with_zero_categories_in_canonical_order(
        self,
        scenario_adapter,
    ):
        result = scenario_adapter.category_breakdown(period="Q1 2025")

        assert [item.category for item in result.items] == [
            "fungicide",
            "herbicide",
            "biologicals",
            "micronutrients",
            "adjuvants",
            "insecticide",
        ]

    def test_percentages_and_labels(self, scenario_adapter):
        result = scenario_adapter.category_breakdown(period="Q1 2025")

        first, second = result.items[:2]
        assert (first.label, first.percentage) == ("Fungicide", Decimal("57.1"))
        assert (second.label, second.percentage) == ("Herbicide", Decimal("42.9"))
        assert result.items[-1].percentage == Decimal("0.0")

    def test_dealer_filter(self, scenario_adapter):
        result = scenario_adapter.category_breakdown(period="Q1 2025", dealer_id="2")

        assert result.total == Decimal("200")
        assert result.dealer_name == "Landus"

    def test_empty_period_is_not_an_error(self, scenario_adapter):
        result = scenario_adapter.category_breakdown(period="Q3 2024")

        assert result.total == Decimal("0")
        assert len(result.items) == 6
        assert all(item.percentage == Decimal("0.0") for item in result.items)

    def test_invalid_period(self, scenario_adapter):
        with pytest.raises(InvalidPeriodError):
            scenario_adapter.category_breakdown(period="Q5 2025")

    def test_legacy_store_reports_all_nine_categories(self, resolver):
        adapter = InMemoryReportAdapter(TestStoreFactory.legacy_store(), resolver)

        result = adapter.category_breakdown(period="Q2 2024")

        assert len(result.items) == 9
        assert result.items[0].category == "seed-treatment"
        assert result.items[0].label == "Seed treatment"
        assert result.items[1].category == "fungicidee"


class TestCategoryProductBreakdown:
    def test_nested_products(self, scenario_adapter):
        result = scenario_adapter.category_product_breakdown(period="Q1 2025")

        assert result.total == Decimal("350")
        assert [item.category for item in result.items[:2]] == [
            "fungicide",
            "herbicide",
        ]
        fungicide = result.items[0]
        assert [(p.name, p.amount) for p in fungicide.products] == [
            ("Bluestone", Decimal("200")),
        ]
        assert fungicide.products[0].percentage == Decimal("100.0")

    def test_reference_products_without_sales_present(self, scenario_adapter):
        result = scenario_adapter.category_product_breakdown(period="Q1 2025")

        insecticide = next(i for i in result.items if i.category == "insecticide")
        assert [(p.name, p.amount) for p in insecticide.products] == [
            ("Akito", Decimal("0")),
        ]
        assert insecticide.products[0].percentage == Decimal("0.0")

    def test_product_less_sales_reported_as_unassigned(self, resolver):
        store = TestStoreFactory.with_transactions(
            [TestTransactionFactory.create("75", date(2025, 2, 1))],
        )
        adapter = InMemoryReportAdapter(store, resolver)

        result = adapter.category_product_breakdown(period="Q1 2025")

        herbicide = result.items[0]
        assert herbicide.amount == Decimal("75")
        assert herbicide.unassigned == Decimal("75")
        assert result.total == Decimal("75")


class TestSalesOverTime:
    def test_weekly_buckets_for_quarter(self, scenario_adapter):
        result = scenario_adapter.sales_over_time(period="Q1 2025")

        values = [point.value for point in result.data_points]
        assert len(values) == 13
        assert values[2] == Decimal("100")  # Jan 15
        assert values[5] == Decimal("200")  # Feb 10
        assert values[11] == Decimal("50")  # Mar 20
        assert sum(values) == Decimal("350")
        assert result.granularity == "week"
        assert result.data_points[0].period_label == "1/1-1/7"

    def test_summary_statistics(self, scenario_adapter):
        result = scenario_adapter.sales_over_time(period="Q1 2025")

        assert result.total == Decimal("350")
        assert result.average == Decimal("26.92")
        assert result.min_value == Decimal("0")
        assert result.max_value == Decimal("200")

    def test_monthly_buckets_for_rolling_window(self, scenario_adapter):
        result = scenario_adapter.sales_over_time(period="past-12-months")

        assert result.granularity == "month"
        assert [p.period for p in result.data_points[3:6]] == [
            "2025-01",
            "2025-02",
            "2025-03",
        ]
        assert [p.value for p in result.data_points[3:6]] == [
            Decimal("100"),
            Decimal("200"),
            Decimal("50"),
        ]
        assert result.data_points[0].period_label == "Oct 2024"

    def test_empty_series_keeps_every_bucket(self, scenario_adapter):
        result = scenario_adapter.sales_over_time(period="Q2 2025", dealer_id="3")

        assert len(result.data_points) == 13
        assert result.total == Decimal("0")
        assert result.max_value == Decimal("0")


class TestTopCustomers:
    def test_ranked_descending(self, scenario_adapter):
        result = scenario_adapter.top_customers(period="Q1 2025", top_n=5)

        assert [(i.name, i.amount) for i in result.items] == [
            ("Bravo Growers", Decimal("200")),
            ("Alpha Farms", Decimal("150")),
        ]
        assert [i.rank for i in result.items] == [1, 2]
        assert result.total_sales == Decimal("350")

    def test_top_one(self, scenario_adapter):
        result = scenario_adapter.top_customers(period="Q1 2025", top_n=1)

        assert [(i.name, i.amount) for i in result.items] == [
            ("Bravo Growers", Decimal("200")),
        ]

    def test_top_one_for_dealer(self, scenario_adapter):
        result = scenario_adapter.top_customers(
            period="Q1 2025",
            top_n=1,
            dealer_id="1",
        )

        assert [(i.name, i.amount) for i in result.items] == [
            ("Alpha Farms", Decimal("150")),
        ]
        assert result.items[0].percentage_of_total == Decimal("100.0")

    def test_dealer_name_only_when_unfiltered(self, scenario_adapter):
        unfiltered = scenario_adapter.top_customers(period="Q1 2025", top_n=2)
        filtered = scenario_adapter.top_customers(
            period="Q1 2025",
            top_n=2,
            dealer_id="2",
        )

        assert [i.dealer_name for i in unfiltered.items] == ["Landus", "Barrett"]
        assert [i.dealer_name for i in filtered.items] == [None]

    def test_invalid_top_n(self, scenario_adapter):
        with pytest.raises(InvalidTopNError):
            scenario_adapter.top_customers(period="Q1 2025", top_n=0)


class TestDealerSummary:
    def test_filtered_dealer(self, scenario_adapter):
        result = scenario_adapter.dealer_summary(period="Q1 2025", dealer_id="1")

        assert result.total == Decimal("350")
        assert result.dealer_total == Decimal("150")
        assert result.percentage == Decimal("42.9")
        assert result.dealer_name == "Barrett"
        assert result.dealers == []

    def test_unfiltered_breakdown_in_reference_order(self, scenario_adapter):
        result = scenario_adapter.dealer_summary(period="Q1 2025")

        assert result.dealer_total == result.total == Decimal("350")
        assert result.percentage == Decimal("100.0")
        assert [(d.name, d.amount, d.percentage) for d in result.dealers] == [
            ("Barrett", Decimal("150"), Decimal("42.9")),
            ("Landus", Decimal("200"), Decimal("57.1")),
            ("Big Yield", Decimal("0"), Decimal("0.0")),
        ]

    def test_unknown_dealer(self, scenario_adapter):
        result = scenario_adapter.dealer_summary(period="Q1 2025", dealer_id="9")

        assert result.dealer_name == "Selected Dealer"
        assert result.dealer_total == Decimal("0")
        assert result.percentage == Decimal("0.0")

    def test_empty_period(self, scenario_adapter):
        result = scenario_adapter.dealer_summary(period="Q1 2024", dealer_id="1")

        assert result.total == result.dealer_total == Decimal("0")
        assert result.percentage == Decimal("0.0")


class TestCustomerCategoryBreakdown:
    def test_only_categories_with_sales(self, scenario_adapter):
        result = scenario_adapter.customer_category_breakdown(
            customer_id=TestCustomerFactory.ALPHA_ID,
        )

        assert [(i.category, i.amount) for i in result.items] == [
            ("herbicide", Decimal("150")),
        ]
        assert result.items[0].percentage == Decimal("100.0")
        assert result.customer_name == "Alpha Farms"
        assert result.period_label == "All Time"

    def test_period_narrows_sales(self, scenario_adapter):
        result = scenario_adapter.customer_category_breakdown(
            customer_id=TestCustomerFactory.ALPHA_ID,
            period="Q2 2025",
        )

        assert result.items == []
        assert result.total == Decimal("0")

    def test_customer_without_sales(self, scenario_adapter):
        result = scenario_adapter.customer_category_breakdown(
            customer_id=TestCustomerFactory.CHARLIE_ID,
        )

        assert result.items == []

    def test_unknown_customer(self, scenario_adapter):
        with pytest.raises(CustomerNotFoundError):
            scenario_adapter.customer_category_breakdown(customer_id=99)


class TestCategorySalesByName:
    def test_alphabetical_regardless_of_value(self, scenario_adapter):
        result = scenario_adapter.category_sales_by_name()

        assert [item.label for item in result.items] == [
            "Adjuvants",
            "Biologicals",
            "Fungicide",
            "Herbicide",
            "Insecticide",
            "Micronutrients",
        ]
        assert result.total == Decimal("350")
        assert result.period_label == "All Time"

    def test_with_dealer_and_period(self, scenario_adapter):
        result = scenario_adapter.category_sales_by_name(
            dealer_id=str(TestDealerFactory.BARRETT_ID),
            period="Q1 2025",
        )

        herbicide = next(i for i in result.items if i.category == "herbicide")
        assert herbicide.amount == Decimal("150")
        assert herbicide.percentage == Decimal("100.0")
        assert result.total == Decimal("150")
