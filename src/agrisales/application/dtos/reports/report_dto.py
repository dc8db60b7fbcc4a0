"""Report DTOs for charts and tables.

These DTOs carry chart-ready data: breakdowns for pie and bar charts, time
series for line charts, and ranked lists for leaderboards. Amounts are raw
``Decimal`` values; currency formatting is left to the presentation layer.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass
class BreakdownItem:
    """Single category in a breakdown (one pie slice or bar).

    Carries the category literal for drill-down alongside its display name.
    """

    category: str  # Literal value, e.g. "seed-treatment"
    label: str  # Display name, e.g. "Seed treatment"
    amount: Decimal
    percentage: Decimal  # 0-100 scale


@dataclass
class CategoryBreakdownResult:
    """Sales distributed across categories for one dealer filter and period."""

    period_label: str  # "Q1 2025", "Past 12 Months" or "All Time"
    dealer_name: str
    items: list[BreakdownItem]
    total: Decimal
    currency: str
    category_count: int = 0  # Number of categories with sales


@dataclass
class ProductBreakdownItem:
    """Single product inside a category; percentage is of the category total."""

    product_id: int
    name: str
    amount: Decimal
    percentage: Decimal


@dataclass
class CategoryProductItem:
    """Category slice with its nested product breakdown."""

    category: str
    label: str
    amount: Decimal
    percentage: Decimal  # Of the report total
    products: list[ProductBreakdownItem] = field(default_factory=list)
    unassigned: Decimal = Decimal("0")  # Sales recorded without a product


@dataclass
class CategoryProductBreakdownResult:
    """Two-level breakdown: category, then product within category."""

    period_label: str
    dealer_name: str
    items: list[CategoryProductItem]
    total: Decimal
    currency: str


@dataclass
class TimeSeriesDataPoint:
    """Single bucket of a time series (one week or one month)."""

    period: str  # Bucket key, e.g. "week-3" or "2025-01"
    period_label: str  # e.g. "1/15-1/21" or "Jan 2025"
    start: date
    end: date
    value: Decimal


@dataclass
class SalesOverTimeResult:
    """Result for the sales trend chart.

    Weekly buckets within a quarter, monthly buckets across the rolling
    window. Every bucket is present, in chronological order.
    """

    period_label: str
    dealer_name: str
    granularity: str  # "week" or "month"
    data_points: list[TimeSeriesDataPoint]
    currency: str
    total: Decimal  # Sum of all buckets
    average: Decimal  # Average per bucket
    min_value: Decimal = Decimal("0")
    max_value: Decimal = Decimal("0")


@dataclass
class TopCustomerItem:
    """Single customer on the leaderboard."""

    rank: int
    customer_id: int
    name: str
    amount: Decimal
    percentage_of_total: Decimal
    dealer_name: Optional[str] = None  # Only set when no dealer filter is active


@dataclass
class TopCustomersResult:
    """Result for the top customers leaderboard."""

    period_label: str
    dealer_name: str
    items: list[TopCustomerItem]
    total_sales: Decimal  # Across all customers, not just the top N
    currency: str
    top_n: int


@dataclass
class DealerShare:
    """One dealer's share of the network total."""

    dealer_id: int
    name: str
    amount: Decimal
    percentage: Decimal


@dataclass
class DealerSummaryResult:
    """Headline numbers: network total against the selected dealer."""

    period_label: str
    dealer_name: str
    total: Decimal  # All dealers
    dealer_total: Decimal  # Selected dealer, equals total when unfiltered
    percentage: Decimal  # dealer_total / total * 100
    currency: str
    dealers: list[DealerShare] = field(default_factory=list)


@dataclass
class CustomerCategoryBreakdownResult:
    """Categories one customer has bought, largest first.

    Only categories with sales are listed.
    """

    customer_id: int
    customer_name: str
    period_label: str
    dealer_name: str
    items: list[BreakdownItem]
    total: Decimal
    currency: str
