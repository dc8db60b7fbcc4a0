"""Report read port (report-like interface).

This is the *application* read-side contract. It is intentionally report-like:
each method corresponds to one chart or table of the sales dashboard.
"""

from __future__ import annotations

from typing import Protocol

from agrisales.application.dtos.reports import (
    CategoryBreakdownResult,
    CategoryProductBreakdownResult,
    CustomerCategoryBreakdownResult,
    DealerSummaryResult,
    SalesOverTimeResult,
    TopCustomersResult,
)


class ReportReadPort(Protocol):
    """Report-like sales read interface.

    ``dealer_id`` is the dealer filter as a string id; ``None`` and ``""``
    both mean all dealers. ``period`` is a period token such as
    ``"past-12-months"`` or ``"Q1 2025"``.
    """

    def category_breakdown(
        self,
        *,
        period: str,
        dealer_id: str | None = None,
    ) -> CategoryBreakdownResult:
        """Sales per category (pie), every category of the active set present."""
        ...

    def category_product_breakdown(
        self,
        *,
        period: str,
        dealer_id: str | None = None,
    ) -> CategoryProductBreakdownResult:
        """Sales per category with nested sales per product."""
        ...

    def sales_over_time(
        self,
        *,
        period: str,
        dealer_id: str | None = None,
    ) -> SalesOverTimeResult:
        """Weekly (quarter) or monthly (rolling window) sales series."""
        ...

    def top_customers(
        self,
        *,
        period: str,
        top_n: int,
        dealer_id: str | None = None,
    ) -> TopCustomersResult:
        """Customers ranked by sales, truncated to ``top_n``."""
        ...

    def dealer_summary(
        self,
        *,
        period: str,
        dealer_id: str | None = None,
    ) -> DealerSummaryResult:
        """Network total, selected dealer total and the dealer's share."""
        ...

    def customer_category_breakdown(
        self,
        *,
        customer_id: int,
        dealer_id: str | None = None,
        period: str | None = None,
    ) -> CustomerCategoryBreakdownResult:
        """Categories bought by one customer; all time when ``period`` is None."""
        ...

    def category_sales_by_name(
        self,
        *,
        dealer_id: str | None = None,
        period: str | None = None,
    ) -> CategoryBreakdownResult:
        """Sales per category in alphabetical order (fixed bar chart axis)."""
        ...
