"""Report DTOs - data transfer objects for charts and tables."""

from agrisales.application.dtos.reports.report_dto import (
    BreakdownItem,
    CategoryBreakdownResult,
    CategoryProductBreakdownResult,
    CategoryProductItem,
    CustomerCategoryBreakdownResult,
    DealerShare,
    DealerSummaryResult,
    ProductBreakdownItem,
    SalesOverTimeResult,
    TimeSeriesDataPoint,
    TopCustomerItem,
    TopCustomersResult,
)

__all__ = [
    "BreakdownItem",
    "CategoryBreakdownResult",
    "CategoryProductBreakdownResult",
    "CategoryProductItem",
    "CustomerCategoryBreakdownResult",
    "DealerShare",
    "DealerSummaryResult",
    "ProductBreakdownItem",
    "SalesOverTimeResult",
    "TimeSeriesDataPoint",
    "TopCustomerItem",
    "TopCustomersResult",
]
