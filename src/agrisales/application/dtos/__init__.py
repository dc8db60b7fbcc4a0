"""Data Transfer Objects for the presentation layer.

DTOs decouple the presentation layer from domain models,
providing stable interfaces for the CLI and any other front end.
"""

from agrisales.application.dtos.reports import (
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
