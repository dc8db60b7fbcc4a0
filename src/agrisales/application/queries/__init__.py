"""Application queries (read side)."""

from agrisales.application.queries.reports import (
    CategoryBreakdownQuery,
    CategoryProductBreakdownQuery,
    CategorySalesByNameQuery,
    CustomerCategoryBreakdownQuery,
    DealerSummaryQuery,
    SalesOverTimeQuery,
    TopCustomersQuery,
)

__all__ = [
    "CategoryBreakdownQuery",
    "CategoryProductBreakdownQuery",
    "CategorySalesByNameQuery",
    "CustomerCategoryBreakdownQuery",
    "DealerSummaryQuery",
    "SalesOverTimeQuery",
    "TopCustomersQuery",
]
