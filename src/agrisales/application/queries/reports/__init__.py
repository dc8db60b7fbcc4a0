"""Report queries for the sales dashboard."""

from agrisales.application.queries.reports.category_breakdown_query import (
    CategoryBreakdownQuery,
)
from agrisales.application.queries.reports.category_product_breakdown_query import (
    CategoryProductBreakdownQuery,
)
from agrisales.application.queries.reports.category_sales_by_name_query import (
    CategorySalesByNameQuery,
)
from agrisales.application.queries.reports.customer_category_breakdown_query import (
    CustomerCategoryBreakdownQuery,
)
from agrisales.application.queries.reports.dealer_summary_query import (
    DealerSummaryQuery,
)
from agrisales.application.queries.reports.sales_over_time_query import (
    SalesOverTimeQuery,
)
from agrisales.application.queries.reports.top_customers_query import (
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
