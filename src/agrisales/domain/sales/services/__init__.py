"""Domain services of the sales domain."""

from agrisales.domain.sales.services.ranking_service import RankingService
from agrisales.domain.sales.services.sales_filter_service import (
    SalesFilterService,
    normalize_dealer_id,
)
from agrisales.domain.sales.services.sales_grouping_service import (
    CategoryProductTotals,
    GroupingKey,
    SalesGroupingService,
)
from agrisales.domain.sales.services.time_window_resolver import (
    QUARTER_MONTHS,
    ROLLING_WINDOW_LABEL,
    ROLLING_WINDOW_TOKEN,
    TimeWindowResolver,
)

__all__ = [
    "QUARTER_MONTHS",
    "ROLLING_WINDOW_LABEL",
    "ROLLING_WINDOW_TOKEN",
    "CategoryProductTotals",
    "GroupingKey",
    "RankingService",
    "SalesFilterService",
    "SalesGroupingService",
    "TimeWindowResolver",
    "normalize_dealer_id",
]
