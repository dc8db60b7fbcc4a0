"""Sales domain layer exports."""

# Aggregates
from agrisales.domain.sales.aggregates.transaction_store import (
    ALL_DEALERS_LABEL,
    UNKNOWN_DEALER_LABEL,
    TransactionStore,
)

# Entities
from agrisales.domain.sales.entities.customer import Customer
from agrisales.domain.sales.entities.dealer import Dealer
from agrisales.domain.sales.entities.product import Product
from agrisales.domain.sales.entities.transaction import Transaction

# Exceptions
from agrisales.domain.sales.exceptions import (
    CustomerNotFoundError,
    DuplicateReferenceError,
    InconsistentReferenceError,
    InvalidPeriodError,
    InvalidTopNError,
    MixedCategorySetError,
)

# Domain Services
from agrisales.domain.sales.services.ranking_service import RankingService
from agrisales.domain.sales.services.sales_filter_service import SalesFilterService
from agrisales.domain.sales.services.sales_grouping_service import (
    GroupingKey,
    SalesGroupingService,
)
from agrisales.domain.sales.services.time_window_resolver import TimeWindowResolver

# Value Objects
from agrisales.domain.sales.value_objects.category import (
    Category,
    CategorySet,
    LegacyCategory,
    SalesCategory,
)
from agrisales.domain.sales.value_objects.period import PeriodBucket, ReportingPeriod

__all__ = [
    # Value Objects
    "Category",
    "CategorySet",
    "LegacyCategory",
    "PeriodBucket",
    "ReportingPeriod",
    "SalesCategory",
    # Entities
    "Customer",
    "Dealer",
    "Product",
    "Transaction",
    # Aggregates
    "ALL_DEALERS_LABEL",
    "UNKNOWN_DEALER_LABEL",
    "TransactionStore",
    # Domain Services
    "GroupingKey",
    "RankingService",
    "SalesFilterService",
    "SalesGroupingService",
    "TimeWindowResolver",
    # Exceptions
    "CustomerNotFoundError",
    "DuplicateReferenceError",
    "InconsistentReferenceError",
    "InvalidPeriodError",
    "InvalidTopNError",
    "MixedCategorySetError",
]
