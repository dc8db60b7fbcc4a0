"""Value objects for the sales domain."""

from agrisales.domain.sales.value_objects.category import (
    Category,
    CategorySet,
    LegacyCategory,
    SalesCategory,
)
from agrisales.domain.sales.value_objects.period import (
    BucketGranularity,
    PeriodBucket,
    PeriodKind,
    ReportingPeriod,
)

__all__ = [
    "BucketGranularity",
    "Category",
    "CategorySet",
    "LegacyCategory",
    "PeriodBucket",
    "PeriodKind",
    "ReportingPeriod",
    "SalesCategory",
]
