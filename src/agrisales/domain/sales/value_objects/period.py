"""Reporting period and bucket value objects."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class PeriodKind(str, Enum):
    """How a period token was resolved."""

    QUARTER = "quarter"
    ROLLING = "rolling"


class BucketGranularity(str, Enum):
    """Sub-interval size used to build a time series."""

    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class ReportingPeriod:
    """A closed date interval ``[start, end]`` resolved from a period token."""

    token: str
    label: str
    start: date
    end: date
    kind: PeriodKind

    def __post_init__(self) -> None:
        if self.end < self.start:
            msg = f"Period end {self.end} is before start {self.start}"
            raise ValueError(msg)

    @property
    def days(self) -> int:
        """Number of calendar days in the period, both ends included."""
        return (self.end - self.start).days + 1

    @property
    def granularity(self) -> BucketGranularity:
        if self.kind is PeriodKind.QUARTER:
            return BucketGranularity.WEEK
        return BucketGranularity.MONTH

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class PeriodBucket:
    """One week or month slice of a reporting period."""

    index: int
    key: str
    label: str
    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end
