"""Resolve period tokens into date intervals and time-series buckets."""

from __future__ import annotations

import calendar
import math
from datetime import date, timedelta

from agrisales.domain.sales.exceptions import InvalidPeriodError
from agrisales.domain.sales.value_objects.period import (
    BucketGranularity,
    PeriodBucket,
    PeriodKind,
    ReportingPeriod,
)

ROLLING_WINDOW_TOKEN = "past-12-months"
ROLLING_WINDOW_LABEL = "Past 12 Months"

# Quarter number -> (first month, last month), 1-based months
QUARTER_MONTHS: dict[int, tuple[int, int]] = {
    1: (1, 3),
    2: (4, 6),
    3: (7, 9),
    4: (10, 12),
}

DAYS_PER_WEEK = 7


def _normalize_token(token: str) -> str:
    return "-".join(token.strip().lower().split())


def _last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def _next_month(day: date) -> date:
    if day.month == 12:
        return date(day.year + 1, 1, 1)
    return date(day.year, day.month + 1, 1)


def _week_label(start: date, end: date) -> str:
    return f"{start.month}/{start.day}-{end.month}/{end.day}"


def _month_label(day: date) -> str:
    return f"{calendar.month_abbr[day.month]} {day.year}"


class TimeWindowResolver:
    """Turn period tokens into reporting periods and their buckets.

    The rolling window is a fixed interval taken from configuration, never
    computed relative to today.
    """

    def __init__(self, rolling_start: date, rolling_end: date):
        if rolling_end < rolling_start:
            msg = "Rolling window end must not be before its start"
            raise ValueError(msg)
        self._rolling_start = rolling_start
        self._rolling_end = rolling_end

    def resolve(self, token: str) -> ReportingPeriod:
        """Resolve ``"past-12-months"`` or ``"Q<n> <year>"``.

        Raises
        ------
        InvalidPeriodError
            If the token is empty, unknown, has a quarter outside 1-4, or a
            year that is not an integer.
        """
        if not isinstance(token, str) or not token.strip():
            raise InvalidPeriodError(token, "empty period")

        if _normalize_token(token) == ROLLING_WINDOW_TOKEN:
            return ReportingPeriod(
                token=ROLLING_WINDOW_TOKEN,
                label=ROLLING_WINDOW_LABEL,
                start=self._rolling_start,
                end=self._rolling_end,
                kind=PeriodKind.ROLLING,
            )

        return self._resolve_quarter(token)

    def _resolve_quarter(self, token: str) -> ReportingPeriod:
        parts = token.split()
        if len(parts) != 2 or parts[0][:1].upper() != "Q":
            raise InvalidPeriodError(token, "expected 'Q<1-4> <year>'")

        quarter_part, year_part = parts
        try:
            quarter = int(quarter_part[1:])
        except ValueError:
            raise InvalidPeriodError(token, "quarter is not a number") from None
        try:
            year = int(year_part)
        except ValueError:
            raise InvalidPeriodError(token, "year is not an integer") from None

        if quarter not in QUARTER_MONTHS:
            raise InvalidPeriodError(token, "quarter must be between 1 and 4")
        if not date.min.year <= year <= date.max.year:
            raise InvalidPeriodError(token, "year is out of range")

        first_month, last_month = QUARTER_MONTHS[quarter]
        return ReportingPeriod(
            token=f"Q{quarter} {year}",
            label=f"Q{quarter} {year}",
            start=date(year, first_month, 1),
            end=_last_day_of_month(year, last_month),
            kind=PeriodKind.QUARTER,
        )

    def buckets(self, period: ReportingPeriod) -> list[PeriodBucket]:
        """Weekly buckets for a quarter, monthly buckets for a rolling window."""
        if period.granularity is BucketGranularity.WEEK:
            return self.week_buckets(period)
        return self.month_buckets(period)

    @staticmethod
    def week_buckets(period: ReportingPeriod) -> list[PeriodBucket]:
        count = math.ceil(period.days / DAYS_PER_WEEK)
        buckets: list[PeriodBucket] = []
        for index in range(count):
            start = period.start + timedelta(days=index * DAYS_PER_WEEK)
            end = min(start + timedelta(days=DAYS_PER_WEEK - 1), period.end)
            buckets.append(
                PeriodBucket(
                    index=index,
                    key=f"week-{index + 1}",
                    label=_week_label(start, end),
                    start=start,
                    end=end,
                ),
            )
        return buckets

    @staticmethod
    def month_buckets(period: ReportingPeriod) -> list[PeriodBucket]:
        buckets: list[PeriodBucket] = []
        current = date(period.start.year, period.start.month, 1)
        while current <= period.end:
            month_end = _last_day_of_month(current.year, current.month)
            buckets.append(
                PeriodBucket(
                    index=len(buckets),
                    key=f"{current.year:04d}-{current.month:02d}",
                    label=_month_label(current),
                    start=max(current, period.start),
                    end=min(month_end, period.end),
                ),
            )
            current = _next_month(current)
        return buckets

    @staticmethod
    def bucket_index(period: ReportingPeriod, day: date, bucket_count: int) -> int:
        """Index of the bucket holding ``day``, clamped into range.

        For weeks this is ``ceil(day_of_period / 7) - 1`` with a 1-based day
        of period, i.e. ``(day - start) // 7``.
        """
        if period.granularity is BucketGranularity.WEEK:
            day_of_period = (day - period.start).days + 1
            index = math.ceil(day_of_period / DAYS_PER_WEEK) - 1
        else:
            index = (day.year - period.start.year) * 12 + (
                day.month - period.start.month
            )
        return max(0, min(index, bucket_count - 1))
