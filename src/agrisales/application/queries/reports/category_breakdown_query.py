"""Fetch the category breakdown via report port."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agrisales.application.dtos.reports import CategoryBreakdownResult
from agrisales.application.ports.reports import ReportReadPort

if TYPE_CHECKING:
    from agrisales.application.factories import ReportFactory


class CategoryBreakdownQuery:
    """Return sales per category for a dealer filter and period."""

    def __init__(
        self,
        report_read_port: ReportReadPort,
    ):
        self._reports = report_read_port

    @classmethod
    def from_factory(cls, factory: ReportFactory) -> CategoryBreakdownQuery:
        return cls(report_read_port=factory.report_read_port())

    def execute(
        self,
        period: str,
        dealer_id: str | None = None,
    ) -> CategoryBreakdownResult:
        return self._reports.category_breakdown(
            period=period,
            dealer_id=dealer_id,
        )
