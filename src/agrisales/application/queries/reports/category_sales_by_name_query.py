"""Fetch category sales in axis order via report port."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agrisales.application.dtos.reports import CategoryBreakdownResult
from agrisales.application.ports.reports import ReportReadPort

if TYPE_CHECKING:
    from agrisales.application.factories import ReportFactory


class CategorySalesByNameQuery:
    """Return sales per category sorted by display name."""

    def __init__(
        self,
        report_read_port: ReportReadPort,
    ):
        self._reports = report_read_port

    @classmethod
    def from_factory(cls, factory: ReportFactory) -> CategorySalesByNameQuery:
        return cls(report_read_port=factory.report_read_port())

    def execute(
        self,
        dealer_id: str | None = None,
        period: str | None = None,
    ) -> CategoryBreakdownResult:
        return self._reports.category_sales_by_name(
            dealer_id=dealer_id,
            period=period,
        )
