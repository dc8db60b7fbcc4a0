"""Fetch the category/product breakdown via report port."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agrisales.application.dtos.reports import CategoryProductBreakdownResult
from agrisales.application.ports.reports import ReportReadPort

if TYPE_CHECKING:
    from agrisales.application.factories import ReportFactory


class CategoryProductBreakdownQuery:
    """Return sales per category with nested product totals."""

    def __init__(
        self,
        report_read_port: ReportReadPort,
    ):
        self._reports = report_read_port

    @classmethod
    def from_factory(cls, factory: ReportFactory) -> CategoryProductBreakdownQuery:
        return cls(report_read_port=factory.report_read_port())

    def execute(
        self,
        period: str,
        dealer_id: str | None = None,
    ) -> CategoryProductBreakdownResult:
        return self._reports.category_product_breakdown(
            period=period,
            dealer_id=dealer_id,
        )
