"""Fetch one customer's category breakdown via report port."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agrisales.application.dtos.reports import CustomerCategoryBreakdownResult
from agrisales.application.ports.reports import ReportReadPort

if TYPE_CHECKING:
    from agrisales.application.factories import ReportFactory


class CustomerCategoryBreakdownQuery:
    """Return the categories a customer bought, largest first."""

    def __init__(
        self,
        report_read_port: ReportReadPort,
    ):
        self._reports = report_read_port

    @classmethod
    def from_factory(cls, factory: ReportFactory) -> CustomerCategoryBreakdownQuery:
        return cls(report_read_port=factory.report_read_port())

    def execute(
        self,
        customer_id: int,
        dealer_id: str | None = None,
        period: str | None = None,
    ) -> CustomerCategoryBreakdownResult:
        return self._reports.customer_category_breakdown(
            customer_id=customer_id,
            dealer_id=dealer_id,
            period=period,
        )
