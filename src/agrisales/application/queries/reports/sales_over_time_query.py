"""Fetch the sales trend via report port."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agrisales.application.dtos.reports import SalesOverTimeResult
from agrisales.application.ports.reports import ReportReadPort

if TYPE_CHECKING:
    from agrisales.application.factories import ReportFactory


class SalesOverTimeQuery:
    """Return weekly or monthly sales for a period."""

    def __init__(
        self,
        report_read_port: ReportReadPort,
    ):
        self._reports = report_read_port

    @classmethod
    def from_factory(cls, factory: ReportFactory) -> SalesOverTimeQuery:
        return cls(report_read_port=factory.report_read_port())

    def execute(
        self,
        period: str,
        dealer_id: str | None = None,
    ) -> SalesOverTimeResult:
        return self._reports.sales_over_time(
            period=period,
            dealer_id=dealer_id,
        )
