"""Fetch the dealer summary via report port."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agrisales.application.dtos.reports import DealerSummaryResult
from agrisales.application.ports.reports import ReportReadPort

if TYPE_CHECKING:
    from agrisales.application.factories import ReportFactory


class DealerSummaryQuery:
    """Return the network total against the selected dealer."""

    def __init__(
        self,
        report_read_port: ReportReadPort,
    ):
        self._reports = report_read_port

    @classmethod
    def from_factory(cls, factory: ReportFactory) -> DealerSummaryQuery:
        return cls(report_read_port=factory.report_read_port())

    def execute(
        self,
        period: str,
        dealer_id: str | None = None,
    ) -> DealerSummaryResult:
        return self._reports.dealer_summary(
            period=period,
            dealer_id=dealer_id,
        )
