"""Fetch the top customers leaderboard via report port."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agrisales.application.dtos.reports import TopCustomersResult
from agrisales.application.ports.reports import ReportReadPort

if TYPE_CHECKING:
    from agrisales.application.factories import ReportFactory


class TopCustomersQuery:
    """Return ranked customers for a period."""

    def __init__(
        self,
        report_read_port: ReportReadPort,
    ):
        self._reports = report_read_port

    @classmethod
    def from_factory(cls, factory: ReportFactory) -> TopCustomersQuery:
        return cls(report_read_port=factory.report_read_port())

    def execute(
        self,
        period: str,
        top_n: int,
        dealer_id: str | None = None,
    ) -> TopCustomersResult:
        return self._reports.top_customers(
            period=period,
            top_n=top_n,
            dealer_id=dealer_id,
        )
