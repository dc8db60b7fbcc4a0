"""Report factory protocol for application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from agrisales.application.ports.reports import ReportReadPort

if TYPE_CHECKING:
    from agrisales.domain.sales.aggregates import TransactionStore


class ReportFactory(Protocol):
    """Protocol for handing out report ports bound to one dataset."""

    @property
    def store(self) -> TransactionStore:
        """Get the transaction store every report reads from."""
        ...

    def report_read_port(self) -> ReportReadPort:
        """Get report read port."""
        ...
