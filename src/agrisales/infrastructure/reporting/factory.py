"""In-memory report factory handing out ports bound to one store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from agrisales.domain.sales.services import TimeWindowResolver
from agrisales.infrastructure.reporting.in_memory_report_adapter import (
    InMemoryReportAdapter,
)
from agrisales_config.settings import get_settings

if TYPE_CHECKING:
    from agrisales.domain.sales.aggregates import TransactionStore
    from agrisales_config.settings import Settings

logger = logging.getLogger(__name__)


class InMemoryReportFactory:
    """In-memory implementation of the ReportFactory Protocol."""

    def __init__(
        self,
        store: TransactionStore,
        settings: Optional[Settings] = None,
    ):
        self._store = store
        self._settings = settings or get_settings()

        # Cached instance (created on demand)
        self._report_adapter: InMemoryReportAdapter | None = None

    @property
    def store(self) -> TransactionStore:
        return self._store

    @property
    def settings(self) -> Settings:
        return self._settings

    def time_window_resolver(self) -> TimeWindowResolver:
        return TimeWindowResolver(
            rolling_start=self._settings.rolling_window_start,
            rolling_end=self._settings.rolling_window_end,
        )

    def report_read_port(self) -> InMemoryReportAdapter:
        if self._report_adapter is None:
            logger.debug(
                "Creating report adapter (window %s..%s, currency %s)",
                self._settings.rolling_window_start,
                self._settings.rolling_window_end,
                self._settings.currency_code,
            )
            self._report_adapter = InMemoryReportAdapter(
                self._store,
                self.time_window_resolver(),
                currency=self._settings.currency_code,
            )
        return self._report_adapter
