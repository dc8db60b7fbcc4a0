"""In-memory reporting adapters - implementations of application ports."""

from agrisales.infrastructure.reporting.factory import InMemoryReportFactory
from agrisales.infrastructure.reporting.in_memory_report_adapter import (
    InMemoryReportAdapter,
)

__all__ = ["InMemoryReportAdapter", "InMemoryReportFactory"]
