"""Application layer ports (aka interfaces)."""

from agrisales.application.ports.reports import ReportReadPort

__all__ = [
    "ReportReadPort",
]
