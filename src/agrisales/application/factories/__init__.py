"""Application factories for report access."""

from agrisales.application.factories.report_factory import ReportFactory

__all__ = ["ReportFactory"]
