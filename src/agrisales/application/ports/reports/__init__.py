"""Report ports (read side).

These ports are report-like: one method per report/query.
They intentionally return application DTOs (read models), not domain aggregates.
"""

from agrisales.application.ports.reports.report_read_port import ReportReadPort

__all__ = ["ReportReadPort"]
