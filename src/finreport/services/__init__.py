"""Service layer."""

from __future__ import annotations

from finreport.services.report_service import ReportService

__all__ = ["ReportService"]
