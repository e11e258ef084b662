"""finreport: normalize stored financial-analysis reports into a uniform shape.

Quick start::

    from finreport import RawReport, parse_report

    report = parse_report(RawReport(ticker="ACME", classification="reit", ...))
    report.sections.final_thesis.title   # "REIT Investment Thesis"
"""

from __future__ import annotations

from finreport.exceptions import FinReportError, ReportInputError, SchemaMismatchError
from finreport.models import (
    NO_CONTENT_PLACEHOLDER,
    STRUCTURED_FALLBACK_SUMMARY,
    Classification,
    ParsedReport,
    ParsedSection,
    RawReport,
    ReportMetadata,
    ReportSections,
    Stage,
)
from finreport.parsing import (
    classification_display_name,
    parse_general_report,
    parse_mlp_report,
    parse_reit_report,
    parse_report,
    parse_section,
    synthesize_summary,
)
from finreport.services import ReportService
from finreport.validation import ReportInspector, has_valid_structure, is_valid
from finreport.views import PlainView, StructuredView, report_views, to_view

__version__ = "0.3.0"

__all__ = [
    "NO_CONTENT_PLACEHOLDER",
    "STRUCTURED_FALLBACK_SUMMARY",
    "Classification",
    "FinReportError",
    "ParsedReport",
    "ParsedSection",
    "PlainView",
    "RawReport",
    "ReportInputError",
    "ReportInspector",
    "ReportMetadata",
    "ReportSections",
    "ReportService",
    "SchemaMismatchError",
    "Stage",
    "StructuredView",
    "classification_display_name",
    "has_valid_structure",
    "is_valid",
    "parse_general_report",
    "parse_mlp_report",
    "parse_reit_report",
    "parse_report",
    "parse_section",
    "report_views",
    "synthesize_summary",
    "to_view",
]
