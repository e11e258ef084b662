"""Structural guards and report inspection.

Usage::

    from finreport.validation import ReportInspector, has_valid_structure

    if has_valid_structure(section.structured_data, report.classification, stage):
        ...
    result = ReportInspector().inspect(report)
"""

from __future__ import annotations

from finreport.validation.guards import (
    fingerprint_for,
    has_valid_structure,
    is_valid,
    resolve_structured_data,
)
from finreport.validation.inspector import ReportInspector
from finreport.validation.models import (
    IssueCategory,
    IssueSeverity,
    ValidationIssue,
    ValidationReport,
)

__all__ = [
    "IssueCategory",
    "IssueSeverity",
    "ReportInspector",
    "ValidationIssue",
    "ValidationReport",
    "fingerprint_for",
    "has_valid_structure",
    "is_valid",
    "resolve_structured_data",
]
