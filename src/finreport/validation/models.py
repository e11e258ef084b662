"""Inspection data models: issues and reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class IssueSeverity(str, Enum):
    """Severity of an inspection issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IssueCategory(str, Enum):
    """What an issue is about."""

    CONTENT = "content"
    STRUCTURE = "structure"
    SCHEMA = "schema"


@dataclass
class ValidationIssue:
    """A single issue found while inspecting a parsed report."""

    rule_id: str
    severity: IssueSeverity
    category: IssueCategory
    message: str
    section_key: str = ""
    field_path: str = ""
    actual_value: str = ""
    expected_hint: str = ""


@dataclass
class ValidationReport:
    """Aggregated result of inspecting every section of a report."""

    ticker: str
    classification: str
    sections_inspected: int = 0
    total_issues: int = 0
    error_count: int = 0
    warning_count: int = 0
    info_count: int = 0
    issues: list[ValidationIssue] = field(default_factory=list)
    passed: bool = True
    validated_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def has_errors(self) -> bool:
        """Return True if any ERROR-level issues exist."""
        return self.error_count > 0

    def issues_by_category(self) -> dict[IssueCategory, list[ValidationIssue]]:
        """Group issues by category."""
        grouped: dict[IssueCategory, list[ValidationIssue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.category, []).append(issue)
        return grouped

    def issues_for(self, section_key: str) -> list[ValidationIssue]:
        return [i for i in self.issues if i.section_key == section_key]
