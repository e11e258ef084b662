"""Report inspector: explains how each section of a parsed report will render.

Inspection is pure computation.  Each section is checked independently; a
failure while checking one section is logged and does not block the others.
"""

from __future__ import annotations

import logging

from finreport.exceptions import SchemaMismatchError
from finreport.models import STRUCTURED_FALLBACK_SUMMARY, ParsedReport, ParsedSection, Stage
from finreport.validation.guards import fingerprint_for, is_valid
from finreport.validation.models import (
    IssueCategory,
    IssueSeverity,
    ValidationIssue,
    ValidationReport,
)

log = logging.getLogger(__name__)

RULE_PLAIN_TEXT = "SEC-001"
RULE_GENERIC_SUMMARY = "SEC-002"
RULE_FINGERPRINT = "SEC-003"
RULE_SCHEMA = "SEC-004"


class ReportInspector:
    """Checks every section of a :class:`ParsedReport` against its stage schema.

    Severity ladder per section:

    * INFO: the section is plain text, or its summary is the generic fallback
    * WARNING: structured data is present but misses the stage fingerprint
    * ERROR: the fingerprint matches but the stage model rejects the payload
      (one issue per model error)
    """

    def __init__(self, *, deep: bool = True) -> None:
        self._deep = deep

    def inspect(self, report: ParsedReport) -> ValidationReport:
        """Inspect all four sections and return an aggregated report."""
        result = ValidationReport(
            ticker=report.ticker,
            classification=report.classification.value,
        )

        for stage, section in report.sections.items():
            result.sections_inspected += 1
            try:
                result.issues.extend(self._check_section(report, stage, section))
            except Exception:
                log.exception("Inspection of %s failed", stage.value)

        # Compute counts
        result.total_issues = len(result.issues)
        result.error_count = sum(1 for i in result.issues if i.severity == IssueSeverity.ERROR)
        result.warning_count = sum(1 for i in result.issues if i.severity == IssueSeverity.WARNING)
        result.info_count = sum(1 for i in result.issues if i.severity == IssueSeverity.INFO)
        result.passed = result.error_count == 0

        return result

    # ── Section checks ──────────────────────────────────────────────

    def _check_section(
        self,
        report: ParsedReport,
        stage: Stage,
        section: ParsedSection,
    ) -> list[ValidationIssue]:
        data = section.structured_data
        if data is None:
            return [
                ValidationIssue(
                    rule_id=RULE_PLAIN_TEXT,
                    severity=IssueSeverity.INFO,
                    category=IssueCategory.CONTENT,
                    message="Section is plain text",
                    section_key=stage.value,
                )
            ]

        issues: list[ValidationIssue] = []
        if section.content == STRUCTURED_FALLBACK_SUMMARY:
            issues.append(
                ValidationIssue(
                    rule_id=RULE_GENERIC_SUMMARY,
                    severity=IssueSeverity.INFO,
                    category=IssueCategory.CONTENT,
                    message="No summary template matched, generic summary used",
                    section_key=stage.value,
                )
            )

        required = fingerprint_for(report.classification, stage)
        if not is_valid(data, required):
            missing = [key for key in required if key not in data]
            issues.append(
                ValidationIssue(
                    rule_id=RULE_FINGERPRINT,
                    severity=IssueSeverity.WARNING,
                    category=IssueCategory.STRUCTURE,
                    message=f"Structured data missing required keys: {', '.join(missing)}",
                    section_key=stage.value,
                    actual_value=", ".join(sorted(data)),
                    expected_hint=", ".join(required),
                )
            )
            return issues

        if self._deep:
            issues.extend(self._check_schema(report, stage, data))
        return issues

    @staticmethod
    def _check_schema(report: ParsedReport, stage: Stage, data: dict) -> list[ValidationIssue]:
        # Deferred: finreport.views imports this package.
        from finreport.views import load_stage_payload

        try:
            load_stage_payload(data, report.classification, stage)
        except SchemaMismatchError as exc:
            return [
                ValidationIssue(
                    rule_id=RULE_SCHEMA,
                    severity=IssueSeverity.ERROR,
                    category=IssueCategory.SCHEMA,
                    message=str(error.get("msg", "Invalid value")),
                    section_key=stage.value,
                    field_path=".".join(str(part) for part in error.get("loc", ())),
                    actual_value=_preview(error.get("input")),
                    expected_hint=str(error.get("type", "")),
                )
                for error in exc.errors
            ]
        return []


def _preview(value: object, limit: int = 80) -> str:
    text = repr(value)
    return text if len(text) <= limit else text[: limit - 3] + "..."
