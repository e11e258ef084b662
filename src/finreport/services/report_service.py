"""Report service: load, parse, view and inspect stored report records."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from finreport.core.config import AppSettings
from finreport.core.logging_config import setup_logging
from finreport.exceptions import ReportInputError
from finreport.models import ParsedReport, RawReport, Stage
from finreport.parsing.router import parse_report
from finreport.validation.inspector import ReportInspector
from finreport.validation.models import ValidationReport
from finreport.views import SectionView, report_views

log = logging.getLogger(__name__)


class ReportService:
    """Settings-driven entry point over the parsing layer."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        configure_logging: bool = False,
    ) -> None:
        self._settings = settings or AppSettings()
        if configure_logging:
            setup_logging(self._settings.observability)
        self._inspector = ReportInspector(deep=self._settings.parsing.deep_validation)

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def load(self, raw: RawReport | Mapping[str, Any] | str | bytes) -> RawReport:
        """Coerce a stored record (model, mapping or JSON text) into a RawReport.

        Raises:
            ReportInputError: If the input is not a JSON object or misses
                required fields.
        """
        if isinstance(raw, RawReport):
            return raw
        record: Any = raw
        if isinstance(raw, (str, bytes)):
            try:
                record = json.loads(raw)
            except ValueError as exc:
                raise ReportInputError(f"Report record is not valid JSON: {exc}", raw) from exc
        if not isinstance(record, Mapping):
            raise ReportInputError(
                f"Report record must be a JSON object, got {type(record).__name__}", raw
            )
        try:
            return RawReport.model_validate(dict(record))
        except ValidationError as exc:
            raise ReportInputError(f"Invalid report record: {exc}", raw) from exc

    def parse(self, raw: RawReport | Mapping[str, Any] | str | bytes) -> ParsedReport:
        """Load *raw* if needed and parse it into the uniform shape."""
        record = self.load(raw)
        report = parse_report(record, use_schema_kind=self._settings.parsing.honor_schema_kind)
        log.info("Parsed %s report for %s", report.classification.value, report.ticker)
        return report

    def views(self, report: ParsedReport) -> dict[Stage, SectionView]:
        """Rendering variants for each section of *report*."""
        return report_views(report, deep=self._settings.parsing.deep_validation)

    def inspect(self, report: ParsedReport) -> ValidationReport:
        """Describe how each section of *report* will render."""
        result = self._inspector.inspect(report)
        if not result.passed:
            log.warning(
                "Report %s has %d schema error(s)", report.ticker, result.error_count
            )
        return result
