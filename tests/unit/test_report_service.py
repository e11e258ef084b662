"""Tests for ReportService."""

from __future__ import annotations

import json
import logging

import pytest

from finreport.core.config import AppSettings, ParsingConfig
from finreport.exceptions import FinReportError, ReportInputError
from finreport.models import RawReport, Stage
from finreport.services import ReportService
from finreport.views import PlainView, StructuredView


def _make_service(**parsing) -> ReportService:
    return ReportService(AppSettings(parsing=ParsingConfig(**parsing)))


class TestLoad:
    def test_mapping(self, raw_record) -> None:
        assert _make_service().load(raw_record).ticker == "ACME"

    def test_json_text(self, raw_record) -> None:
        assert _make_service().load(json.dumps(raw_record)).analysis_years == 5

    def test_json_bytes(self, raw_record) -> None:
        assert _make_service().load(json.dumps(raw_record).encode()).ticker == "ACME"

    def test_model_passthrough(self, raw_report) -> None:
        assert _make_service().load(raw_report) is raw_report

    def test_invalid_json(self) -> None:
        with pytest.raises(ReportInputError, match="not valid JSON") as excinfo:
            _make_service().load("{ticker")
        assert excinfo.value.raw_payload == "{ticker"

    def test_non_object(self) -> None:
        with pytest.raises(ReportInputError, match="list"):
            _make_service().load("[1, 2]")

    def test_missing_ticker(self) -> None:
        with pytest.raises(FinReportError):
            _make_service().load({"classification": "reit"})


class TestParse:
    def test_parse_mapping(self, raw_record) -> None:
        report = _make_service().parse(raw_record)
        assert report.sections.multi_year_analysis.content.startswith("Analysis of ACME")

    def test_honor_schema_kind_setting(self) -> None:
        raw = RawReport(ticker="ACME", business_assessment='{"company": "ACME", "schema_kind": "thesis"}')
        honored = _make_service().parse(raw)
        ignored = _make_service(honor_schema_kind=False).parse(raw)
        assert honored.sections.final_thesis.content.startswith("Business thesis synthesis for ACME")
        assert ignored.sections.final_thesis.content == "Structured analysis data available"


class TestViewsAndInspect:
    def test_views(self, raw_report) -> None:
        service = _make_service()
        views = service.views(service.parse(raw_report))
        assert isinstance(views[Stage.THESIS], StructuredView)

    def test_deep_validation_setting(self, acme_management) -> None:
        acme_management["credibility_assessment"]["red_flags"] = "many"
        raw = RawReport(ticker="ACME", management_credibility=json.dumps(acme_management))

        strict = _make_service()
        assert isinstance(strict.views(strict.parse(raw))[Stage.MANAGEMENT], PlainView)
        assert not strict.inspect(strict.parse(raw)).passed

        shallow = _make_service(deep_validation=False)
        assert isinstance(shallow.views(shallow.parse(raw))[Stage.MANAGEMENT], StructuredView)
        assert shallow.inspect(shallow.parse(raw)).passed

    def test_inspect_logs_failures(self, acme_management, caplog) -> None:
        acme_management["scores"] = {"composite_score": "high"}
        service = _make_service()
        report = service.parse(RawReport(ticker="ACME", management_credibility=json.dumps(acme_management)))
        with caplog.at_level(logging.WARNING, logger="finreport.services.report_service"):
            result = service.inspect(report)
        assert result.error_count == 1
        assert "1 schema error(s)" in caplog.text


class TestSettings:
    def test_default_settings(self) -> None:
        assert isinstance(ReportService().settings, AppSettings)
