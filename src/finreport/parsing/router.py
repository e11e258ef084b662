"""Classification router: raw report record in, uniform :class:`ParsedReport` out.

The classification only selects the section title table (from the
registered :class:`~finreport.domains.registry.ClassificationProfile`);
unknown values degrade to the general family.  All four sections are
always produced.
"""

from __future__ import annotations

import logging
from typing import Any

from finreport.domains.registry import ClassificationProfile, get_registry
from finreport.models import (
    Classification,
    ParsedReport,
    RawReport,
    ReportMetadata,
    ReportSections,
    Stage,
)
from finreport.parsing.section_parser import parse_section

log = logging.getLogger(__name__)

_METADATA_FIELDS = tuple(ReportMetadata.model_fields)


def parse_report(raw: RawReport, *, use_schema_kind: bool = True) -> ParsedReport:
    """Route *raw* to its classification's parser.  Never raises for bad content."""
    profile = get_registry().lookup(raw.classification)
    return _build_report(raw, profile, use_schema_kind=use_schema_kind)


def parse_general_report(raw: RawReport, *, use_schema_kind: bool = True) -> ParsedReport:
    """Parse *raw* with the general equity title table, whatever its tag."""
    profile = get_registry().get(Classification.GENERAL.value)
    return _build_report(raw, profile, use_schema_kind=use_schema_kind)


def parse_reit_report(raw: RawReport, *, use_schema_kind: bool = True) -> ParsedReport:
    """Parse *raw* with the REIT title table, whatever its tag."""
    profile = get_registry().get(Classification.REIT.value)
    return _build_report(raw, profile, use_schema_kind=use_schema_kind)


def parse_mlp_report(raw: RawReport, *, use_schema_kind: bool = True) -> ParsedReport:
    """Parse *raw* with the MLP title table, whatever its tag."""
    profile = get_registry().get(Classification.MLP.value)
    return _build_report(raw, profile, use_schema_kind=use_schema_kind)


def classification_display_name(classification: Any) -> str:
    """Human label for a classification tag (``"REIT"``, ``"MLP"``, ``"General"``)."""
    return get_registry().lookup(classification).display_name


def _build_report(
    raw: RawReport,
    profile: ClassificationProfile,
    *,
    use_schema_kind: bool,
) -> ParsedReport:
    sections = {
        stage.value: parse_section(
            raw.raw_text(stage),
            profile.titles.for_stage(stage),
            use_schema_kind=use_schema_kind,
        )
        for stage in Stage
    }
    report = ParsedReport(
        ticker=raw.ticker,
        years_range=raw.years_range,
        classification=profile.classification,
        sections=ReportSections(**sections),
        metadata=ReportMetadata(**{name: getattr(raw, name) for name in _METADATA_FIELDS}),
    )
    log.debug(
        "Parsed %s report for %s (%d structured sections)",
        profile.name,
        raw.ticker,
        sum(1 for _, section in report.sections.items() if section.is_structured),
    )
    return report
