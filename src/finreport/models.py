"""Pydantic data models for finreport.

``RawReport`` is the upstream record as persisted by the report pipeline.
``ParsedReport`` is the uniform shape every renderer consumes: four fixed
sections whatever the classification, with only titles and the expected
``structured_data`` shape varying.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

NO_CONTENT_PLACEHOLDER = "No content available"
STRUCTURED_FALLBACK_SUMMARY = "Structured analysis data available"


# ── Enums ────────────────────────────────────────────────────────────


class Classification(str, Enum):
    """Business-entity classification selecting a schema family."""

    GENERAL = "general"
    REIT = "reit"
    MLP = "mlp"

    @classmethod
    def coerce(cls, value: Any) -> Classification:
        """Map *value* to a member, defaulting to ``GENERAL`` for anything unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.GENERAL


class Stage(str, Enum):
    """The four analysis stages, valued by their ``ParsedReport`` section key."""

    MULTI_YEAR = "multi_year_analysis"
    MANAGEMENT = "management_credibility"
    PREDICTIVE = "predictive_inference"
    THESIS = "final_thesis"

    @property
    def raw_field(self) -> str:
        """Name of the ``RawReport`` text field feeding this stage."""
        return _RAW_FIELDS[self]


_RAW_FIELDS = {
    Stage.MULTI_YEAR: "multi_year_analysis",
    Stage.MANAGEMENT: "management_credibility",
    Stage.PREDICTIVE: "predictive_inference",
    Stage.THESIS: "business_assessment",
}


# ── Input ────────────────────────────────────────────────────────────


class RawReport(BaseModel):
    """A stored report record: four raw text fields plus passthrough metadata.

    ``classification`` is kept as a plain string so unrecognized values reach
    the router, which degrades them to the general family.
    """

    model_config = ConfigDict(extra="ignore")

    ticker: str
    years_range: str = ""
    classification: str = Classification.GENERAL.value

    multi_year_analysis: str = ""
    management_credibility: str = ""
    predictive_inference: str = ""
    business_assessment: str = ""

    analysis_metadata: Optional[Any] = None
    years_used: Optional[list[int]] = None
    analysis_years: Optional[int] = None
    model_used: Optional[str] = None
    generated_at: Optional[str] = None
    is_free: bool = False
    has_access: bool = False

    @field_validator(
        "multi_year_analysis",
        "management_credibility",
        "predictive_inference",
        "business_assessment",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def raw_text(self, stage: Stage) -> str:
        """Return the raw text field feeding *stage*."""
        return getattr(self, stage.raw_field)


# ── Output ───────────────────────────────────────────────────────────


class ParsedSection(BaseModel):
    """One normalized report section.

    ``structured_data`` holds the decoded JSON object when the raw field was
    structured; its shape is implied, not proven, by the report
    classification.
    """

    title: str
    content: str = Field(min_length=1)
    subsections: Optional[list[ParsedSection]] = None
    structured_data: Optional[dict[str, Any]] = None

    @property
    def is_structured(self) -> bool:
        return self.structured_data is not None


class ReportSections(BaseModel):
    """Exactly the four fixed sections of a parsed report."""

    multi_year_analysis: ParsedSection
    management_credibility: ParsedSection
    predictive_inference: ParsedSection
    final_thesis: ParsedSection

    def get(self, stage: Stage) -> ParsedSection:
        return getattr(self, stage.value)

    def items(self) -> Iterator[tuple[Stage, ParsedSection]]:
        """Yield ``(stage, section)`` pairs in stage order."""
        for stage in Stage:
            yield stage, self.get(stage)


class ReportMetadata(BaseModel):
    """Passthrough metadata, copied verbatim from the raw report."""

    years_used: Optional[list[int]] = None
    analysis_years: Optional[int] = None
    model_used: Optional[str] = None
    generated_at: Optional[str] = None
    is_free: bool = False
    has_access: bool = False


class ParsedReport(BaseModel):
    """Uniform, classification-independent report representation."""

    ticker: str
    years_range: str
    classification: Classification
    sections: ReportSections
    metadata: ReportMetadata
