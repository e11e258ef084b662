"""Shared building blocks for the stage payload schemas.

Every model allows extra keys: the report pipeline adds fields over time and
the parsing layer only interprets what it knows. Fields that a schema marks
nullable are ``Optional`` with a ``None`` default; everything else that is
not part of a stage fingerprint defaults to an empty value.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SchemaModel(BaseModel):
    """Base for all payload models."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


# ── Envelope ─────────────────────────────────────────────────────────


class Window(SchemaModel):
    start_fy: Optional[int] = None
    end_fy: Optional[int] = None
    num_years: Optional[int] = None


class Coverage(SchemaModel):
    years_received: list[int] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)


class UISummaries(SchemaModel):
    one_liner: str = ""
    synopsis: str = ""
    bullet_highlights: list[str] = Field(default_factory=list)
    watch_items: list[str] = Field(default_factory=list)
    disclaimer: str = ""


class StagePayload(SchemaModel):
    """Fields common to every stage payload."""

    company: str
    window: Optional[Window] = None
    schema_kind: Optional[str] = None
    version: str = ""


# ── Multi-year analysis ──────────────────────────────────────────────


class LabeledTheme(SchemaModel):
    label: str = ""
    persistence_years: Optional[int] = None
    rationale: str = ""


class YearLabel(SchemaModel):
    year: Optional[int] = None
    label: str = ""


class YearChange(SchemaModel):
    year: Optional[int] = None
    change: str = ""


class YearAction(SchemaModel):
    year: Optional[int] = None
    action: str = ""
    context: str = ""


class CompetitivePosture(SchemaModel):
    label: str = ""
    drivers: list[str] = Field(default_factory=list)


class RiskRegisterEntry(SchemaModel):
    name: str = ""
    recurrence_years: list[int] = Field(default_factory=list)
    severity: str = ""
    note: str = ""


class ExternalGrowth(SchemaModel):
    activity_label: str = ""
    modes: list[str] = Field(default_factory=list)
    discipline_note: str = ""


class LeverageLiquidity(SchemaModel):
    leverage_label: str = ""
    liquidity_comment: str = ""
    rate_exposure_label: str = ""


class Grading(SchemaModel):
    letter: str = ""
    mapping_note: str = ""


class YieldProfile(SchemaModel):
    characterization: str = ""
    trend: str = ""


# ── Management credibility ───────────────────────────────────────────


class CommitmentFollowthrough(SchemaModel):
    commitment_year: Optional[int] = None
    commitment_type: Optional[str] = None
    commitment: str = ""
    subsequent_followup_years: list[int] = Field(default_factory=list)
    outcome_label: str = ""
    rationale: str = ""


class ToneProfile(SchemaModel):
    tone_balance_label: str = ""
    superlative_frequency_label: str = ""
    guidance_style_label: str = ""
    change_in_tone_label: str = ""
    notes: str = ""


class RecurringRisk(SchemaModel):
    name: str = ""
    recurrence_years: list[int] = Field(default_factory=list)
    candor_label: str = ""
    note: str = ""


class RiskCandor(SchemaModel):
    recurring_risks: list[RecurringRisk] = Field(default_factory=list)
    realized_issues_acknowledged_label: str = ""


class StrategicCoherence(SchemaModel):
    pivot_frequency_label: str = ""
    rationalization_quality_label: str = ""
    resegmentation_transparency_label: str = ""
    examples: list[str] = Field(default_factory=list)


class CapitalAllocationConsistency(SchemaModel):
    stated_priorities: list[str] = Field(default_factory=list)
    behavior_alignment_label: str = ""
    examples: list[str] = Field(default_factory=list)


class MetricStability(SchemaModel):
    metric: str = ""
    stability_label: str = ""
    notes: str = ""


class CredibilityClassification(SchemaModel):
    communication_style: str = ""
    credibility_trend: str = ""
    disclosure_quality_tier: str = ""
    rationale: str = ""


class CredibilityScores(SchemaModel):
    promise_follow_through: Optional[float] = None
    tone_discipline: Optional[float] = None
    disclosure_hygiene: Optional[float] = None
    risk_candor: Optional[float] = None
    strategic_coherence: Optional[float] = None
    capital_allocation_consistency: Optional[float] = None
    metric_definition_stability: Optional[float] = None
    red_flags: Optional[float] = None
    weights: list[float] = Field(default_factory=list)
    composite_score: Optional[float] = None
    credibility_tier: str = ""


class CredibilityAssessmentBase(SchemaModel):
    commitment_followthrough: list[CommitmentFollowthrough] = Field(default_factory=list)
    tone_profile: ToneProfile = Field(default_factory=ToneProfile)
    risk_candor: RiskCandor = Field(default_factory=RiskCandor)
    capital_allocation_consistency: CapitalAllocationConsistency = Field(
        default_factory=CapitalAllocationConsistency
    )
    metric_definition_stability: list[MetricStability] = Field(default_factory=list)
    red_flags: list[str] = Field(default_factory=list)
    green_flags: list[str] = Field(default_factory=list)


# ── Predictive inference ─────────────────────────────────────────────


class HorizonSelection(SchemaModel):
    type: str = ""
    length: Optional[int] = None
    reason: str = ""


class Uncertainty(SchemaModel):
    dominant_unknowns: list[str] = Field(default_factory=list)
    black_swan_notes: Optional[str] = None
    confidence_check: str = ""


class TransitionEdge(SchemaModel):
    from_: str = Field(default="", alias="from")
    to: str = ""
    trigger: str = ""
    early_signals: list[str] = Field(default_factory=list)


class ScenarioBase(SchemaModel):
    name: str = ""
    key_drivers: list[str] = Field(default_factory=list)
    leading_indicators: list[str] = Field(default_factory=list)
    falsifiers: list[str] = Field(default_factory=list)
    confidence: Optional[float] = None


class PredictiveFeatures(SchemaModel):
    directional_tilt: str = ""
    confidence_bucket: str = ""
    key_drivers_top3: list[str] = Field(default_factory=list)
    key_falsifiers_top3: list[str] = Field(default_factory=list)
    watchlist_metrics: list[str] = Field(default_factory=list)


# ── Business thesis ──────────────────────────────────────────────────


class SourceVersions(SchemaModel):
    multi_year: str = ""
    management: str = ""
    predictive: str = ""


class ThesisCoverage(SchemaModel):
    years_received: list[int] = Field(default_factory=list)
    source_versions: SourceVersions = Field(default_factory=SourceVersions)
    warnings: list[str] = Field(default_factory=list)


class Tension(SchemaModel):
    topic: str = ""
    positions: SourceVersions = Field(default_factory=SourceVersions)
    diagnosis: str = ""


class ConsensusMap(SchemaModel):
    aligned_themes: list[str] = Field(default_factory=list)
    tensions: list[Tension] = Field(default_factory=list)
    missing_info: list[str] = Field(default_factory=list)


class ViabilityAssessment(SchemaModel):
    tier: str = ""
    subscores: dict[str, float] = Field(default_factory=dict)
    weights: list[float] = Field(default_factory=list)
    composite: Optional[float] = None
    rationale: str = ""


class Agreement(SchemaModel):
    alignment_score: Optional[float] = None
    areas_of_agreement: list[str] = Field(default_factory=list)
    areas_of_divergence: list[str] = Field(default_factory=list)


class ScenariosBridge(SchemaModel):
    base_path: str = ""
    upside_falsifiers: list[str] = Field(default_factory=list)
    downside_falsifiers: list[str] = Field(default_factory=list)


class Watchlist(SchemaModel):
    leading_indicators: list[str] = Field(default_factory=list)
    early_warnings: list[str] = Field(default_factory=list)
    data_gaps: list[str] = Field(default_factory=list)


class TransitionTrigger(SchemaModel):
    event: str = ""
    interpretation: str = ""
    expected_effect: str = ""
    thesis_update_rule: str = ""


class ContributionBreakdown(SchemaModel):
    weights: dict[str, float] = Field(default_factory=dict)
    components: dict[str, float] = Field(default_factory=dict)
    viability_composite: Optional[float] = None
    notes: str = ""


class ThesisPayloadBase(StagePayload):
    """Cross-stage synthesis fields shared by every family's thesis."""

    coverage: ThesisCoverage = Field(default_factory=ThesisCoverage)
    viability_assessment: ViabilityAssessment
    consensus_map: ConsensusMap = Field(default_factory=ConsensusMap)
    agreement: Agreement = Field(default_factory=Agreement)
    scenarios_bridge: ScenariosBridge = Field(default_factory=ScenariosBridge)
    watchlist: Watchlist = Field(default_factory=Watchlist)
    transition_triggers: list[TransitionTrigger] = Field(default_factory=list)
    contribution_breakdown: ContributionBreakdown = Field(default_factory=ContributionBreakdown)
    one_liner: str = ""
    synopsis: str = ""
    disclaimer: str = ""
