"""MLP (energy infrastructure) stage payload schemas."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from finreport.domains.common import (
    CompetitivePosture,
    Coverage,
    CredibilityAssessmentBase,
    CredibilityClassification,
    CredibilityScores,
    ExternalGrowth,
    Grading,
    HorizonSelection,
    LabeledTheme,
    LeverageLiquidity,
    PredictiveFeatures,
    RiskRegisterEntry,
    ScenarioBase,
    SchemaModel,
    StagePayload,
    StrategicCoherence,
    ThesisPayloadBase,
    TransitionEdge,
    UISummaries,
    Uncertainty,
    Window,
    YearAction,
    YearLabel,
    YieldProfile,
)

# ── Multi-year analysis ──────────────────────────────────────────────


class ThroughputTrend(LabeledTheme):
    assets: list[str] = Field(default_factory=list)


class UtilizationTrend(SchemaModel):
    label: str = ""
    notes: str = ""


class FeeMixContracts(SchemaModel):
    fee_based_exposure_label: str = ""
    take_or_pay_mvc_presence: str = ""
    average_contract_tenor_label: str = ""
    commodity_exposure_comment: str = ""


class CounterpartyProfile(SchemaModel):
    investment_grade_exposure_label: str = ""
    top_customer_concentration_label: str = ""
    notes: str = ""


class BasinFootprint(SchemaModel):
    basin_or_region: str = ""
    importance_label: str = ""


class DcfCoverageCharacter(SchemaModel):
    label: str = ""
    stability_comment: str = ""


class StructureNotes(SchemaModel):
    idrs_status: str = ""
    c_corp_conversion_mentions: str = ""
    notes: str = ""


class MlpSemanticThemes(SchemaModel):
    throughput_trend: ThroughputTrend = Field(default_factory=ThroughputTrend)
    utilization_trend: UtilizationTrend = Field(default_factory=UtilizationTrend)
    fee_mix_contracts: FeeMixContracts = Field(default_factory=FeeMixContracts)
    counterparty_profile: CounterpartyProfile = Field(default_factory=CounterpartyProfile)
    asset_footprint_basin: list[BasinFootprint] = Field(default_factory=list)
    dcf_coverage_character: DcfCoverageCharacter = Field(default_factory=DcfCoverageCharacter)
    leverage_liquidity: LeverageLiquidity = Field(default_factory=LeverageLiquidity)
    external_growth_recycling: ExternalGrowth = Field(default_factory=ExternalGrowth)
    competitive_posture: CompetitivePosture = Field(default_factory=CompetitivePosture)
    structure_notes: StructureNotes = Field(default_factory=StructureNotes)
    risk_register: list[RiskRegisterEntry] = Field(default_factory=list)


class MlpTimeseries(SchemaModel):
    volumes_by_year: list[YearLabel] = Field(default_factory=list)
    fee_mix_by_year: list[YearLabel] = Field(default_factory=list)
    distribution_policy_by_year: list[YearLabel] = Field(default_factory=list)


class MentionedThroughput(SchemaModel):
    asset: str = ""
    unit: str = ""
    value_range: Optional[str] = None


class MlpOptionalNumerics(SchemaModel):
    mentioned_throughput: list[MentionedThroughput] = Field(default_factory=list)
    mentioned_fee_based_pct: Optional[float] = None
    mentioned_take_or_pay_mvc_pct: Optional[float] = None
    mentioned_dcf_coverage_ratio: Optional[float] = None
    mentioned_leverage_debt_to_ebitda: Optional[float] = None
    capex_split_notes: Optional[str] = None
    notes: Optional[str] = None


class MlpClassification(SchemaModel):
    primary: str = ""
    secondary: list[str] = Field(default_factory=list)
    mlp_profile_tags: list[str] = Field(default_factory=list)
    rationale: str = ""


class MlpScores(SchemaModel):
    throughput_stability_utilization: Optional[float] = None
    fee_mix_contract_quality: Optional[float] = None
    dcf_stability_coverage: Optional[float] = None
    leverage_liquidity: Optional[float] = None
    counterparty_quality_concentration: Optional[float] = None
    asset_footprint_basin_quality: Optional[float] = None
    external_growth_discipline: Optional[float] = None
    risk_overhangs: Optional[float] = None
    weights: list[float] = Field(default_factory=list)
    composite_score: Optional[float] = None


class MlpSustainabilitySignals(SchemaModel):
    dcf_coverage: str = ""
    policy_consistency: str = ""
    management_commitment: str = ""


class MlpCoverageMetrics(SchemaModel):
    dcf_coverage_bucket: str = ""
    coverage_trend: str = ""


class MlpSpecificFactors(SchemaModel):
    idrs_elimination_mentioned: bool = False
    gp_lp_simplification: str = ""
    c_corp_conversion_mentions: str = ""


class MlpDistributionAnalysis(SchemaModel):
    applies: bool = False
    cadence: Optional[str] = None
    policy_characterization: str = ""
    sustainability_signals: MlpSustainabilitySignals = Field(
        default_factory=MlpSustainabilitySignals
    )
    distribution_actions: list[YearAction] = Field(default_factory=list)
    policy_philosophy: str = ""
    yield_profile: YieldProfile = Field(default_factory=YieldProfile)
    coverage_metrics: MlpCoverageMetrics = Field(default_factory=MlpCoverageMetrics)
    mlp_specific_factors: MlpSpecificFactors = Field(default_factory=MlpSpecificFactors)
    sustainability_factors: list[str] = Field(default_factory=list)
    notes: Optional[str] = None


class MlpMultiYearAnalysis(StagePayload):
    window: Window
    coverage: Coverage = Field(default_factory=Coverage)
    semantic_themes: MlpSemanticThemes
    timeseries_semantic: MlpTimeseries = Field(default_factory=MlpTimeseries)
    optional_numerics: MlpOptionalNumerics = Field(default_factory=MlpOptionalNumerics)
    classification: MlpClassification = Field(default_factory=MlpClassification)
    scores: MlpScores = Field(default_factory=MlpScores)
    grading: Grading = Field(default_factory=Grading)
    distribution_analysis: Optional[MlpDistributionAnalysis] = None
    features_for_downstream: dict[str, Any] = Field(default_factory=dict)
    ui_summaries: UISummaries = Field(default_factory=UISummaries)


# ── Management credibility ───────────────────────────────────────────


class MlpDisclosureHygiene(SchemaModel):
    dcf_definition_clarity: str = ""
    adjusted_ebitda_reconciliation_quality: str = ""
    maintenance_capex_definition_stability: str = ""
    segment_bridge_quality: str = ""
    ferc_rate_case_clarity: str = ""
    incident_outage_disclosure_quality: str = ""
    restatement_or_weakness_mentions: str = ""


class MlpStrategicCoherence(StrategicCoherence):
    fee_mix_stance_label: str = ""
    contract_quality_stance_label: str = ""


class StructureEvent(SchemaModel):
    event: str = ""
    communication_label: str = ""
    outcome_label: str = ""
    notes: str = ""


class MlpCredibilityAssessment(CredibilityAssessmentBase):
    disclosure_hygiene: MlpDisclosureHygiene = Field(default_factory=MlpDisclosureHygiene)
    strategic_coherence: MlpStrategicCoherence = Field(default_factory=MlpStrategicCoherence)
    distribution_policy_communication: dict[str, str] = Field(default_factory=dict)
    structure_events: list[StructureEvent] = Field(default_factory=list)


class MlpManagementCredibility(StagePayload):
    coverage: Coverage = Field(default_factory=Coverage)
    credibility_assessment: MlpCredibilityAssessment
    classification: CredibilityClassification = Field(default_factory=CredibilityClassification)
    scores: CredibilityScores = Field(default_factory=CredibilityScores)
    features_for_downstream: dict[str, str] = Field(default_factory=dict)
    ui_summaries: UISummaries = Field(default_factory=UISummaries)


# ── Predictive inference ─────────────────────────────────────────────


class MlpStartingPoint(SchemaModel):
    throughput: str = ""
    utilization: str = ""
    fee_based_exposure: str = ""
    contract_quality: str = ""
    dcf: str = ""
    risk_level: str = ""


class MlpBaseState(SchemaModel):
    starting_point: MlpStartingPoint = Field(default_factory=MlpStartingPoint)
    recent_inflections: list[str] = Field(default_factory=list)


class MlpScenario(ScenarioBase):
    outcomes: dict[str, str] = Field(default_factory=dict)
    numeric_context: Optional[str] = None


class DistributionOutlook(SchemaModel):
    applies: bool = False
    trajectory: str = ""
    key_factors: list[str] = Field(default_factory=list)
    structure_notes: Optional[str] = None
    policy_signals: list[str] = Field(default_factory=list)


class MlpPredictiveInference(StagePayload):
    coverage: Coverage = Field(default_factory=Coverage)
    horizon_selection: HorizonSelection = Field(default_factory=HorizonSelection)
    assumption_journal: list[str] = Field(default_factory=list)
    base_state: MlpBaseState = Field(default_factory=MlpBaseState)
    scenarios: list[MlpScenario]
    uncertainty: Uncertainty = Field(default_factory=Uncertainty)
    transition_map: list[TransitionEdge] = Field(default_factory=list)
    distribution_outlook: Optional[DistributionOutlook] = None
    features_for_downstream: PredictiveFeatures = Field(default_factory=PredictiveFeatures)
    ui_summaries: UISummaries = Field(default_factory=UISummaries)


# ── Business thesis ──────────────────────────────────────────────────


class MlpBusinessThesis(ThesisPayloadBase):
    thesis_statement: str = ""
    business_thesis: Optional[dict[str, Any]] = None
    ui_summaries: UISummaries = Field(default_factory=UISummaries)
