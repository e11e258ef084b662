"""General equity stage payload schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from finreport.domains.common import (
    CompetitivePosture,
    Coverage,
    CredibilityAssessmentBase,
    CredibilityClassification,
    CredibilityScores,
    Grading,
    HorizonSelection,
    LabeledTheme,
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
    YearChange,
    YearLabel,
    YieldProfile,
)

# ── Multi-year analysis ──────────────────────────────────────────────


class SemanticThemes(SchemaModel):
    growth_trajectory: LabeledTheme = Field(default_factory=LabeledTheme)
    margin_trend: LabeledTheme = Field(default_factory=LabeledTheme)
    cash_conversion: LabeledTheme = Field(default_factory=LabeledTheme)
    strategy_evolution: list[YearChange] = Field(default_factory=list)
    competitive_posture: CompetitivePosture = Field(default_factory=CompetitivePosture)
    risk_register: list[RiskRegisterEntry] = Field(default_factory=list)


class TimeseriesSemantic(SchemaModel):
    growth_by_year: list[YearLabel] = Field(default_factory=list)
    margin_by_year: list[YearLabel] = Field(default_factory=list)
    cash_conversion_by_year: list[YearLabel] = Field(default_factory=list)


class OptionalNumerics(SchemaModel):
    mentioned_revenue_cagr_pct: Optional[float] = None
    mentioned_margin_change_bps: Optional[float] = None
    mentioned_fcf_direction: Optional[str] = None
    notes: str = ""


class EquityClassification(SchemaModel):
    primary: str = ""
    secondary: list[str] = Field(default_factory=list)
    rationale: str = ""


class EquityScores(SchemaModel):
    revenue_durability: Optional[float] = None
    margin_quality_trend: Optional[float] = None
    cash_conversion_consistency: Optional[float] = None
    balance_sheet_resilience: Optional[float] = None
    diversification: Optional[float] = None
    execution_disclosure: Optional[float] = None
    capital_allocation: Optional[float] = None
    risk_overhangs: Optional[float] = None
    weights: list[float] = Field(default_factory=list)
    composite_score: Optional[float] = None


class DividendSustainabilitySignals(SchemaModel):
    payout_coverage: str = ""
    policy_consistency: str = ""
    management_commitment: str = ""


class DividendAnalysis(SchemaModel):
    applies: bool = False
    policy_characterization: str = ""
    sustainability_signals: DividendSustainabilitySignals = Field(
        default_factory=DividendSustainabilitySignals
    )
    dividend_actions: list[YearAction] = Field(default_factory=list)
    policy_philosophy: str = ""
    yield_profile: YieldProfile = Field(default_factory=YieldProfile)
    sustainability_factors: list[str] = Field(default_factory=list)
    notes: Optional[str] = None


class EquityFeatures(SchemaModel):
    growth_trajectory: str = ""
    margin_trend: str = ""
    cash_conversion: str = ""
    diversification: str = ""
    risk_themes: list[str] = Field(default_factory=list)
    capital_allocation_stance: str = ""
    execution_consistency: str = ""
    recent_structural_changes: list[str] = Field(default_factory=list)


class GeneralMultiYearAnalysis(StagePayload):
    window: Window
    coverage: Coverage = Field(default_factory=Coverage)
    semantic_themes: SemanticThemes
    timeseries_semantic: TimeseriesSemantic = Field(default_factory=TimeseriesSemantic)
    optional_numerics: OptionalNumerics = Field(default_factory=OptionalNumerics)
    classification: EquityClassification = Field(default_factory=EquityClassification)
    scores: EquityScores = Field(default_factory=EquityScores)
    grading: Grading = Field(default_factory=Grading)
    dividend_analysis: Optional[DividendAnalysis] = None
    features_for_downstream: EquityFeatures = Field(default_factory=EquityFeatures)
    ui_summaries: UISummaries = Field(default_factory=UISummaries)


# ── Management credibility ───────────────────────────────────────────


class DisclosureHygiene(SchemaModel):
    non_gaap_policy_clarity: str = ""
    impairment_restructure_clarity: str = ""
    restatement_or_weakness_mentions: str = ""
    accounting_policy_change_transparency: str = ""
    segment_bridge_quality: str = ""


class CredibilityAssessment(CredibilityAssessmentBase):
    disclosure_hygiene: DisclosureHygiene = Field(default_factory=DisclosureHygiene)
    strategic_coherence: StrategicCoherence = Field(default_factory=StrategicCoherence)


class CredibilityFeatures(SchemaModel):
    followthrough_label: str = ""
    tone_label: str = ""
    disclosure_tier: str = ""
    risk_candor_label: str = ""
    strategy_pivot_intensity: str = ""
    capital_allocation_alignment: str = ""
    kpi_stability: str = ""
    red_flag_pressure: str = ""


class GeneralManagementCredibility(StagePayload):
    coverage: Coverage = Field(default_factory=Coverage)
    credibility_assessment: CredibilityAssessment
    classification: CredibilityClassification = Field(default_factory=CredibilityClassification)
    scores: CredibilityScores = Field(default_factory=CredibilityScores)
    features_for_downstream: CredibilityFeatures = Field(default_factory=CredibilityFeatures)
    ui_summaries: UISummaries = Field(default_factory=UISummaries)


# ── Predictive inference ─────────────────────────────────────────────


class StartingPoint(SchemaModel):
    growth: str = ""
    margin: str = ""
    cash_generation: str = ""
    risk_level: str = ""


class BaseState(SchemaModel):
    starting_point: StartingPoint = Field(default_factory=StartingPoint)
    recent_inflections: list[str] = Field(default_factory=list)


class ScenarioOutcomes(SchemaModel):
    topline: str = ""
    margin: str = ""
    cash_generation: str = ""
    capex_intensity: str = ""
    leverage: str = ""
    diversification: str = ""
    execution_load: str = ""
    risk_level: str = ""
    dividend_outlook: str = ""


class CoarseNumericNotes(SchemaModel):
    yoy_growth_range_pct: Optional[str] = None
    margin_change_bps: Optional[str] = None


class Scenario(ScenarioBase):
    outcomes: ScenarioOutcomes = Field(default_factory=ScenarioOutcomes)
    coarse_numeric_notes: CoarseNumericNotes = Field(default_factory=CoarseNumericNotes)


class DividendForwardAnalysis(SchemaModel):
    applies: bool = False
    base_outlook: str = ""
    sustainability_drivers: dict[str, str] = Field(default_factory=dict)
    scenario_differentiation: dict[str, Optional[str]] = Field(default_factory=dict)
    policy_inflection_signals: list[str] = Field(default_factory=list)
    management_signaling: dict[str, str] = Field(default_factory=dict)
    notes: Optional[str] = None


class GeneralPredictiveInference(StagePayload):
    coverage: Coverage = Field(default_factory=Coverage)
    horizon_selection: HorizonSelection = Field(default_factory=HorizonSelection)
    assumption_journal: list[str] = Field(default_factory=list)
    base_state: BaseState = Field(default_factory=BaseState)
    scenarios: list[Scenario]
    uncertainty: Uncertainty = Field(default_factory=Uncertainty)
    transition_map: list[TransitionEdge] = Field(default_factory=list)
    dividend_forward_analysis: Optional[DividendForwardAnalysis] = None
    features_for_downstream: PredictiveFeatures = Field(default_factory=PredictiveFeatures)
    ui_summaries: UISummaries = Field(default_factory=UISummaries)


# ── Business thesis ──────────────────────────────────────────────────


class OperatingModel(SchemaModel):
    strengths: list[str] = Field(default_factory=list)
    constraints: list[str] = Field(default_factory=list)


class StructuralPosition(SchemaModel):
    moat_label: str = ""
    switching_costs: str = ""
    regulatory_posture: str = ""
    notes: str = ""


class BusinessThesis(SchemaModel):
    thesis_statement: str = ""
    operating_model: OperatingModel = Field(default_factory=OperatingModel)
    value_creation_drivers: list[str] = Field(default_factory=list)
    fragilities: list[str] = Field(default_factory=list)
    structural_position: StructuralPosition = Field(default_factory=StructuralPosition)


class GeneralBusinessThesis(ThesisPayloadBase):
    business_thesis: BusinessThesis = Field(default_factory=BusinessThesis)
