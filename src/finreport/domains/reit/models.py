"""REIT stage payload schemas.

REIT payloads always carry ``window``; the thesis stage nests its narrative
under ``reit_thesis`` instead of ``business_thesis``.
"""

from __future__ import annotations

from typing import Optional

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
    ViabilityAssessment,
    Window,
    YearAction,
    YearChange,
    YearLabel,
    YieldProfile,
)

# ── Multi-year analysis ──────────────────────────────────────────────


class OccupancyTrend(SchemaModel):
    label: str = ""
    average_occupancy_pct: Optional[float] = None
    rationale: str = ""
    notes: Optional[str] = None


class LeasingEconomics(SchemaModel):
    rent_spread_trend: str = ""
    escalators_presence: str = ""
    notes: str = ""


class ExpiryBuckets(SchemaModel):
    next_12m_pct: Optional[float] = None
    next_36m_pct: Optional[float] = None
    next_60m_pct: Optional[float] = None


class LeaseProfile(SchemaModel):
    walt_years: Optional[float] = None
    expiry_buckets: ExpiryBuckets = Field(default_factory=ExpiryBuckets)
    releasing_risk_label: str = ""


class TenantConcentration(SchemaModel):
    top_tenant_pct_rent: Optional[float] = None
    investment_grade_exposure_label: str = ""
    concentration_label: str = ""
    notes: str = ""


class PropertyTypeShare(SchemaModel):
    type: str = ""
    approx_share_label: str = ""


class GeographyShare(SchemaModel):
    region_or_market: str = ""
    approx_share_label: str = ""


class ReitSemanticThemes(SchemaModel):
    same_store_noi_trend: LabeledTheme = Field(default_factory=LabeledTheme)
    occupancy_trend: OccupancyTrend = Field(default_factory=OccupancyTrend)
    leasing_economics: LeasingEconomics = Field(default_factory=LeasingEconomics)
    lease_profile: LeaseProfile = Field(default_factory=LeaseProfile)
    tenant_concentration: TenantConcentration = Field(default_factory=TenantConcentration)
    property_type_mix: list[PropertyTypeShare] = Field(default_factory=list)
    geography_mix: list[GeographyShare] = Field(default_factory=list)
    strategy_evolution: list[YearChange] = Field(default_factory=list)
    competitive_posture: CompetitivePosture = Field(default_factory=CompetitivePosture)
    external_growth: ExternalGrowth = Field(default_factory=ExternalGrowth)
    balance_sheet_liquidity: LeverageLiquidity = Field(default_factory=LeverageLiquidity)
    risk_register: list[RiskRegisterEntry] = Field(default_factory=list)


class ReitTimeseries(SchemaModel):
    same_store_noi_by_year: list[YearLabel] = Field(default_factory=list)
    occupancy_by_year: list[YearLabel] = Field(default_factory=list)
    distribution_policy_by_year: list[YearLabel] = Field(default_factory=list)


class ReitOptionalNumerics(SchemaModel):
    mentioned_ffo_affo_growth_pct: Optional[float] = None
    mentioned_affo_payout_ratio_pct: Optional[float] = None
    net_debt_to_ebitdare_range: Optional[str] = None
    fixed_vs_variable_debt_mix_pct: Optional[str] = None
    walt_years: Optional[float] = None
    cap_rate_notes: Optional[str] = None
    notes: str = ""


class ReitClassification(SchemaModel):
    primary: str = ""
    secondary: list[str] = Field(default_factory=list)
    reit_profile_tags: list[str] = Field(default_factory=list)
    rationale: str = ""


class ReitScores(SchemaModel):
    portfolio_quality_occupancy: Optional[float] = None
    same_store_noi_trend: Optional[float] = None
    affo_stability_payout: Optional[float] = None
    balance_sheet_liquidity: Optional[float] = None
    lease_maturity_concentration_risk: Optional[float] = None
    tenant_industry_diversification: Optional[float] = None
    external_growth_discipline: Optional[float] = None
    risk_overhangs: Optional[float] = None
    weights: list[float] = Field(default_factory=list)
    composite_score: Optional[float] = None


class ReitSustainabilitySignals(SchemaModel):
    affo_coverage: str = ""
    ffo_coverage: str = ""
    policy_consistency: str = ""
    management_commitment: str = ""


class ReitCoverageMetrics(SchemaModel):
    affo_payout_ratio_bucket: str = ""
    ffo_payout_ratio_bucket: str = ""
    coverage_trend: str = ""


class ReitSpecificFactors(SchemaModel):
    taxable_income_requirement_mentioned: bool = False
    return_of_capital_component: str = ""
    capital_recycling_impact: str = ""


class ReitDistributionAnalysis(SchemaModel):
    applies: bool = False
    cadence: Optional[str] = None
    policy_characterization: str = ""
    sustainability_signals: ReitSustainabilitySignals = Field(
        default_factory=ReitSustainabilitySignals
    )
    coverage_metrics: ReitCoverageMetrics = Field(default_factory=ReitCoverageMetrics)
    distribution_actions: list[YearAction] = Field(default_factory=list)
    policy_philosophy: str = ""
    yield_profile: YieldProfile = Field(default_factory=YieldProfile)
    reit_specific_factors: ReitSpecificFactors = Field(default_factory=ReitSpecificFactors)
    sustainability_factors: list[str] = Field(default_factory=list)
    notes: Optional[str] = None


class ReitMultiYearAnalysis(StagePayload):
    window: Window
    coverage: Coverage = Field(default_factory=Coverage)
    semantic_themes: ReitSemanticThemes
    timeseries_semantic: ReitTimeseries = Field(default_factory=ReitTimeseries)
    optional_numerics: ReitOptionalNumerics = Field(default_factory=ReitOptionalNumerics)
    classification: ReitClassification = Field(default_factory=ReitClassification)
    scores: ReitScores = Field(default_factory=ReitScores)
    grading: Grading = Field(default_factory=Grading)
    distribution_analysis: Optional[ReitDistributionAnalysis] = None
    features_for_downstream: dict[str, str] = Field(default_factory=dict)
    ui_summaries: UISummaries = Field(default_factory=UISummaries)


# ── Management credibility ───────────────────────────────────────────


class ReitDisclosureHygiene(SchemaModel):
    nareit_ffo_definition_clarity: str = ""
    affo_definition_stability: str = ""
    reconciliation_quality: str = ""
    same_store_cohort_integrity: str = ""
    impairment_restructure_clarity: str = ""
    restatement_or_weakness_mentions: str = ""
    segment_bridge_quality: str = ""


class ReitStrategicCoherence(StrategicCoherence):
    same_store_definition_changes_label: str = ""


class DistributionPolicyCommunication(SchemaModel):
    cadence_label: str = ""
    change_communication_label: str = ""
    coverage_context_label: str = ""
    notes: str = ""


class ReitCredibilityAssessment(CredibilityAssessmentBase):
    disclosure_hygiene: ReitDisclosureHygiene = Field(default_factory=ReitDisclosureHygiene)
    strategic_coherence: ReitStrategicCoherence = Field(default_factory=ReitStrategicCoherence)
    distribution_policy_communication: DistributionPolicyCommunication = Field(
        default_factory=DistributionPolicyCommunication
    )


class ReitManagementCredibility(StagePayload):
    window: Window
    coverage: Coverage = Field(default_factory=Coverage)
    credibility_assessment: ReitCredibilityAssessment
    classification: CredibilityClassification = Field(default_factory=CredibilityClassification)
    scores: CredibilityScores = Field(default_factory=CredibilityScores)
    features_for_downstream: dict[str, str] = Field(default_factory=dict)
    ui_summaries: UISummaries = Field(default_factory=UISummaries)


# ── Predictive inference ─────────────────────────────────────────────


class ReitStartingPoint(SchemaModel):
    ssnoi: str = ""
    occupancy: str = ""
    leasing_spreads: str = ""
    affo: str = ""
    risk_level: str = ""


class ReitBaseState(SchemaModel):
    starting_point: ReitStartingPoint = Field(default_factory=ReitStartingPoint)
    recent_inflections: list[str] = Field(default_factory=list)


class ReitScenarioOutcomes(SchemaModel):
    ssnoi: str = ""
    occupancy: str = ""
    leasing_spreads: str = ""
    affo: str = ""
    distribution_trajectory: str = ""
    coverage_direction: str = ""
    development_pace: str = ""
    external_growth: str = ""
    leverage: str = ""
    liquidity_refi: str = ""
    rate_sensitivity: str = ""
    releasing_risk: str = ""
    supply_pressure: str = ""


class ReitCoarseNumericNotes(SchemaModel):
    ssnoi_range_pct: Optional[str] = None
    leasing_spread_range_pct: Optional[str] = None
    affo_change_direction: Optional[str] = None


class ReitScenario(ScenarioBase):
    outcomes: ReitScenarioOutcomes = Field(default_factory=ReitScenarioOutcomes)
    coarse_numeric_notes: ReitCoarseNumericNotes = Field(default_factory=ReitCoarseNumericNotes)


class DistributionForwardAnalysis(SchemaModel):
    applies: bool = False
    base_outlook: str = ""
    sustainability_drivers: dict[str, str] = Field(default_factory=dict)
    reit_specific_factors: dict[str, str] = Field(default_factory=dict)
    scenario_differentiation: dict[str, Optional[str]] = Field(default_factory=dict)
    policy_inflection_signals: list[str] = Field(default_factory=list)
    management_signaling: dict[str, Optional[str]] = Field(default_factory=dict)
    reit_distribution_mechanics: dict[str, str] = Field(default_factory=dict)
    notes: Optional[str] = None


class ReitPredictiveInference(StagePayload):
    window: Window
    coverage: Coverage = Field(default_factory=Coverage)
    horizon_selection: HorizonSelection = Field(default_factory=HorizonSelection)
    assumption_journal: list[str] = Field(default_factory=list)
    base_state: ReitBaseState = Field(default_factory=ReitBaseState)
    scenarios: list[ReitScenario]
    uncertainty: Uncertainty = Field(default_factory=Uncertainty)
    transition_map: list[TransitionEdge] = Field(default_factory=list)
    distribution_forward_analysis: Optional[DistributionForwardAnalysis] = None
    features_for_downstream: PredictiveFeatures = Field(default_factory=PredictiveFeatures)
    ui_summaries: UISummaries = Field(default_factory=UISummaries)


# ── Business thesis ──────────────────────────────────────────────────


class PortfolioEngine(SchemaModel):
    noi_drivers: list[str] = Field(default_factory=list)
    constraints: list[str] = Field(default_factory=list)


class CapitalAllocationModel(SchemaModel):
    development_discipline: str = ""
    acquisition_selectivity: str = ""
    capital_recycling: str = ""
    distribution_sustainability: str = ""
    notes: str = ""


class ReitThesis(SchemaModel):
    thesis_statement: str = ""
    portfolio_engine: PortfolioEngine = Field(default_factory=PortfolioEngine)
    value_creation_drivers: list[str] = Field(default_factory=list)
    fragilities: list[str] = Field(default_factory=list)
    capital_allocation_model: CapitalAllocationModel = Field(
        default_factory=CapitalAllocationModel
    )


class ReitBusinessThesis(ThesisPayloadBase):
    window: Window
    reit_thesis: ReitThesis
    viability_assessment: ViabilityAssessment = Field(default_factory=ViabilityAssessment)
