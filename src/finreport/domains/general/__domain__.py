"""General equity manifest, discovered by ClassificationRegistry.auto_discover()."""

from __future__ import annotations

from finreport.domains.registry import ClassificationProfile, SectionTitles
from finreport.models import Stage

profile = ClassificationProfile(
    name="general",
    display_name="General",
    description="Operating companies analysed on growth, margins and cash conversion",
    titles=SectionTitles(
        multi_year_analysis="Multi-Year Analysis",
        management_credibility="Management Credibility Assessment",
        predictive_inference="Predictive Inference",
        final_thesis="Investment Thesis",
    ),
    fingerprints={
        Stage.MULTI_YEAR: ("company", "window", "semantic_themes"),
        Stage.MANAGEMENT: ("company", "credibility_assessment"),
        Stage.PREDICTIVE: ("company", "scenarios"),
        Stage.THESIS: ("company", "viability_assessment"),
    },
    schemas={
        Stage.MULTI_YEAR: "finreport.domains.general.models:GeneralMultiYearAnalysis",
        Stage.MANAGEMENT: "finreport.domains.general.models:GeneralManagementCredibility",
        Stage.PREDICTIVE: "finreport.domains.general.models:GeneralPredictiveInference",
        Stage.THESIS: "finreport.domains.general.models:GeneralBusinessThesis",
    },
)
