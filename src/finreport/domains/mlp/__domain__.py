"""MLP manifest, discovered by ClassificationRegistry.auto_discover()."""

from __future__ import annotations

from finreport.domains.registry import ClassificationProfile, SectionTitles
from finreport.models import Stage

profile = ClassificationProfile(
    name="mlp",
    display_name="MLP",
    description="Energy infrastructure partnerships analysed on throughput, fee mix and DCF coverage",
    titles=SectionTitles(
        multi_year_analysis="Multi-Year MLP Distribution & Performance Analysis",
        management_credibility="Management & Distribution Coverage Assessment",
        predictive_inference="Energy Infrastructure Outlook & MLP Positioning",
        final_thesis="MLP Investment Thesis",
    ),
    fingerprints={
        Stage.MULTI_YEAR: ("company", "window", "semantic_themes"),
        Stage.MANAGEMENT: ("company", "credibility_assessment"),
        Stage.PREDICTIVE: ("company", "scenarios"),
        Stage.THESIS: ("company", "viability_assessment"),
    },
    schemas={
        Stage.MULTI_YEAR: "finreport.domains.mlp.models:MlpMultiYearAnalysis",
        Stage.MANAGEMENT: "finreport.domains.mlp.models:MlpManagementCredibility",
        Stage.PREDICTIVE: "finreport.domains.mlp.models:MlpPredictiveInference",
        Stage.THESIS: "finreport.domains.mlp.models:MlpBusinessThesis",
    },
)
