"""REIT manifest, discovered by ClassificationRegistry.auto_discover()."""

from __future__ import annotations

from finreport.domains.registry import ClassificationProfile, SectionTitles
from finreport.models import Stage

profile = ClassificationProfile(
    name="reit",
    display_name="REIT",
    description="Real estate investment trusts analysed on NOI, occupancy and AFFO coverage",
    titles=SectionTitles(
        multi_year_analysis="Multi-Year REIT Performance Analysis",
        management_credibility="Management & Capital Allocation Assessment",
        predictive_inference="Real Estate Market Outlook & REIT Positioning",
        final_thesis="REIT Investment Thesis",
    ),
    fingerprints={
        Stage.MULTI_YEAR: ("company", "window", "semantic_themes"),
        Stage.MANAGEMENT: ("company", "window", "credibility_assessment"),
        Stage.PREDICTIVE: ("company", "window", "scenarios"),
        Stage.THESIS: ("company", "window", "reit_thesis"),
    },
    schemas={
        Stage.MULTI_YEAR: "finreport.domains.reit.models:ReitMultiYearAnalysis",
        Stage.MANAGEMENT: "finreport.domains.reit.models:ReitManagementCredibility",
        Stage.PREDICTIVE: "finreport.domains.reit.models:ReitPredictiveInference",
        Stage.THESIS: "finreport.domains.reit.models:ReitBusinessThesis",
    },
)
