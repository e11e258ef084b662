"""General equity schema family (the default for unknown classifications)."""

from __future__ import annotations

from finreport.domains.general.models import (
    GeneralBusinessThesis,
    GeneralManagementCredibility,
    GeneralMultiYearAnalysis,
    GeneralPredictiveInference,
)

__all__ = [
    "GeneralBusinessThesis",
    "GeneralManagementCredibility",
    "GeneralMultiYearAnalysis",
    "GeneralPredictiveInference",
]
