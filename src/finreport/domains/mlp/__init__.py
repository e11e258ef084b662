"""MLP (master limited partnership) schema family."""

from __future__ import annotations

from finreport.domains.mlp.models import (
    MlpBusinessThesis,
    MlpManagementCredibility,
    MlpMultiYearAnalysis,
    MlpPredictiveInference,
)

__all__ = [
    "MlpBusinessThesis",
    "MlpManagementCredibility",
    "MlpMultiYearAnalysis",
    "MlpPredictiveInference",
]
