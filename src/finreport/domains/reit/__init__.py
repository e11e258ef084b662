"""REIT schema family."""

from __future__ import annotations

from finreport.domains.reit.models import (
    ReitBusinessThesis,
    ReitManagementCredibility,
    ReitMultiYearAnalysis,
    ReitPredictiveInference,
)

__all__ = [
    "ReitBusinessThesis",
    "ReitManagementCredibility",
    "ReitMultiYearAnalysis",
    "ReitPredictiveInference",
]
