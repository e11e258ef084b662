"""Shared fixtures for finreport tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from finreport.models import RawReport


@pytest.fixture
def acme_multi_year() -> dict[str, Any]:
    """Multi-year payload without embedded ``content``."""
    return {
        "company": "ACME",
        "window": {"start_fy": 2019, "end_fy": 2023, "num_years": 5},
        "semantic_themes": {
            "growth_trajectory": {"label": "Rising", "rationale": "steady demand"},
            "margin_trend": {"label": "Stable", "rationale": "cost discipline"},
            "cash_conversion": {"label": "Strong", "rationale": "low capex"},
        },
        "grading": {"letter": "B+"},
        "scores": {"composite_score": 7.3},
        "ui_summaries": {"synopsis": "solid quarter"},
    }


@pytest.fixture
def acme_management() -> dict[str, Any]:
    return {
        "company": "ACME",
        "window": {"start_fy": 2019, "end_fy": 2023, "num_years": 5},
        "credibility_assessment": {
            "commitment_followthrough": [
                {"commitment_year": 2019, "commitment": "Exit legacy segment", "outcome_label": "Delivered"},
                {"commitment_year": 2021, "commitment": "Cut leverage", "outcome_label": "Partially"},
            ],
            "tone_profile": {"tone_balance_label": "Balanced"},
            "red_flags": ["Frequent KPI redefinitions"],
            "green_flags": ["Candid risk disclosure", "Consistent buybacks"],
        },
        "scores": {"composite_score": 7.25, "credibility_tier": "Medium"},
        "ui_summaries": {"synopsis": "mostly reliable"},
    }


@pytest.fixture
def acme_predictive() -> dict[str, Any]:
    return {
        "company": "ACME",
        "window": {"start_fy": 2019, "end_fy": 2023, "num_years": 5},
        "horizon_selection": {"type": "years", "length": 3, "reason": "capex cycle"},
        "base_state": {
            "starting_point": {
                "growth": "Moderate",
                "margin": "Expanding",
                "cash_generation": "Solid",
                "risk_level": "Low",
            }
        },
        "scenarios": [
            {"name": "Bull", "confidence": 0.2},
            {"name": "Base", "confidence": 0.55},
            {"name": "Bear", "confidence": 0.25},
        ],
        "ui_summaries": {"synopsis": ""},
    }


@pytest.fixture
def acme_thesis() -> dict[str, Any]:
    return {
        "company": "ACME",
        "window": {"start_fy": 2019, "end_fy": 2023, "num_years": 5},
        "business_thesis": {
            "thesis_statement": "Niche leader compounding through pricing power",
            "structural_position": {
                "moat_label": "Narrow",
                "switching_costs": "High",
                "regulatory_posture": "Neutral",
            },
        },
        "viability_assessment": {"tier": "Strong", "composite": 8.2},
        "synopsis": "durable franchise",
    }


@pytest.fixture
def raw_record(acme_multi_year, acme_management, acme_predictive, acme_thesis) -> dict[str, Any]:
    """A stored general-equity record with four structured fields."""
    return {
        "ticker": "ACME",
        "years_range": "2019-2023",
        "classification": "general",
        "multi_year_analysis": json.dumps(acme_multi_year),
        "management_credibility": json.dumps(acme_management),
        "predictive_inference": json.dumps(acme_predictive),
        "business_assessment": json.dumps(acme_thesis),
        "years_used": [2019, 2020, 2021, 2022, 2023],
        "analysis_years": 5,
        "model_used": "analyst-v2",
        "generated_at": "2024-03-01T12:00:00Z",
        "is_free": False,
        "has_access": True,
    }


@pytest.fixture
def raw_report(raw_record) -> RawReport:
    return RawReport.model_validate(raw_record)
