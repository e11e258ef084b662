"""Readable summaries for structured section payloads.

Used when a decoded payload carries no ``content`` of its own.  The stage is
picked from an explicit ``schema_kind`` field when present, otherwise from
ordered key checks, most specific first::

    company + window + semantic_themes + grading              -> multi-year
    company + window + credibility_assessment + scores        -> management
    company + window + scenarios + base_state                 -> predictive
    company + window + business_thesis + viability_assessment -> thesis

A payload matching none of them gets ``STRUCTURED_FALLBACK_SUMMARY``.
Every nested read is safe; missing values render as ``N/A``.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable

from finreport.models import STRUCTURED_FALLBACK_SUMMARY, Stage

log = logging.getLogger(__name__)

MISSING = "N/A"

# Numbers at or above this magnitude render in exponent form
EXPONENT_THRESHOLD = 10**21

_SCHEMA_KIND_ALIASES: dict[str, Stage] = {
    "multi_year_analysis": Stage.MULTI_YEAR,
    "multi_year": Stage.MULTI_YEAR,
    "multiyear": Stage.MULTI_YEAR,
    "management_credibility": Stage.MANAGEMENT,
    "management": Stage.MANAGEMENT,
    "credibility": Stage.MANAGEMENT,
    "predictive_inference": Stage.PREDICTIVE,
    "predictive": Stage.PREDICTIVE,
    "final_thesis": Stage.THESIS,
    "thesis": Stage.THESIS,
    "business_thesis": Stage.THESIS,
    "business_assessment": Stage.THESIS,
    "reit_thesis": Stage.THESIS,
}

# Order matters: a payload satisfying several key groups takes the first.
LEGACY_SUMMARY_KEYS: tuple[tuple[Stage, tuple[str, ...]], ...] = (
    (Stage.MULTI_YEAR, ("company", "window", "semantic_themes", "grading")),
    (Stage.MANAGEMENT, ("company", "window", "credibility_assessment", "scores")),
    (Stage.PREDICTIVE, ("company", "window", "scenarios", "base_state")),
    (Stage.THESIS, ("company", "window", "business_thesis", "viability_assessment")),
)


def stage_from_schema_kind(value: Any) -> Stage | None:
    """Map an explicit ``schema_kind`` value to a stage, ``None`` if unknown."""
    if not isinstance(value, str):
        return None
    return _SCHEMA_KIND_ALIASES.get(value.strip().lower())


def detect_summary_stage(data: Any, *, use_schema_kind: bool = True) -> Stage | None:
    """Return the stage whose summary template applies to *data*, if any."""
    if not isinstance(data, dict):
        return None
    if use_schema_kind:
        explicit = stage_from_schema_kind(data.get("schema_kind"))
        if explicit is not None:
            return explicit
    for stage, keys in LEGACY_SUMMARY_KEYS:
        if all(_truthy(data.get(key)) for key in keys):
            return stage
    return None


def synthesize_summary(data: Any, *, use_schema_kind: bool = True) -> str:
    """Build a human-readable synopsis of a structured stage payload."""
    stage = detect_summary_stage(data, use_schema_kind=use_schema_kind)
    if stage is None:
        log.debug("No summary template matches payload, using generic fallback")
        return STRUCTURED_FALLBACK_SUMMARY

    explicit = use_schema_kind and stage_from_schema_kind(data.get("schema_kind")) is not None
    log.debug("Synthesizing %s summary (explicit=%s)", stage.value, explicit)
    if stage is Stage.THESIS:
        return _thesis_summary(data, allow_reit_block=explicit)
    return _SYNTHESIZERS[stage](data)


# ── Templates ────────────────────────────────────────────────────────


def _multi_year_summary(data: dict[str, Any]) -> str:
    themes = _dig(data, "semantic_themes")
    lines = [
        f"Analysis of {_text(data.get('company'))} covering {_window_phrase(data)}.",
        "",
        "Key Themes:",
        _theme_bullet("Growth", themes, "growth_trajectory"),
        _theme_bullet("Margins", themes, "margin_trend"),
        _theme_bullet("Cash Conversion", themes, "cash_conversion"),
        "",
        f"Overall Grade: {_text(_dig(data, 'grading', 'letter'))} "
        f"(Composite Score: {_to_fixed(_dig(data, 'scores', 'composite_score'), 1)})",
    ]
    return _with_synopsis(lines, _dig(data, "ui_summaries", "synopsis"))


def _management_summary(data: dict[str, Any]) -> str:
    assessment = _dig(data, "credibility_assessment")
    lines = [
        f"Management credibility assessment of {_text(data.get('company'))} "
        f"covering {_window_phrase(data)}.",
        "",
        f"Credibility Tier: {_text(_dig(data, 'scores', 'credibility_tier'))}",
        f"Composite Score: {_to_fixed(_dig(data, 'scores', 'composite_score'), 1)}/10",
        "",
        "Key Assessments:",
        f"• Tone Profile: {_text(_dig(assessment, 'tone_profile', 'tone_balance_label'))}",
        f"• Follow-through: {_count(_dig(assessment, 'commitment_followthrough'))} commitments tracked",
        f"• Red Flags: {_count(_dig(assessment, 'red_flags'))} identified",
        f"• Green Flags: {_count(_dig(assessment, 'green_flags'))} identified",
    ]
    return _with_synopsis(lines, _dig(data, "ui_summaries", "synopsis"))


def _predictive_summary(data: dict[str, Any]) -> str:
    start = _dig(data, "base_state", "starting_point")
    lines = [
        f"Predictive outlook for {_text(data.get('company'))} covering {_window_phrase(data)}.",
        "",
        f"Horizon: {_text(_dig(data, 'horizon_selection', 'length'))} "
        f"{_text(_dig(data, 'horizon_selection', 'type'))}",
        f"Base Case Confidence: {_base_confidence(data.get('scenarios'))}",
        "",
        "Current State:",
        f"• Growth: {_text(_dig(start, 'growth'))}",
        f"• Margins: {_text(_dig(start, 'margin'))}",
        f"• Cash Generation: {_text(_dig(start, 'cash_generation'))}",
        f"• Risk Level: {_text(_dig(start, 'risk_level'))}",
    ]
    return _with_synopsis(lines, _dig(data, "ui_summaries", "synopsis"))


def _thesis_summary(data: dict[str, Any], *, allow_reit_block: bool = False) -> str:
    thesis = _dig(data, "business_thesis")
    if thesis is None and allow_reit_block:
        thesis = _dig(data, "reit_thesis")
    position = _dig(thesis, "structural_position")
    lines = [
        f"Business thesis synthesis for {_text(data.get('company'))} "
        f"covering {_window_phrase(data)}.",
        "",
        f"Viability Tier: {_text(_dig(data, 'viability_assessment', 'tier'))}",
        f"Composite Score: {_to_fixed(_dig(data, 'viability_assessment', 'composite'), 1)}/10",
        "",
        f"Thesis: {_text(_dig(thesis, 'thesis_statement'))}",
        "",
        "Structural Position:",
        f"• Moat: {_text(_dig(position, 'moat_label'))}",
        f"• Switching Costs: {_text(_dig(position, 'switching_costs'))}",
        f"• Regulatory Posture: {_text(_dig(position, 'regulatory_posture'))}",
    ]
    return _with_synopsis(lines, data.get("synopsis"))


_SYNTHESIZERS: dict[Stage, Callable[[dict[str, Any]], str]] = {
    Stage.MULTI_YEAR: _multi_year_summary,
    Stage.MANAGEMENT: _management_summary,
    Stage.PREDICTIVE: _predictive_summary,
    Stage.THESIS: _thesis_summary,
}


# ── Helpers ──────────────────────────────────────────────────────────


def _truthy(value: Any) -> bool:
    """Truthiness as the report pipeline defines it: empty containers count as present."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, float):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def _dig(data: Any, *keys: str) -> Any:
    """Follow *keys* through nested dicts, returning ``None`` on any miss."""
    current = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def _text(value: Any) -> str:
    if value is None or value == "":
        return MISSING
    return _label(value)


def _label(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < EXPONENT_THRESHOLD:
        return str(int(value))
    if isinstance(value, list):
        return ",".join("" if item is None else _label(item) for item in value)
    if isinstance(value, dict):
        return MISSING
    return str(value)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _to_fixed(value: Any, digits: int) -> str:
    """Format *value* with *digits* decimals, rounding half away from zero.

    Works on the exact binary value of the float, so ``1.005`` formats as
    ``1.00`` with two digits.  Magnitudes of ``1e21`` and above switch to
    exponent form.
    """
    if not _is_number(value):
        return MISSING
    if abs(value) >= EXPONENT_THRESHOLD:
        return _exponent_form(value)
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _exponent_form(value: int | float) -> str:
    try:
        return repr(float(value))
    except OverflowError:
        # Integer beyond double range
        return "Infinity" if value > 0 else "-Infinity"


def _count(value: Any) -> int:
    return len(value) if isinstance(value, list) else 0


def _window_phrase(data: dict[str, Any]) -> str:
    window = data.get("window")
    return (
        f"{_text(_dig(window, 'num_years'))} years "
        f"(FY{_text(_dig(window, 'start_fy'))}-{_text(_dig(window, 'end_fy'))})"
    )


def _theme_bullet(label: str, themes: Any, key: str) -> str:
    theme = _dig(themes, key)
    return f"• {label}: {_text(_dig(theme, 'label'))} - {_text(_dig(theme, 'rationale'))}"


def _base_confidence(scenarios: Any) -> str:
    if not isinstance(scenarios, list):
        return MISSING
    base = next(
        (s for s in scenarios if isinstance(s, dict) and s.get("name") == "Base"),
        None,
    )
    if base is None:
        return MISSING
    confidence = base.get("confidence")
    if not _is_number(confidence):
        return MISSING
    return f"{_to_fixed(confidence * 100, 0)}%"


def _with_synopsis(lines: list[str], synopsis: Any) -> str:
    if isinstance(synopsis, str) and synopsis.strip():
        lines = [*lines, "", synopsis]
    return "\n".join(lines)
