"""Tests for synthesize_summary: template dispatch, formatting and rounding."""

from __future__ import annotations

import pytest

from finreport.models import STRUCTURED_FALLBACK_SUMMARY, Stage
from finreport.parsing.section_parser import parse_section
from finreport.parsing.summary import detect_summary_stage, stage_from_schema_kind, synthesize_summary


class TestMultiYearSummary:
    def test_exact_text(self, acme_multi_year) -> None:
        assert synthesize_summary(acme_multi_year) == (
            "Analysis of ACME covering 5 years (FY2019-2023).\n"
            "\n"
            "Key Themes:\n"
            "• Growth: Rising - steady demand\n"
            "• Margins: Stable - cost discipline\n"
            "• Cash Conversion: Strong - low capex\n"
            "\n"
            "Overall Grade: B+ (Composite Score: 7.3)\n"
            "\n"
            "solid quarter"
        )

    def test_contains_key_facts(self, acme_multi_year) -> None:
        summary = synthesize_summary(acme_multi_year)
        for fragment in ("ACME", "5 years", "Rising", "B+", "7.3"):
            assert fragment in summary

    def test_missing_nested_fields_render_na(self, acme_multi_year) -> None:
        del acme_multi_year["scores"]
        acme_multi_year["semantic_themes"] = {"growth_trajectory": {"label": "Rising"}}
        summary = synthesize_summary(acme_multi_year)
        assert "• Growth: Rising - N/A" in summary
        assert "• Margins: N/A - N/A" in summary
        assert "(Composite Score: N/A)" in summary

    def test_empty_synopsis_is_omitted(self, acme_multi_year) -> None:
        acme_multi_year["ui_summaries"] = {"synopsis": ""}
        assert synthesize_summary(acme_multi_year).endswith("(Composite Score: 7.3)")


class TestManagementSummary:
    def test_exact_text(self, acme_management) -> None:
        assert synthesize_summary(acme_management) == (
            "Management credibility assessment of ACME covering 5 years (FY2019-2023).\n"
            "\n"
            "Credibility Tier: Medium\n"
            "Composite Score: 7.3/10\n"
            "\n"
            "Key Assessments:\n"
            "• Tone Profile: Balanced\n"
            "• Follow-through: 2 commitments tracked\n"
            "• Red Flags: 1 identified\n"
            "• Green Flags: 2 identified\n"
            "\n"
            "mostly reliable"
        )

    def test_missing_lists_count_zero(self, acme_management) -> None:
        acme_management["credibility_assessment"] = {"tone_profile": "not a dict"}
        summary = synthesize_summary(acme_management)
        assert "• Tone Profile: N/A" in summary
        assert "• Follow-through: 0 commitments tracked" in summary
        assert "• Red Flags: 0 identified" in summary


class TestPredictiveSummary:
    def test_exact_text(self, acme_predictive) -> None:
        assert synthesize_summary(acme_predictive) == (
            "Predictive outlook for ACME covering 5 years (FY2019-2023).\n"
            "\n"
            "Horizon: 3 years\n"
            "Base Case Confidence: 55%\n"
            "\n"
            "Current State:\n"
            "• Growth: Moderate\n"
            "• Margins: Expanding\n"
            "• Cash Generation: Solid\n"
            "• Risk Level: Low"
        )

    def test_no_base_scenario(self, acme_predictive) -> None:
        acme_predictive["scenarios"] = [{"name": "Bull", "confidence": 0.6}]
        assert "Base Case Confidence: N/A" in synthesize_summary(acme_predictive)

    def test_base_without_numeric_confidence(self, acme_predictive) -> None:
        acme_predictive["scenarios"] = [{"name": "Base", "confidence": "high"}]
        assert "Base Case Confidence: N/A" in synthesize_summary(acme_predictive)

    def test_whole_percent_rounding(self, acme_predictive) -> None:
        acme_predictive["scenarios"] = [{"name": "Base", "confidence": 0.125}]
        assert "Base Case Confidence: 13%" in synthesize_summary(acme_predictive)


class TestThesisSummary:
    def test_exact_text(self, acme_thesis) -> None:
        assert synthesize_summary(acme_thesis) == (
            "Business thesis synthesis for ACME covering 5 years (FY2019-2023).\n"
            "\n"
            "Viability Tier: Strong\n"
            "Composite Score: 8.2/10\n"
            "\n"
            "Thesis: Niche leader compounding through pricing power\n"
            "\n"
            "Structural Position:\n"
            "• Moat: Narrow\n"
            "• Switching Costs: High\n"
            "• Regulatory Posture: Neutral\n"
            "\n"
            "durable franchise"
        )

    def test_reit_block_used_with_explicit_kind(self) -> None:
        payload = {
            "company": "Storage Trust",
            "schema_kind": "final_thesis",
            "reit_thesis": {"thesis_statement": "Self-storage consolidator"},
            "viability_assessment": {"tier": "Adequate", "composite": 6},
        }
        summary = synthesize_summary(payload)
        assert "Thesis: Self-storage consolidator" in summary
        assert "Composite Score: 6.0/10" in summary
        assert "covering N/A years (FYN/A-N/A)" in summary


class TestDispatch:
    def test_foreign_shape_falls_back(self) -> None:
        assert synthesize_summary({"company": "ACME"}) == STRUCTURED_FALLBACK_SUMMARY

    def test_non_dict_falls_back(self) -> None:
        assert synthesize_summary(["company"]) == STRUCTURED_FALLBACK_SUMMARY

    def test_legacy_checks_require_truthy_values(self, acme_multi_year) -> None:
        acme_multi_year["company"] = ""
        assert synthesize_summary(acme_multi_year) == STRUCTURED_FALLBACK_SUMMARY

    def test_empty_containers_count_as_present(self, acme_management) -> None:
        acme_management["scores"] = {}
        assert detect_summary_stage(acme_management) is Stage.MANAGEMENT

    def test_first_matching_group_wins(self, acme_multi_year, acme_management) -> None:
        merged = {**acme_management, **acme_multi_year}
        assert detect_summary_stage(merged) is Stage.MULTI_YEAR

    def test_schema_kind_overrides_key_order(self, acme_multi_year, acme_management) -> None:
        merged = {**acme_management, **acme_multi_year, "schema_kind": "management_credibility"}
        assert detect_summary_stage(merged) is Stage.MANAGEMENT
        assert detect_summary_stage(merged, use_schema_kind=False) is Stage.MULTI_YEAR

    def test_unknown_schema_kind_uses_legacy_checks(self, acme_predictive) -> None:
        acme_predictive["schema_kind"] = "something_else"
        assert detect_summary_stage(acme_predictive) is Stage.PREDICTIVE

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("multi_year", Stage.MULTI_YEAR),
            (" Management ", Stage.MANAGEMENT),
            ("predictive_inference", Stage.PREDICTIVE),
            ("business_thesis", Stage.THESIS),
            ("unknown", None),
            (3, None),
        ],
    )
    def test_schema_kind_aliases(self, value, expected) -> None:
        assert stage_from_schema_kind(value) is expected


class TestRounding:
    @pytest.mark.parametrize(
        ("score", "expected"),
        [(7.25, "7.3"), (7.0, "7.0"), (9, "9.0"), (0.05, "0.1"), (-1.25, "-1.3")],
    )
    def test_composite_one_decimal_half_up(self, acme_multi_year, score, expected) -> None:
        acme_multi_year["scores"] = {"composite_score": score}
        assert f"(Composite Score: {expected})" in synthesize_summary(acme_multi_year)

    @pytest.mark.parametrize("score", [None, "7.3", True, float("nan")])
    def test_non_numeric_composite(self, acme_multi_year, score) -> None:
        acme_multi_year["scores"] = {"composite_score": score}
        assert "(Composite Score: N/A)" in synthesize_summary(acme_multi_year)

    def test_huge_integer_composite(self, acme_multi_year) -> None:
        acme_multi_year["scores"] = {"composite_score": int("9" * 400)}
        assert "(Composite Score: Infinity)" in synthesize_summary(acme_multi_year)

    @pytest.mark.parametrize(
        ("score", "expected"),
        [(1e21, "1e+21"), (-2.5e300, "-2.5e+300"), (10**21, "1e+21"), (10**20, "100000000000000000000.0")],
    )
    def test_exponent_form_from_1e21(self, acme_multi_year, score, expected) -> None:
        acme_multi_year["scores"] = {"composite_score": score}
        assert f"(Composite Score: {expected})" in synthesize_summary(acme_multi_year)

    def test_huge_integer_confidence(self, acme_predictive) -> None:
        acme_predictive["scenarios"][1]["confidence"] = 10**400
        assert "Base Case Confidence: Infinity%" in synthesize_summary(acme_predictive)


class TestHugeIntegers:
    def test_huge_company_does_not_raise(self) -> None:
        section = parse_section('{"company":' + "1" * 400 + ',"window":{}}', "T")
        assert section.content == STRUCTURED_FALLBACK_SUMMARY
        assert section.structured_data["company"] == int("1" * 400)

    def test_huge_integer_counts_as_present(self, acme_thesis) -> None:
        acme_thesis["company"] = 10**400
        assert detect_summary_stage(acme_thesis) is Stage.THESIS
        assert synthesize_summary(acme_thesis).startswith(f"Business thesis synthesis for {10**400} ")

    def test_zero_integer_counts_as_absent(self, acme_thesis) -> None:
        acme_thesis["company"] = 0
        assert detect_summary_stage(acme_thesis) is None


class TestLabelRendering:
    def test_list_label_joined_with_commas(self, acme_thesis) -> None:
        acme_thesis["business_thesis"]["structural_position"]["moat_label"] = ["Wide", None, 2.0]
        assert "• Moat: Wide,,2\n" in synthesize_summary(acme_thesis)

    def test_dict_label_renders_placeholder(self, acme_thesis) -> None:
        acme_thesis["business_thesis"]["structural_position"]["moat_label"] = {"label": "Wide"}
        assert "• Moat: N/A\n" in synthesize_summary(acme_thesis)

    def test_large_float_label_uses_exponent(self, acme_thesis) -> None:
        acme_thesis["viability_assessment"]["tier"] = 1e300
        assert "Viability Tier: 1e+300\n" in synthesize_summary(acme_thesis)
