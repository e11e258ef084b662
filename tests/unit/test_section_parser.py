"""Tests for parse_section: placeholder, plain text, structured and fallback paths."""

from __future__ import annotations

import json

import pytest

from finreport.models import NO_CONTENT_PLACEHOLDER, STRUCTURED_FALLBACK_SUMMARY
from finreport.parsing.section_parser import decode_json_object, parse_section


class TestEmptyContent:
    def test_empty_string_yields_placeholder(self) -> None:
        section = parse_section("", "Predictive Inference")
        assert section.content == "No content available"
        assert section.title == "Predictive Inference"
        assert section.structured_data is None
        assert section.subsections is None

    def test_whitespace_only_yields_placeholder(self) -> None:
        assert parse_section("  \n\t ", "T").content == NO_CONTENT_PLACEHOLDER

    def test_none_yields_placeholder(self) -> None:
        assert parse_section(None, "T").content == NO_CONTENT_PLACEHOLDER  # type: ignore[arg-type]


class TestPlainText:
    @pytest.mark.parametrize(
        "text",
        [
            "  Revenue grew steadily.  ",
            "\nManagement delivered on guidance.\n",
            "{not json",
            "Plain prose with a { brace",
        ],
    )
    def test_content_is_trimmed_text(self, text: str) -> None:
        section = parse_section(text, "T")
        assert section.content == text.strip()
        assert section.structured_data is None
        assert section.subsections is None

    def test_trimming_is_idempotent(self) -> None:
        first = parse_section("   Steady compounder.   ", "T")
        second = parse_section(first.content, "T")
        assert second.content == first.content

    @pytest.mark.parametrize("text", ["[1, 2, 3]", "42", '"quoted"', "true", "null"])
    def test_non_object_json_uses_original_string(self, text: str) -> None:
        section = parse_section(f"  {text} ", "T")
        assert section.content == text
        assert section.structured_data is None

    @pytest.mark.parametrize("text", ['{"score": NaN}', '{"score": Infinity}', "-Infinity"])
    def test_non_standard_constants_are_not_json(self, text: str) -> None:
        section = parse_section(text, "T")
        assert section.content == text
        assert section.structured_data is None


class TestStructured:
    def test_embedded_content_wins(self) -> None:
        payload = {"content": "X", "company": "ACME"}
        section = parse_section(json.dumps(payload), "T")
        assert section.content == "X"
        assert section.structured_data == payload

    def test_synthesizes_summary_without_content(self, acme_multi_year) -> None:
        section = parse_section(json.dumps(acme_multi_year), "Multi-Year Analysis")
        assert section.content.startswith("Analysis of ACME")
        assert section.structured_data == acme_multi_year

    def test_blank_embedded_content_is_replaced(self, acme_multi_year) -> None:
        acme_multi_year["content"] = "   "
        section = parse_section(json.dumps(acme_multi_year), "T")
        assert section.content.startswith("Analysis of ACME")

    def test_non_string_content_is_replaced(self) -> None:
        section = parse_section('{"content": 12}', "T")
        assert section.content == STRUCTURED_FALLBACK_SUMMARY

    def test_foreign_object_gets_generic_summary(self) -> None:
        section = parse_section('{"hello": "world"}', "T")
        assert section.content == "Structured analysis data available"
        assert section.structured_data == {"hello": "world"}

    def test_subsections_default_to_empty_list(self) -> None:
        section = parse_section('{"content": "X"}', "T")
        assert section.subsections == []

    def test_subsections_are_normalized(self) -> None:
        payload = {
            "content": "Parent",
            "subsections": [
                {"title": "Growth", "content": "Rising"},
                "not an object",
                {"title": "Empty"},
                {"content": "Nested", "subsections": [{"title": "Leaf", "content": "L"}]},
            ],
        }
        section = parse_section(json.dumps(payload), "T")
        assert section.subsections is not None
        assert [s.title for s in section.subsections] == ["Growth", "Empty", ""]
        assert section.subsections[0].content == "Rising"
        assert section.subsections[1].content == NO_CONTENT_PLACEHOLDER
        assert section.subsections[2].subsections is not None
        assert section.subsections[2].subsections[0].content == "L"

    def test_non_list_subsections_ignored(self) -> None:
        section = parse_section('{"content": "X", "subsections": "oops"}', "T")
        assert section.subsections == []

    def test_schema_kind_toggle(self) -> None:
        payload = {"company": "ACME", "schema_kind": "final_thesis"}
        assert parse_section(json.dumps(payload), "T").content.startswith("Business thesis synthesis")
        assert parse_section(json.dumps(payload), "T", use_schema_kind=False).content == (
            STRUCTURED_FALLBACK_SUMMARY
        )


class TestDecodeJsonObject:
    def test_object(self) -> None:
        assert decode_json_object('{"a": 1}') == {"a": 1}

    @pytest.mark.parametrize("text", ["", "[]", "1", "{bad", '{"a": NaN}'])
    def test_rejects_everything_else(self, text: str) -> None:
        assert decode_json_object(text) is None

    def test_deeply_nested_input_does_not_raise(self) -> None:
        text = "[" * 100_000 + "]" * 100_000
        assert decode_json_object(text) is None
