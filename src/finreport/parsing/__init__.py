"""Section parsing, summary synthesis and classification routing."""

from __future__ import annotations

from finreport.parsing.router import (
    classification_display_name,
    parse_general_report,
    parse_mlp_report,
    parse_reit_report,
    parse_report,
)
from finreport.parsing.section_parser import decode_json_object, parse_section
from finreport.parsing.summary import synthesize_summary

__all__ = [
    "classification_display_name",
    "decode_json_object",
    "parse_general_report",
    "parse_mlp_report",
    "parse_reit_report",
    "parse_report",
    "parse_section",
    "synthesize_summary",
]
