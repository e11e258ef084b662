"""Turn one raw report text field into a :class:`ParsedSection`.

A raw field is either free prose or a single JSON object.  Objects keep their
decoded form as ``structured_data`` and get a synthesized summary when they
carry no ``content`` of their own.  Anything that is not a JSON object,
including JSON arrays and scalars, is treated as prose using the original
string.  Parsing never raises.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from finreport.models import NO_CONTENT_PLACEHOLDER, ParsedSection
from finreport.parsing.summary import synthesize_summary

log = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def decode_json_object(text: str) -> dict[str, Any] | None:
    """Decode *text* as a JSON object, returning ``None`` for anything else.

    ``NaN`` and ``Infinity`` literals are rejected.
    """
    try:
        decoded = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        log.debug("Section content is not JSON: %s", exc)
        return None
    if not isinstance(decoded, dict):
        log.debug("Section JSON decoded to %s, treating as text", type(decoded).__name__)
        return None
    return decoded


def parse_section(content: str, title: str, *, use_schema_kind: bool = True) -> ParsedSection:
    """Normalize one raw text field.

    Args:
        content: Raw field value; empty or whitespace-only yields the
            ``"No content available"`` placeholder.
        title: Display title for the section.
        use_schema_kind: Let an explicit ``schema_kind`` in a structured
            payload pick the summary template.
    """
    if not content or not content.strip():
        return ParsedSection(title=title, content=NO_CONTENT_PLACEHOLDER)

    decoded = decode_json_object(content)
    if decoded is None:
        return ParsedSection(title=title, content=content.strip())

    return ParsedSection(
        title=title,
        content=(
            _embedded_content(decoded)
            or synthesize_summary(decoded, use_schema_kind=use_schema_kind)
        ),
        structured_data=decoded,
        subsections=_subsections(decoded.get("subsections")),
    )


def _embedded_content(decoded: dict[str, Any]) -> str | None:
    value = decoded.get("content")
    if isinstance(value, str) and value.strip():
        return value
    return None


def _subsections(value: Any) -> list[ParsedSection]:
    """Normalize an embedded ``subsections`` list; non-object entries are dropped."""
    if not isinstance(value, list):
        return []
    sections: list[ParsedSection] = []
    for entry in value:
        if not isinstance(entry, dict):
            continue
        title = entry.get("title")
        body = _embedded_content(entry)
        sections.append(
            ParsedSection(
                title=title if isinstance(title, str) else "",
                content=body or NO_CONTENT_PLACEHOLDER,
                subsections=_subsections(entry.get("subsections")) or None,
            )
        )
    return sections
