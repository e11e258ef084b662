"""Shallow structural checks on decoded section payloads.

These only test top-level key presence.  They let a consumer choose between
the rich structured view and the plain-text fallback; they do not prove the
payload conforms to its stage schema (see :mod:`finreport.views` for that).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from finreport.domains.registry import get_registry
from finreport.models import ParsedSection, Stage
from finreport.parsing.section_parser import decode_json_object


def is_valid(data: Any, required_keys: Iterable[str]) -> bool:
    """True iff *data* is a non-empty mapping holding every key in *required_keys*."""
    if not isinstance(data, Mapping) or not data:
        return False
    return all(key in data for key in required_keys)


def fingerprint_for(classification: Any, stage: Stage) -> tuple[str, ...]:
    """Minimal key set identifying *stage* payloads for *classification*.

    Unknown classifications use the general family's fingerprints.
    """
    return get_registry().lookup(classification).fingerprint(stage)


def has_valid_structure(data: Any, classification: Any, stage: Stage) -> bool:
    """Check *data* against the fingerprint for *classification* and *stage*."""
    return is_valid(data, fingerprint_for(classification, stage))


def resolve_structured_data(section: ParsedSection) -> dict[str, Any] | None:
    """Return the section's structured payload, re-decoding ``content`` if needed."""
    if section.structured_data is not None:
        return section.structured_data
    return decode_json_object(section.content)
