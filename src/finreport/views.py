"""Section views: a parsed section as either prose or a typed payload.

A renderer that only ever receives :class:`PlainView` or
:class:`StructuredView` cannot forget the fallback branch::

    for stage, view in report_views(report).items():
        match view:
            case StructuredView(payload=payload):
                render_widgets(payload)
            case PlainView(text=text):
                render_preformatted(text)

:func:`to_view` applies the shallow fingerprint first and then, unless
``deep=False``, validates the payload into its stage model.  Any failure
degrades to :class:`PlainView` with the section's ``content``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import ValidationError

from finreport.domains.common import StagePayload
from finreport.domains.registry import get_registry
from finreport.exceptions import SchemaMismatchError
from finreport.models import ParsedReport, ParsedSection, Stage
from finreport.validation.guards import has_valid_structure, resolve_structured_data

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlainView:
    """Section rendered as preformatted text."""

    stage: Stage
    title: str
    text: str


@dataclass(frozen=True)
class StructuredView:
    """Section with a structured payload.

    ``payload`` is the validated stage model, or ``None`` when the view was
    built with ``deep=False``.
    """

    stage: Stage
    title: str
    text: str
    payload: Optional[StagePayload]
    raw: dict[str, Any]


SectionView = Union[PlainView, StructuredView]


def load_stage_payload(data: Any, classification: Any, stage: Stage) -> StagePayload:
    """Validate *data* into the stage model for *classification*.

    Raises:
        SchemaMismatchError: If the payload does not satisfy the model.
    """
    profile = get_registry().lookup(classification)
    model = profile.schema_for(stage)
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise SchemaMismatchError(
            f"{stage.value} payload does not match the {profile.name} schema "
            f"({exc.error_count()} error(s))",
            classification=profile.name,
            stage=stage.value,
            errors=exc.errors(include_url=False, include_context=False),
        ) from exc


def to_view(
    section: ParsedSection,
    classification: Any,
    stage: Stage,
    *,
    deep: bool = True,
) -> SectionView:
    """Pick the rendering variant for one section."""
    plain = PlainView(stage=stage, title=section.title, text=section.content)

    data = resolve_structured_data(section)
    if data is None or not has_valid_structure(data, classification, stage):
        return plain

    payload: Optional[StagePayload] = None
    if deep:
        try:
            payload = load_stage_payload(data, classification, stage)
        except SchemaMismatchError as exc:
            log.warning("Falling back to plain text for %s: %s", stage.value, exc)
            return plain

    return StructuredView(
        stage=stage,
        title=section.title,
        text=section.content,
        payload=payload,
        raw=data,
    )


def report_views(report: ParsedReport, *, deep: bool = True) -> dict[Stage, SectionView]:
    """Build a view for each of the four sections, keyed by stage."""
    return {
        stage: to_view(section, report.classification, stage, deep=deep)
        for stage, section in report.sections.items()
    }
