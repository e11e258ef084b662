"""Exception hierarchy for finreport."""

from __future__ import annotations

from typing import Any


class FinReportError(Exception):
    """Base exception for all finreport errors."""


class ReportInputError(FinReportError):
    """Raw report input could not be loaded into a ``RawReport``."""

    def __init__(self, message: str, raw_payload: Any = None) -> None:
        super().__init__(message)
        self.raw_payload = raw_payload


class SchemaMismatchError(FinReportError):
    """A structured payload passed the fingerprint but not the stage schema."""

    def __init__(
        self,
        message: str,
        *,
        classification: str = "",
        stage: str = "",
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.classification = classification
        self.stage = stage
        self.errors = errors or []


__all__ = [
    "FinReportError",
    "ReportInputError",
    "SchemaMismatchError",
]
