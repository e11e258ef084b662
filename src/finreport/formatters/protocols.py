"""Output formatter protocol: the contract every report formatter implements."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from finreport.models import ParsedReport


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for parsed-report formatters."""

    def format(self, report: ParsedReport, **kwargs: Any) -> bytes:
        """Render the report into output bytes."""
        ...

    def format_to_file(self, report: ParsedReport, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format."""
        ...


__all__ = ["IOutputFormatter"]
