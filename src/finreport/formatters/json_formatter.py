"""JSON output formatter for parsed reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from finreport.models import ParsedReport


class JSONFormatter:
    """Renders a ParsedReport as indented, ASCII-escaped JSON bytes.

    Absent optional fields (``subsections``, ``structured_data``, unset
    metadata) are omitted.  Lone surrogates kept by the JSON decoder are
    written back as ``\\uXXXX`` escapes.
    """

    def __init__(self, *, indent: int = 2) -> None:
        self._indent = indent

    def format(self, report: ParsedReport, **kwargs: Any) -> bytes:
        """Serialize *report* to pretty-printed JSON bytes."""
        payload = report.model_dump(mode="python", exclude_none=True)
        return json.dumps(payload, indent=self._indent, default=str).encode()

    def format_to_file(self, report: ParsedReport, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(report, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"
