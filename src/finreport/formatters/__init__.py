"""Output formatters for parsed reports."""

from __future__ import annotations

from finreport.formatters.json_formatter import JSONFormatter
from finreport.formatters.protocols import IOutputFormatter

__all__ = ["IOutputFormatter", "JSONFormatter"]
