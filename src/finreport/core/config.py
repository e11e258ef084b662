"""Nested pydantic-settings configuration for finreport.

Each group reads its own ``FINREPORT_<GROUP>_*`` env vars::

    export FINREPORT_PARSING_HONOR_SCHEMA_KIND=false
    export FINREPORT_OBSERVABILITY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class ParsingConfig(BaseSettings):
    """Section parsing and view resolution toggles.

    Env vars use ``FINREPORT_PARSING_`` prefix.
    """

    model_config = {"env_prefix": "FINREPORT_PARSING_"}

    # Dispatch summaries on an explicit ``schema_kind`` field before key heuristics
    honor_schema_kind: bool = True
    # Validate structured payloads against the stage model before exposing them
    deep_validation: bool = True


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``FINREPORT_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "FINREPORT_OBSERVABILITY_"}

    service_name: str = "finreport"
    log_level: str = "INFO"
    # None: JSON lines unless stderr is a terminal
    json_logs: bool | None = None


class AppSettings(BaseSettings):
    """Top-level settings aggregating all sub-configs."""

    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
