"""Nested pydantic-settings configuration.

Each sub-config reads its own ``TEMPDATA_*`` env vars::

    export TEMPDATA_PROVIDER=session
    export TEMPDATA_SESSION_KEY=_flash
    export TEMPDATA_OBSERVABILITY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class TempDataConfig(BaseSettings):
    """Provider selection.

    Env vars use ``TEMPDATA_`` prefix.
    """

    model_config = {"env_prefix": "TEMPDATA_"}

    provider: Literal["memory", "session"] = "memory"
    session_key: str = Field(default="__tempdata", min_length=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``TEMPDATA_OBSERVABILITY_`` prefix. ``json_logs`` left unset
    means JSON lines when stderr is not a TTY.
    """

    model_config = {"env_prefix": "TEMPDATA_OBSERVABILITY_"}

    log_level: str = "INFO"
    json_logs: bool | None = None


class AppSettings(BaseSettings):
    """Top-level settings aggregating all sub-configs."""

    tempdata: TempDataConfig = Field(default_factory=TempDataConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
