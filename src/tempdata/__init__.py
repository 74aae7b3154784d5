"""tempdata: read-once flash data that survives exactly one more request.

Public API::

    from tempdata import (
        TempDataDictionary, tempdata_scope, async_tempdata_scope,
        MemoryTempDataProvider, SessionTempDataProvider, create_provider,
        AppSettings, setup_logging,
        TempDataError, DuplicateKeyError, ProviderError,
    )
"""

from __future__ import annotations

from tempdata.config import AppSettings, ObservabilityConfig, TempDataConfig
from tempdata.dictionary import TempDataDictionary
from tempdata.exceptions import DuplicateKeyError, ProviderError, TempDataError
from tempdata.logging_config import setup_logging
from tempdata.providers import (
    IAsyncTempDataProvider,
    ITempDataProvider,
    MemoryTempDataProvider,
    SessionTempDataProvider,
    create_provider,
)
from tempdata.scope import async_tempdata_scope, tempdata_scope

__all__ = [
    "AppSettings",
    "ObservabilityConfig",
    "TempDataConfig",
    "TempDataDictionary",
    "TempDataError",
    "DuplicateKeyError",
    "ProviderError",
    "IAsyncTempDataProvider",
    "ITempDataProvider",
    "MemoryTempDataProvider",
    "SessionTempDataProvider",
    "create_provider",
    "setup_logging",
    "tempdata_scope",
    "async_tempdata_scope",
]
