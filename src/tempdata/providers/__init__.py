"""Pluggable tempdata providers: factory + backend implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tempdata.providers.memory import MemoryTempDataProvider
from tempdata.providers.protocols import IAsyncTempDataProvider, ITempDataProvider
from tempdata.providers.session import SessionTempDataProvider

if TYPE_CHECKING:
    from tempdata.config import TempDataConfig

__all__ = [
    "IAsyncTempDataProvider",
    "ITempDataProvider",
    "MemoryTempDataProvider",
    "SessionTempDataProvider",
    "create_provider",
]


def create_provider(settings: object | None = None) -> ITempDataProvider:
    """Create a provider from settings.

    Args:
        settings: An ``AppSettings`` or ``TempDataConfig`` instance.
            If None, returns MemoryTempDataProvider.
    """
    config: TempDataConfig | None = None

    if settings is not None:
        config = getattr(settings, "tempdata", None)
        if config is None and hasattr(settings, "provider"):
            config = settings  # type: ignore[assignment]

    if config is None:
        return MemoryTempDataProvider()

    provider = config.provider
    if provider == "memory":
        return MemoryTempDataProvider()
    elif provider == "session":
        return SessionTempDataProvider(session_key=config.session_key)
    else:
        raise ValueError(f"Unknown tempdata provider: {provider!r}")
