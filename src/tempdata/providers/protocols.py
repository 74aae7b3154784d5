"""Provider protocols: the contract every tempdata backend implements."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ITempDataProvider(Protocol):
    """Protocol for synchronous tempdata providers (memory, session, etc.).

    The context is opaque to the dictionary and passed through unmodified.
    """

    def load_tempdata(self, context: Any) -> Mapping[str, Any] | None:
        """Return the data saved for ``context``, or None if there is none."""
        ...

    def save_tempdata(self, context: Any, values: Mapping[str, Any]) -> None:
        """Replace whatever was stored for ``context`` with ``values``."""
        ...


@runtime_checkable
class IAsyncTempDataProvider(Protocol):
    """Protocol for providers whose storage calls are coroutines."""

    async def load_tempdata(self, context: Any) -> Mapping[str, Any] | None:
        """Return the data saved for ``context``, or None if there is none."""
        ...

    async def save_tempdata(self, context: Any, values: Mapping[str, Any]) -> None:
        """Replace whatever was stored for ``context`` with ``values``."""
        ...
