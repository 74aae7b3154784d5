"""In-memory tempdata provider — dict-backed, ideal for tests and single-process apps."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Mapping
from typing import Any

log = logging.getLogger(__name__)


class MemoryTempDataProvider:
    """Stores each context's tempdata in a plain dict — nothing touches disk.

    ``key_func`` maps a context to its storage key; by default the context
    itself is the key and must be hashable.
    """

    def __init__(self, key_func: Callable[[Any], Hashable] | None = None) -> None:
        self._key_func = key_func or (lambda context: context)
        self._store: dict[Hashable, dict[str, Any]] = {}

    def load_tempdata(self, context: Any) -> dict[str, Any] | None:
        stored = self._store.get(self._key_func(context))
        return dict(stored) if stored is not None else None

    def save_tempdata(self, context: Any, values: Mapping[str, Any]) -> None:
        key = self._key_func(context)
        if values:
            self._store[key] = dict(values)
            log.debug("Saved %d tempdata entries for %r", len(values), key)
        else:
            self._store.pop(key, None)

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
