"""Read-tracked dictionary for flash data.

Values written during one request stay readable until the next request reads
them; ``save()`` then drops every entry that was read and not kept.

Usage::

    tempdata = TempDataDictionary(context, provider)
    tempdata["message"] = "Saved."      # unread, survives the next save()
    ...
    message = tempdata["message"]       # read, dropped at the next save()
    tempdata.keep("message")            # ...unless kept
    tempdata.save()
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from tempdata.exceptions import DuplicateKeyError, ProviderError

if TYPE_CHECKING:
    from tempdata.providers.protocols import IAsyncTempDataProvider, ITempDataProvider

log = logging.getLogger(__name__)


def _fold(key: str) -> str:
    return key.casefold()


def _reject_awaitable(result: object, async_method: str) -> None:
    """Fail loudly when a coroutine provider is driven through a sync call."""
    if not inspect.isawaitable(result):
        return
    if inspect.iscoroutine(result):
        result.close()
    raise ProviderError(
        f"Provider returned an awaitable from a synchronous call; use {async_method}() instead"
    )


class TempDataDictionary:
    """Case-insensitive mapping that records which entries have been read.

    Every accessor loads from the provider on first use. Only ``save()``
    skips the load: a dictionary that was never touched has nothing to
    persist and leaves the provider alone.
    """

    def __init__(
        self,
        context: Any,
        provider: ITempDataProvider | IAsyncTempDataProvider,
    ) -> None:
        self._context = context
        self._provider = provider
        self._loaded = False
        # folded key -> (key as first inserted, value)
        self._data: dict[str, tuple[str, Any]] = {}
        self._initial_keys: set[str] = set()
        self._retained_keys: set[str] = set()

    # ── Lifecycle ───────────────────────────────────────────────────

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load(self) -> None:
        """Hydrate from the provider once; later calls are no-ops."""
        if self._loaded:
            return
        result = self._provider.load_tempdata(self._context)
        _reject_awaitable(result, "load_async")
        self._hydrate(result)  # type: ignore[arg-type]

    async def load_async(self) -> None:
        """Same as ``load()``, awaiting the provider if it returns an awaitable."""
        if self._loaded:
            return
        result = self._provider.load_tempdata(self._context)
        if inspect.isawaitable(result):
            result = await result
        self._hydrate(result)

    def save(self) -> None:
        """Drop read, unkept entries and hand the survivors to the provider.

        The dictionary is pruned only once the provider call returns.
        """
        if not self._loaded:
            return
        survivors = self._survivors()
        result = self._provider.save_tempdata(self._context, survivors)
        _reject_awaitable(result, "save_async")
        self._prune()

    async def save_async(self) -> None:
        """Same as ``save()``, awaiting the provider if it returns an awaitable."""
        if not self._loaded:
            return
        survivors = self._survivors()
        result = self._provider.save_tempdata(self._context, survivors)
        if inspect.isawaitable(result):
            await result
        self._prune()

    def _hydrate(self, values: Mapping[str, Any] | None) -> None:
        data: dict[str, tuple[str, Any]] = {}
        for key, value in (values or {}).items():
            folded = _fold(key)
            original = data[folded][0] if folded in data else key
            data[folded] = (original, value)
        self._data = data
        self._initial_keys = set(data)
        self._retained_keys.clear()
        self._loaded = True
        log.debug("Loaded %d tempdata entries", len(data))

    def _survivors(self) -> dict[str, Any]:
        keep = self._initial_keys | self._retained_keys
        survivors = {key: value for folded, (key, value) in self._data.items() if folded in keep}
        log.debug(
            "Saving tempdata: kept %d, dropped %d",
            len(survivors),
            len(self._data) - len(survivors),
        )
        return survivors

    def _prune(self) -> None:
        keep = self._initial_keys | self._retained_keys
        self._data = {folded: entry for folded, entry in self._data.items() if folded in keep}

    # ── Reads ───────────────────────────────────────────────────────

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for ``key`` and mark it read, or ``default``."""
        self.load()
        folded = _fold(key)
        entry = self._data.get(folded)
        if entry is None:
            return default
        self._initial_keys.discard(folded)
        return entry[1]

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def peek(self, key: str, default: Any = None) -> Any:
        """Return the value for ``key`` without marking it read."""
        self.load()
        entry = self._data.get(_fold(key))
        return default if entry is None else entry[1]

    def entries(self) -> Iterator[tuple[str, Any]]:
        """Yield ``(key, value)`` pairs, marking each one read as it is produced.

        The dictionary may be modified while a pass is in progress: keys
        present at the start are visited with their current value, removed
        keys are skipped, and keys added mid-pass are not visited. Each call
        starts a fresh pass.
        """
        self.load()
        return self._consume(list(self._data))

    def _consume(self, folded_keys: list[str]) -> Iterator[tuple[str, Any]]:
        for folded in folded_keys:
            entry = self._data.get(folded)
            if entry is None:
                continue
            self._initial_keys.discard(folded)
            yield entry

    items = entries

    def keys(self) -> list[str]:
        self.load()
        return [key for key, _ in self._data.values()]

    def values(self) -> list[Any]:
        self.load()
        return [value for _, value in self._data.values()]

    def contains_key(self, key: str) -> bool:
        self.load()
        return _fold(key) in self._data

    def contains_value(self, value: Any) -> bool:
        self.load()
        return any(stored == value for _, stored in self._data.values())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains_key(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        self.load()
        return len(self._data)

    # ── Writes ──────────────────────────────────────────────────────

    def set(self, key: str, value: Any) -> None:
        """Insert or overwrite ``key``; the new value counts as unread."""
        self.load()
        folded = _fold(key)
        original = self._data[folded][0] if folded in self._data else key
        self._data[folded] = (original, value)
        self._initial_keys.add(folded)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def add(self, key: str, value: Any) -> None:
        """Insert ``key``, raising ``DuplicateKeyError`` if it already exists."""
        self.load()
        folded = _fold(key)
        if folded in self._data:
            raise DuplicateKeyError(key)
        self._data[folded] = (key, value)
        self._initial_keys.add(folded)

    def keep(self, key: str | None = None) -> None:
        """Retain ``key`` through the next save, or every present key if omitted."""
        self.load()
        if key is None:
            self._retained_keys = set(self._data)
        else:
            self._retained_keys.add(_fold(key))

    def remove(self, key: str) -> bool:
        """Delete ``key`` and forget its tracking state. Returns False if absent."""
        self.load()
        folded = _fold(key)
        self._initial_keys.discard(folded)
        self._retained_keys.discard(folded)
        return self._data.pop(folded, None) is not None

    def __delitem__(self, key: str) -> None:
        self.remove(key)

    def clear(self) -> None:
        self.load()
        self._data.clear()
        self._initial_keys.clear()
        self._retained_keys.clear()

    def __repr__(self) -> str:
        # Resident state only: repr must not trigger a provider load.
        unread = sorted(self._data[k][0] for k in self._initial_keys if k in self._data)
        retained = sorted(self._data[k][0] for k in self._retained_keys if k in self._data)
        values = {key: value for key, value in self._data.values()}
        return (
            f"{type(self).__name__}({values!r}, loaded={self._loaded}, "
            f"unread={unread!r}, retained={retained!r})"
        )
