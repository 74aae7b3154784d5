"""Request-lifecycle helpers that load tempdata on entry and save it on exit.

Usage::

    with tempdata_scope(request, provider) as tempdata:
        tempdata["message"] = "Profile updated."

If the block raises, nothing is saved: data read during a failed request
is still there for the next one.
"""

from __future__ import annotations

from contextlib import asynccontextmanager, contextmanager
from typing import TYPE_CHECKING, Any, AsyncGenerator, Generator

from tempdata.dictionary import TempDataDictionary

if TYPE_CHECKING:
    from tempdata.providers.protocols import IAsyncTempDataProvider, ITempDataProvider


@contextmanager
def tempdata_scope(
    context: Any,
    provider: ITempDataProvider,
) -> Generator[TempDataDictionary, None, None]:
    """Yield a loaded dictionary for ``context`` and save it when the block succeeds."""
    tempdata = TempDataDictionary(context, provider)
    tempdata.load()
    yield tempdata
    tempdata.save()


@asynccontextmanager
async def async_tempdata_scope(
    context: Any,
    provider: IAsyncTempDataProvider,
) -> AsyncGenerator[TempDataDictionary, None]:
    """Async counterpart of ``tempdata_scope`` for coroutine providers."""
    tempdata = TempDataDictionary(context, provider)
    await tempdata.load_async()
    yield tempdata
    await tempdata.save_async()
