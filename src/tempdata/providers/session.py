"""Session-backed tempdata provider.

Stores the surviving map inside the request's session mapping, e.g. a
Starlette ``request.session`` or any dict-like session object. The session
middleware owns persistence; this provider only reads and writes one key.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from tempdata.exceptions import ProviderError

log = logging.getLogger(__name__)

DEFAULT_SESSION_KEY = "__tempdata"


class SessionTempDataProvider:
    """Keeps tempdata under ``session_key`` in the context's session.

    The context may be the session mapping itself or any object exposing it
    as ``.session``.
    """

    def __init__(self, session_key: str = DEFAULT_SESSION_KEY) -> None:
        self._session_key = session_key

    def _session(self, context: Any) -> MutableMapping[str, Any]:
        session = context if isinstance(context, MutableMapping) else getattr(context, "session", None)
        if not isinstance(session, MutableMapping):
            raise ProviderError(
                f"{type(context).__name__} has no session mapping to store tempdata in"
            )
        return session

    def load_tempdata(self, context: Any) -> dict[str, Any] | None:
        stored = self._session(context).get(self._session_key)
        if stored is None:
            return None
        if not isinstance(stored, Mapping):
            raise ProviderError(
                f"Session key {self._session_key!r} holds {type(stored).__name__}, expected a mapping"
            )
        return dict(stored)

    def save_tempdata(self, context: Any, values: Mapping[str, Any]) -> None:
        session = self._session(context)
        if values:
            session[self._session_key] = dict(values)
            log.debug("Stored %d tempdata entries in session", len(values))
        else:
            session.pop(self._session_key, None)
