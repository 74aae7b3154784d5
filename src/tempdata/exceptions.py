"""Exception hierarchy for tempdata."""

from __future__ import annotations


class TempDataError(Exception):
    """Base exception for all tempdata errors."""


class DuplicateKeyError(TempDataError):
    """Raised by a strict insert when the key is already present."""

    def __init__(self, key: str) -> None:
        super().__init__(f"An entry with key {key!r} already exists")
        self.key = key


class ProviderError(TempDataError):
    """Raised when a bundled provider cannot use the given context."""
