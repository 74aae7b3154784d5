"""Shared fixtures for tempdata tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from tempdata import TempDataDictionary
from tests.fakes.fake_provider import FakeTempDataProvider

CONTEXT = "session-1"


@pytest.fixture
def provider() -> FakeTempDataProvider:
    """Provider with nothing stored yet."""
    return FakeTempDataProvider()


@pytest.fixture
def tempdata(provider: FakeTempDataProvider) -> TempDataDictionary:
    """Unloaded dictionary bound to ``provider``."""
    return TempDataDictionary(CONTEXT, provider)


@pytest.fixture
def next_cycle(provider: FakeTempDataProvider) -> Callable[[], TempDataDictionary]:
    """Factory for the following request's dictionary against the same provider."""
    return lambda: TempDataDictionary(CONTEXT, provider)
