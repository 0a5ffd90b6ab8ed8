from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import get_settings
from hotel_search import handler


@pytest.fixture(autouse=True)
def _env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Seed credentials and reset cached settings/clients around each test."""

    monkeypatch.setenv("API_USERNAME", "svc-user")
    monkeypatch.setenv("API_PASSWORD", "s3cret-pass")
    get_settings.cache_clear()
    monkeypatch.setattr(handler, "_client", None)
    yield
    get_settings.cache_clear()
