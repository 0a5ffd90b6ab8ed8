from __future__ import annotations

import logging

import pytest

from config.settings import Settings, get_settings


def test_settings_read_credentials_from_environment() -> None:
    settings = get_settings()

    assert settings.credentials == ("svc-user", "s3cret-pass")
    assert settings.hotel_api_cache_ttl == 3600
    assert settings.hotel_api_forward_stay_params is False
    assert str(settings.hotel_api_endpoint).endswith("/api/hotel/search")


def test_settings_repr_hides_credentials() -> None:
    settings = get_settings()

    assert "s3cret-pass" not in repr(settings)
    assert "s3cret-pass" not in settings.model_dump_json()


def test_missing_credentials_warn_and_fall_back_to_empty(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.delenv("API_PASSWORD")
    caplog.set_level(logging.WARNING, logger="config.settings")

    settings = Settings(_env_file=None)

    assert settings.credentials == ("svc-user", "")
    assert "API_PASSWORD" in caplog.text


def test_settings_reject_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOTEL_API_TIMEOUT", "0")

    with pytest.raises(ValueError):
        Settings(_env_file=None)
