from __future__ import annotations

import pytest

from vehicle_service.core.config import Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.PORT == 3000
    assert settings.VENDOR_BASE_URL == "https://platform-challenge.smartcar.com/v1"
    assert settings.BACKEND_CORS_ORIGINS == ["*"]


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("VENDOR_BASE_URL", "http://localhost:9000/v1/")
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", "http://a.test, http://b.test")

    settings = Settings(_env_file=None)

    assert settings.PORT == 8080
    assert settings.VENDOR_BASE_URL == "http://localhost:9000/v1"
    assert settings.BACKEND_CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_cors_origins_accept_json_list(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", '["http://a.test"]')

    assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == ["http://a.test"]
