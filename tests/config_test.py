from __future__ import annotations

import pytest

from config import config


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("COINAPI_BASE_URL", raising=False)
    monkeypatch.delenv("COINAPI_TIMEOUT", raising=False)

    settings = config()

    assert settings.coinapi_base_url == "https://rest.coinapi.io/v1/exchangerate"
    assert settings.coinapi_timeout == 10.0


def test_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COINAPI_BASE_URL", "http://localhost:9999/v1/exchangerate")
    monkeypatch.setenv("COINAPI_TIMEOUT", "2.5")

    settings = config()

    assert settings.coinapi_base_url == "http://localhost:9999/v1/exchangerate"
    assert settings.coinapi_timeout == 2.5
    assert not hasattr(settings, "coinapi_api_key")
