from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from services.coinapi_client import DEFAULT_BASE_URL


class AppSettings(BaseSettings):
    coinapi_base_url: str = DEFAULT_BASE_URL
    coinapi_timeout: float = 10.0

    model_config = SettingsConfigDict(extra="ignore")


@cache
def config() -> AppSettings:
    return AppSettings()
