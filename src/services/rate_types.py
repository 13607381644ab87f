from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExchangeRate(BaseModel):
    """Spot rate for one base/quote pair as reported by CoinAPI.

    Field names follow the app; the aliases match the upstream JSON keys.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True, allow_inf_nan=False)

    observed_at: str = Field(alias="time")
    base_asset: str = Field(alias="asset_id_base")
    quote_asset: str = Field(alias="asset_id_quote")
    rate: float


__all__ = ["ExchangeRate"]
