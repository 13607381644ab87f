from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError

from services.rate_types import ExchangeRate

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://rest.coinapi.io/v1/exchangerate"
API_KEY_HEADER = "X-CoinAPI-Key"


# API docs: https://docs.coinapi.io/market-data/rest-api/exchange-rates
class CoinApiError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None, payload: Any | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class CoinApiStatusError(CoinApiError):
    """Upstream answered with a non-2xx status. The body is never parsed."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Response from Coin API returned error code: {status_code}", status_code=status_code)


class CoinApiFetchError(CoinApiError):
    """Request could not be completed or the body was not a valid exchange rate."""

    def __init__(self, message: str = "Error fetching data from Coin API", *, payload: Any | None = None) -> None:
        super().__init__(message, payload=payload)


class CoinApiClient:
    """Minimal CoinAPI client covering the current exchange rate endpoint."""

    def __init__(
        self,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        # Key and symbols go out verbatim; CoinAPI is the one that rejects bad values.
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def get_exchange_rate(self, *, base_asset: str, quote_asset: str) -> ExchangeRate:
        url = f"{self.base_url}/{base_asset}/{quote_asset}"
        logger.debug("Fetching exchange rate url=%s", url)
        text = self._get_text(url)
        try:
            return ExchangeRate.model_validate_json(text)
        except ValidationError as exc:
            logger.debug("CoinAPI payload rejected: %s", exc)
            raise CoinApiFetchError(payload=text) from exc

    def close(self) -> None:
        self._session.close()

    def _get_text(self, url: str) -> str:
        try:
            response = self._session.request(
                "GET",
                url,
                timeout=self.timeout,
                headers={API_KEY_HEADER: self.api_key},
            )
        except requests.RequestException as exc:
            logger.debug("CoinAPI request failed url=%s: %s", url, exc)
            raise CoinApiFetchError() from exc

        status_code = response.status_code
        if not 200 <= status_code < 300:
            logger.info("CoinAPI responded with status=%d url=%s", status_code, url)
            raise CoinApiStatusError(status_code)

        try:
            return response.text
        except requests.RequestException as exc:
            raise CoinApiFetchError() from exc


def fetch_exchange_rate(
    base_asset: str,
    quote_asset: str,
    api_key: str,
    *,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = 10.0,
    session: requests.Session | None = None,
) -> ExchangeRate:
    """One-shot lookup of the ``base_asset`` price expressed in ``quote_asset``.

    Raises ``CoinApiStatusError`` for non-2xx answers and ``CoinApiFetchError``
    for everything else that goes wrong (transport, body read, JSON shape).
    A session passed in by the caller is left open.
    """
    client = CoinApiClient(api_key=api_key, base_url=base_url, timeout=timeout, session=session)
    try:
        return client.get_exchange_rate(base_asset=base_asset, quote_asset=quote_asset)
    finally:
        if session is None:
            client.close()


__all__ = [
    "API_KEY_HEADER",
    "CoinApiClient",
    "CoinApiError",
    "CoinApiFetchError",
    "CoinApiStatusError",
    "DEFAULT_BASE_URL",
    "fetch_exchange_rate",
]
