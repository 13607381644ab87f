from __future__ import annotations

from decimal import Decimal

from services.coinapi_client import CoinApiError, CoinApiStatusError
from services.rate_types import ExchangeRate


# ANSI color codes
class Colors:
    CYAN = "\033[96m"
    RED = "\033[91m"
    BOLD = "\033[1m"
    ENDC = "\033[0m"


def colorize(text: str, color: str, *, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"{color}{text}{Colors.ENDC}"


def format_decimal(value: Decimal) -> str:
    quantized = value.normalize()
    # Avoid scientific notation for integers.
    if quantized == quantized.to_integral():
        return f"{quantized:.0f}"
    return format(quantized, "f")


def format_rate(value: float) -> str:
    # repr gives the shortest string that round-trips to the same double.
    return format_decimal(Decimal(repr(value)))


def format_exchange_rate(rate: ExchangeRate) -> str:
    return (
        f"At the time {rate.observed_at} the price of {rate.base_asset} "
        f"in {rate.quote_asset} was {format_rate(rate.rate)}"
    )


def format_error(exc: CoinApiError) -> str:
    if isinstance(exc, CoinApiStatusError):
        return f"Response from Coin API returned error code: {exc.status_code}"
    return "Error fetching data from Coin API"
