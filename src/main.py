from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence, TextIO

from config import config
from services.coinapi_client import CoinApiError, fetch_exchange_rate
from utils.formatting import Colors, colorize, format_error, format_exchange_rate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coin-rate",
        description="Look up the current price of a cryptocurrency in a fiat currency via CoinAPI.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log request details to stderr.")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch = subparsers.add_parser("fetch", help="Fetch the current exchange rate for a pair.")
    fetch.add_argument("-c", "--crypto", required=True, help="Base asset symbol, e.g. BTC.")
    fetch.add_argument("-f", "--fiat", required=True, help="Quote asset symbol, e.g. USD.")
    fetch.add_argument("-k", "--key", required=True, help="CoinAPI key, sent as the X-CoinAPI-Key header.")
    return parser


def use_color(stream: TextIO, *, disabled: bool) -> bool:
    if disabled or os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def run_fetch(crypto: str, fiat: str, key: str, *, no_color: bool = False) -> int:
    settings = config()
    try:
        rate = fetch_exchange_rate(
            crypto,
            fiat,
            key,
            base_url=settings.coinapi_base_url,
            timeout=settings.coinapi_timeout,
        )
    except CoinApiError as exc:
        logger.debug("Fetch failed for %s/%s", crypto, fiat, exc_info=exc)
        message = format_error(exc)
        print(colorize(message, Colors.RED, enabled=use_color(sys.stderr, disabled=no_color)), file=sys.stderr)
        return 1

    message = format_exchange_rate(rate)
    print(colorize(message, Colors.CYAN, enabled=use_color(sys.stdout, disabled=no_color)))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # "fetch" is the only subcommand; argparse rejects anything else.
    return run_fetch(args.crypto, args.fiat, args.key, no_color=args.no_color)


if __name__ == "__main__":
    sys.exit(main())
