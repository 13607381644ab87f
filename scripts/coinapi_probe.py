# flake8: noqa E402
# Run via uv so project deps are loaded, e.g.:
# uv run scripts/coinapi_probe.py --base BTC --quote USD --key <COINAPI_KEY>
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure the src directory is importable when the script is invoked via uv/python directly.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from config import config
from services.coinapi_client import fetch_exchange_rate


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Dump a raw CoinAPI exchange rate as JSON.")
    parser.add_argument("--base", default="BTC", help="Base asset symbol (default: BTC).")
    parser.add_argument("--quote", default="USD", help="Quote asset symbol (default: USD).")
    parser.add_argument("--key", required=True, help="CoinAPI key.")
    return parser.parse_args()


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, handlers=[logging.StreamHandler()])
    args = parse_args()

    settings = config()
    rate = fetch_exchange_rate(
        args.base,
        args.quote,
        args.key,
        base_url=settings.coinapi_base_url,
        timeout=settings.coinapi_timeout,
    )
    # Dump with upstream key names so the output can be diffed against the raw API.
    print(json.dumps(rate.model_dump(by_alias=True), indent=2))


if __name__ == "__main__":
    main()
