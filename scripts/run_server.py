#!/usr/bin/env python3
"""
Start the checkout relay on the configured PORT.

  python scripts/run_server.py
  python scripts/run_server.py --host 0.0.0.0 --reload
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from paypal_relay.utils.config_loader import load_relay_config  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the PayPal checkout relay")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=None, help="Overrides PORT from the environment")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    args = parser.parse_args()

    load_dotenv()
    cfg = load_relay_config()
    port = args.port or cfg.port

    logger.info("Server listening at http://%s:%s/", args.host, port)
    uvicorn.run("paypal_relay.api.main:app", host=args.host, port=port, reload=args.reload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
