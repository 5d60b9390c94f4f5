from __future__ import annotations

import argparse
import os


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the smoke runner."""
    parser = argparse.ArgumentParser(description="Portfolio route gate smoke runner")
    parser.add_argument("--base-url", default=os.getenv("BASE_URL", "http://127.0.0.1:8000"))
    parser.add_argument(
        "--disabled",
        default=os.getenv("PORTFOLIO_DISABLED_ROUTES", ""),
        help="Comma-separated route keys the site was started with disabled",
    )
    parser.add_argument(
        "--enabled",
        default=os.getenv("PORTFOLIO_ENABLED_ROUTES", ""),
        help="Comma-separated route keys the site was started with enabled",
    )
    parser.add_argument("--timeout", type=float, default=20.0)
    return parser.parse_args(argv)
