#!/usr/bin/env python3
"""Smoke runner for route gating against a live site.

Steps:
- wait for server health
- rebuild the registry the site was started with from the same overrides
- probe every registry key and one nested path under each
- compare rewrites against what the route gate should decide
- emit a compact summary and exit code
"""
from __future__ import annotations

import asyncio
import sys

from portfolio.config import build_registry, parse_route_keys
from portfolio.domain.content import DEFAULT_ROUTES
from portfolio.logging_conf import get_logger, setup_logging
from smoke.cli import parse_args
from smoke.client import probe_all, wait_for_health
from smoke.utils import probe_paths, summarize

setup_logging()
logger = get_logger("smoke")


async def run_smoke(
    *,
    base_url: str,
    disabled: tuple[str, ...] = (),
    enabled: tuple[str, ...] = (),
    timeout_s: float = 20.0,
) -> int:
    await wait_for_health(base_url, timeout_s=timeout_s)
    registry = build_registry(DEFAULT_ROUTES, disabled=disabled, enabled=enabled)
    paths = probe_paths(registry)
    probes = await probe_all(base_url, paths, registry)
    summary, exit_code = summarize(probes, requested=len(paths))
    logger.info("smoke.summary", extra=summary)
    return exit_code


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    code = asyncio.run(
        run_smoke(
            base_url=args.base_url,
            disabled=parse_route_keys(args.disabled, var="--disabled"),
            enabled=parse_route_keys(args.enabled, var="--enabled"),
            timeout_s=args.timeout,
        )
    )
    raise SystemExit(code)


if __name__ == "__main__":
    main()
