from __future__ import annotations

import asyncio
import time
from collections.abc import Iterable, Mapping

import httpx

from portfolio.logging_conf import get_logger
from smoke.types import Probe, ProbeError, SmokeError
from smoke.utils import expect_rewrite, is_not_found_page

logger = get_logger("smoke.client")


async def wait_for_health(base_url: str, timeout_s: float = 20.0) -> None:
    """Ping /health until it returns ok or raise after a timeout."""
    deadline = time.monotonic() + timeout_s
    async with httpx.AsyncClient(base_url=base_url, timeout=5.0) as client:
        while time.monotonic() < deadline:
            try:
                r = await client.get("/health")
                if r.status_code == 200 and r.json().get("ok") is True:
                    logger.info("health.ok", extra={"event": "health_ok"})
                    return
            except httpx.HTTPError:
                pass
            await asyncio.sleep(0.25)
    raise SmokeError("Health check did not pass within timeout")


async def probe_one(
    client: httpx.AsyncClient,
    path: str,
    registry: Mapping[str, bool],
    *,
    retries: int = 2,
) -> Probe:
    """GET one path and record whether the site served the not-found page.

    Redirects are not followed: a gate rewrite must answer at the original URL.
    """
    last_err: Exception | None = None
    for attempt in range(retries):
        try:
            r = await client.get(path, follow_redirects=False)
            return Probe(
                path=path,
                status_code=r.status_code,
                rewritten=is_not_found_page(r.status_code, r.content),
                expected_rewrite=expect_rewrite(path, registry),
            )
        except httpx.HTTPError as e:  # pragma: no cover - network flakiness
            last_err = e
            logger.warning(
                "probe.retry",
                extra={
                    "event": "probe_retry",
                    "path": path,
                    "attempt": attempt + 1,
                    "error": str(e),
                },
            )
    raise ProbeError(f"probe failed for {path}: {last_err}")


async def probe_all(
    base_url: str, paths: Iterable[str], registry: Mapping[str, bool]
) -> list[Probe]:
    """Probe paths concurrently; paths that cannot be fetched are skipped."""
    paths = list(paths)
    async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
        results = await asyncio.gather(
            *(probe_one(client, p, registry) for p in paths), return_exceptions=True
        )
    probes: list[Probe] = []
    for res in results:
        if isinstance(res, Exception):
            continue
        probes.append(res)
    logger.info(
        "probe.summary",
        extra={
            "event": "probe_summary",
            "requested": len(paths),
            "succeeded": len(probes),
            "failed": len(paths) - len(probes),
        },
    )
    return probes
