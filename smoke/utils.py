from __future__ import annotations

import json
from collections.abc import Mapping

from portfolio.domain.gate import evaluate
from portfolio.domain.matcher import should_gate
from smoke.types import Probe

NESTED_PROBE = "smoke-probe"


def expect_rewrite(path: str, registry: Mapping[str, bool]) -> bool:
    """Return True if the site should answer `path` with the not-found page."""
    return should_gate(path) and evaluate(path, registry).is_rewrite


def probe_paths(registry: Mapping[str, bool]) -> list[str]:
    """Each registry key plus one nested path below it."""
    paths: list[str] = []
    for key in sorted(registry):
        paths.append(key)
        if key != "/":
            paths.append(f"{key.rstrip('/')}/{NESTED_PROBE}")
    return paths


def is_not_found_page(status_code: int, body: bytes) -> bool:
    """Tell the gate's not-found page apart from ordinary 404s."""
    if status_code != 404:
        return False
    try:
        data = json.loads(body)
    except ValueError:
        return False
    return isinstance(data, dict) and data.get("error_code") == "not_found"


def summarize(probes: list[Probe], requested: int) -> tuple[dict, int]:
    """Compute summary dict and an exit code from the probe results."""
    mismatches = [
        {
            "path": p.path,
            "status_code": p.status_code,
            "rewritten": p.rewritten,
            "expected_rewrite": p.expected_rewrite,
        }
        for p in probes
        if not p.ok
    ]
    summary = {
        "component": "smoke",
        "event": "summary",
        "requested": requested,
        "probed": len(probes),
        "rewritten": sum(1 for p in probes if p.rewritten),
        "mismatches": mismatches,
    }
    exit_code = 0 if (len(probes) == requested and not mismatches) else 1
    return summary, exit_code
