from __future__ import annotations

import re

__all__ = [
    "GATED_PATTERNS",
    "compile_pattern",
    "should_gate",
]

# Paths the route gate runs for; everything else skips it entirely.
GATED_PATTERNS: tuple[str, ...] = (
    "/about",
    "/work/:path*",
    "/blog/:path*",
    "/gallery",
)

_PARAM_RE = re.compile(r"^:(\w+)(\*)?$")


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a route pattern into an anchored regex.

    Supported segment forms:
    - literal text ("about")
    - ":name"  exactly one segment
    - ":name*" zero or more segments (only meaningful as the last segment)
    """
    if not pattern.startswith("/"):
        raise ValueError(f"pattern must start with '/': {pattern!r}")

    parts: list[str] = []
    for seg in pattern.strip("/").split("/"):
        if not seg:
            continue
        m = _PARAM_RE.match(seg)
        if m is None:
            parts.append("/" + re.escape(seg))
        elif m.group(2):
            parts.append(r"(?:/[^/]+)*/?")
        else:
            parts.append(r"/[^/]+")

    if not parts:
        return re.compile(r"^/$")
    return re.compile("^" + "".join(parts) + "$")


_COMPILED: tuple[re.Pattern[str], ...] = tuple(compile_pattern(p) for p in GATED_PATTERNS)


def should_gate(path: str) -> bool:
    """Return True if the route gate applies to `path`."""
    return any(rx.match(path) for rx in _COMPILED)
