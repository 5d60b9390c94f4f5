"""Environment-driven configuration.

Values are read once when the app is created. Invalid values raise
ValueError so a misconfigured deployment fails at startup instead of
serving with a half-applied route table.
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from .domain.content import DEFAULT_ROUTES

__all__ = [
    "DEFAULT_CONTENT_DIR",
    "parse_route_keys",
    "build_registry",
    "get_registry_from_env",
    "get_content_dir_from_env",
]

DEFAULT_CONTENT_DIR = Path(__file__).resolve().parent / "content"


def parse_route_keys(raw: str | None, *, var: str = "routes") -> tuple[str, ...]:
    """Split a comma-separated list of route keys, validating each one."""
    if not raw:
        return ()
    keys = tuple(tok.strip() for tok in raw.split(",") if tok.strip())
    for key in keys:
        if not key.startswith("/"):
            raise ValueError(f"{var}: route key must start with '/': {key!r}")
    return keys


def build_registry(
    defaults: Mapping[str, bool],
    *,
    disabled: tuple[str, ...] = (),
    enabled: tuple[str, ...] = (),
) -> Mapping[str, bool]:
    """Return a read-only route registry with overrides applied.

    Keys absent from `defaults` are added, so a new prefix can be gated
    without touching the content module.
    """
    both = set(disabled) & set(enabled)
    if both:
        raise ValueError(f"route keys both enabled and disabled: {sorted(both)}")

    routes = dict(defaults)
    routes.update({key: False for key in disabled})
    routes.update({key: True for key in enabled})
    return MappingProxyType(routes)


def get_registry_from_env() -> Mapping[str, bool]:
    """Build the registry from DEFAULT_ROUTES plus PORTFOLIO_*_ROUTES overrides."""
    disabled = parse_route_keys(
        os.getenv("PORTFOLIO_DISABLED_ROUTES"), var="PORTFOLIO_DISABLED_ROUTES"
    )
    enabled = parse_route_keys(
        os.getenv("PORTFOLIO_ENABLED_ROUTES"), var="PORTFOLIO_ENABLED_ROUTES"
    )
    return build_registry(DEFAULT_ROUTES, disabled=disabled, enabled=enabled)


def get_content_dir_from_env() -> Path:
    """Return PORTFOLIO_CONTENT_DIR, defaulting to the packaged content."""
    raw = os.getenv("PORTFOLIO_CONTENT_DIR")
    if not raw:
        return DEFAULT_CONTENT_DIR
    path = Path(raw).expanduser()
    if path.exists() and not path.is_dir():
        raise ValueError("PORTFOLIO_CONTENT_DIR must be a directory")
    return path
