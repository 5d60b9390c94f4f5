from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Probe:
    """Result of requesting one path from the site."""

    path: str
    status_code: int
    rewritten: bool
    expected_rewrite: bool

    @property
    def ok(self) -> bool:
        return self.rewritten == self.expected_rewrite


class SmokeError(RuntimeError):
    """Raised when the smoke flow cannot proceed (e.g., health never ready)."""


class ProbeError(SmokeError):
    """Raised when a path cannot be fetched after retries."""
