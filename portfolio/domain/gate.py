from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "NOT_FOUND_PATH",
    "Action",
    "Directive",
    "PASS_THROUGH",
    "REWRITE_NOT_FOUND",
    "base_segment",
    "evaluate",
]

NOT_FOUND_PATH = "/not-found"


class Action(str, Enum):
    rewrite = "rewrite"
    pass_through = "pass_through"


@dataclass(frozen=True)
class Directive:
    """Outcome of gating a single request path."""

    action: Action
    target: str | None = None

    @property
    def is_rewrite(self) -> bool:
        return self.action is Action.rewrite

    def url_for(self, origin: str) -> str | None:
        """Return the absolute rewrite URL on `origin` (scheme://host[:port]).

        Pass-through directives have no target and return None.
        """
        if self.target is None:
            return None
        return origin.rstrip("/") + self.target


PASS_THROUGH = Directive(Action.pass_through)
REWRITE_NOT_FOUND = Directive(Action.rewrite, NOT_FOUND_PATH)


def base_segment(path: str) -> str:
    """Return the first path segment including its leading slash.

    "/work/project-1" -> "/work". With no second "/" the whole path is returned.
    """
    idx = path.find("/", 1)
    if idx == -1:
        return path
    return path[:idx]


def _disabled(key: str, registry: Mapping[str, bool]) -> bool:
    # Absent keys are allowed; only an explicit falsy flag disables.
    return key in registry and not registry[key]


def evaluate(path: str, registry: Mapping[str, bool]) -> Directive:
    """Decide whether `path` passes through or is rewritten to the not-found page.

    Checks the full path first, then its base segment. For single-segment
    paths the second check repeats the first one and is a no-op.
    """
    if _disabled(path, registry):
        return REWRITE_NOT_FOUND

    if _disabled(base_segment(path), registry):
        return REWRITE_NOT_FOUND

    return PASS_THROUGH
