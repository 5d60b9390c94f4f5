from __future__ import annotations

import asyncio

import httpx
import pytest

from portfolio.config import build_registry
from portfolio.domain.content import DEFAULT_ROUTES
from portfolio.main import create_app
from smoke.cli import parse_args
from smoke.client import probe_one
from smoke.types import Probe
from smoke.utils import expect_rewrite, is_not_found_page, probe_paths, summarize


def test_probe_paths_cover_keys_and_nested():
    paths = probe_paths({"/": True, "/gallery": False})
    assert paths == ["/", "/gallery", "/gallery/smoke-probe"]


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/gallery", True),
        ("/gallery/smoke-probe", False),  # outside the gated patterns
        ("/blog/smoke-probe", False),
        ("/", False),
    ],
)
def test_expect_rewrite(path, expected):
    registry = build_registry(DEFAULT_ROUTES, disabled=("/gallery", "/"))
    assert expect_rewrite(path, registry) is expected


def test_is_not_found_page():
    assert is_not_found_page(404, b'{"error_code": "not_found"}')
    assert not is_not_found_page(404, b'{"detail": "Not Found"}')
    assert not is_not_found_page(404, b"<html>")
    assert not is_not_found_page(200, b'{"error_code": "not_found"}')


def test_summarize_flags_mismatches():
    probes = [
        Probe(path="/about", status_code=200, rewritten=False, expected_rewrite=False),
        Probe(path="/gallery", status_code=200, rewritten=False, expected_rewrite=True),
    ]
    summary, code = summarize(probes, requested=2)
    assert code == 1
    assert summary["mismatches"][0]["path"] == "/gallery"


def test_summarize_requires_every_probe():
    probes = [Probe(path="/about", status_code=200, rewritten=False, expected_rewrite=False)]
    assert summarize(probes, requested=2)[1] == 1
    assert summarize(probes, requested=1)[1] == 0


def test_parse_args_defaults(monkeypatch):
    monkeypatch.delenv("BASE_URL", raising=False)
    monkeypatch.setenv("PORTFOLIO_DISABLED_ROUTES", "/gallery")
    args = parse_args([])
    assert args.base_url == "http://127.0.0.1:8000"
    assert args.disabled == "/gallery"


def test_probes_against_app(content_dir):
    registry = build_registry(DEFAULT_ROUTES, disabled=("/gallery", "/blog"))
    app = create_app(registry=registry, content_dir=content_dir)

    async def _run() -> list[Probe]:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            return [await probe_one(client, p, registry) for p in probe_paths(registry)]

    probes = asyncio.run(_run())
    assert all(p.ok for p in probes), [p for p in probes if not p.ok]
    rewritten = {p.path for p in probes if p.rewritten}
    assert rewritten == {"/gallery", "/blog", "/blog/smoke-probe"}
