from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from portfolio.main import create_app


def test_health(make_client):
    r = make_client().get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


@pytest.mark.parametrize("path", ["/", "/about", "/work", "/blog", "/gallery"])
def test_enabled_pages_render(make_client, path):
    r = make_client().get(path)
    assert r.status_code == 200


def test_disabled_gallery_serves_not_found_in_place(make_client):
    client = make_client("/gallery")
    r = client.get("/gallery", follow_redirects=False)
    assert r.status_code == 404
    assert r.json()["error_code"] == "not_found"
    assert r.url.path == "/gallery"
    assert not r.history


def test_disabled_prefix_gates_nested_paths(make_client):
    client = make_client("/blog")
    assert client.get("/blog").json()["error_code"] == "not_found"
    assert client.get("/blog/ports-and-adapters").json()["error_code"] == "not_found"
    assert client.get("/blog/", follow_redirects=False).json()["error_code"] == "not_found"
    assert client.get("/work").status_code == 200


def test_disabled_root_is_never_gated(make_client):
    client = make_client("/")
    assert client.get("/").status_code == 200


def test_ungated_patterns_skip_gate(make_client):
    # /gallery/extra is outside the gated patterns, so it falls through to routing.
    client = make_client("/gallery")
    r = client.get("/gallery/extra")
    assert r.status_code == 404
    assert r.json() == {"detail": "Not Found"}


def test_rewrite_is_logged(make_client, caplog):
    client = make_client("/about")
    with caplog.at_level(logging.INFO, logger="gate"):
        client.get("/about", headers={"X-Request-ID": "rid-1"})
    records = [r for r in caplog.records if r.getMessage() == "route.rewrite"]
    assert len(records) == 1
    rec = records[0]
    assert rec.path == "/about"
    assert rec.base_segment == "/about"
    assert rec.target == "http://testserver/not-found"
    assert rec.request_id == "rid-1"


def test_request_id_propagated_and_minted(make_client):
    client = make_client()
    assert client.get("/health", headers={"X-Request-ID": "abc"}).headers["X-Request-ID"] == "abc"
    assert client.get("/health").headers["X-Request-ID"]


def test_home_page(make_client):
    data = make_client().get("/").json()
    assert data["person"]["name"] == "Álvaro Mañoso Oca"
    assert data["newsletter"] is None
    assert data["latest_project"]["slug"] == "credential-audit"


def test_about_hides_undisplayed_sections(make_client):
    data = make_client().get("/about").json()
    about = data["about"]
    assert "technical" not in about
    assert "calendar" not in about
    assert about["work"]["experiences"][0]["company"] == "Tymit"
    assert {s["name"] for s in data["social"]} == {"GitHub", "LinkedIn"}


def test_work_list_and_detail(make_client):
    client = make_client()
    listing = client.get("/work").json()
    assert listing["work"]["title"] == "My projects"
    assert [p["slug"] for p in listing["projects"]] == ["credential-audit"]

    detail = client.get("/work/credential-audit").json()
    assert detail["content"] == "Project body."
    assert detail["team"][0]["name"] == "Alvaro"
    assert detail["published_label"].startswith("January 15, 2025 (")


def test_blog_list_and_detail(make_client):
    client = make_client()
    listing = client.get("/blog").json()
    assert [p["slug"] for p in listing["posts"]] == ["ports-and-adapters", "first-post"]
    assert listing["posts"][0]["published_label"] == "February 10, 2025"

    detail = client.get("/blog/ports-and-adapters").json()
    assert "```python" in detail["content"]
    assert detail["tag"] == "Architecture"


def test_unknown_post_returns_404(make_client):
    r = make_client().get("/blog/nope")
    assert r.status_code == 404
    assert r.json()["detail"]["error_code"] == "post_not_found"


def test_malformed_post_returns_500(make_client, content_dir):
    (content_dir / "blog" / "broken.md").write_text("no front matter", encoding="utf-8")
    r = make_client().get("/blog")
    assert r.status_code == 500
    assert r.json()["detail"]["error_code"] == "malformed_post"


def test_gallery_lists_images(make_client):
    images = make_client().get("/gallery").json()["gallery"]["images"]
    assert len(images) == 14
    assert images[0] == {
        "src": "/images/gallery/img-01.jpg",
        "alt": "image",
        "orientation": "vertical",
    }


def test_not_found_page_directly(make_client):
    r = make_client().get("/not-found")
    assert r.status_code == 404
    assert r.json()["error_code"] == "not_found"


def test_create_app_reads_env(monkeypatch, content_dir):
    monkeypatch.setenv("PORTFOLIO_DISABLED_ROUTES", "/work")
    monkeypatch.setenv("PORTFOLIO_CONTENT_DIR", str(content_dir))
    app = create_app()
    assert app.state.registry["/work"] is False
    with TestClient(app) as client:
        assert client.get("/work/credential-audit").status_code == 404
        assert client.get("/blog").status_code == 200
