from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from portfolio.config import build_registry
from portfolio.domain.content import DEFAULT_ROUTES
from portfolio.main import create_app

BLOG_POST = """---
title: "Ports and adapters"
publishedAt: "2025-02-10"
summary: "Notes on hexagonal architecture."
tag: "Architecture"
---

## Intro

```python
print("hello")
```
"""

OLDER_POST = """---
title: "First post"
publishedAt: 2024-01-05
---
Hello.
"""

PROJECT = """---
title: "Credential audit"
publishedAt: "2025-01-15"
summary: "Auditable credential changes."
images:
  - "/images/projects/credentials/cover-01.jpg"
team:
  - name: "Alvaro"
    role: "Software Engineer"
---

Project body.
"""


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    (tmp_path / "blog").mkdir()
    (tmp_path / "work").mkdir()
    (tmp_path / "blog" / "ports-and-adapters.mdx").write_text(BLOG_POST, encoding="utf-8")
    (tmp_path / "blog" / "first-post.md").write_text(OLDER_POST, encoding="utf-8")
    (tmp_path / "work" / "credential-audit.mdx").write_text(PROJECT, encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_client(content_dir: Path):
    """Build a TestClient for an app with the given disabled route keys."""

    def _make(*disabled: str) -> TestClient:
        registry = build_registry(DEFAULT_ROUTES, disabled=disabled)
        return TestClient(create_app(registry=registry, content_dir=content_dir))

    return _make
