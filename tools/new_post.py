#!/usr/bin/env python3
"""Create a new blog post or project file with a front matter header.

Usage: python tools/new_post.py blog "My new post" --summary "..."
"""
from __future__ import annotations

import argparse
import re
import sys
from datetime import date
from pathlib import Path

import yaml

from portfolio.config import DEFAULT_CONTENT_DIR
from portfolio.domain.posts import PostKind, parse_post


def slugify(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    if not slug:
        raise ValueError(f"title has no usable characters: {title!r}")
    return slug


def render_post(title: str, *, published: date, summary: str = "", tag: str | None = None) -> str:
    meta: dict = {"title": title, "publishedAt": published.isoformat(), "summary": summary}
    if tag:
        meta["tag"] = tag
    header = yaml.safe_dump(meta, sort_keys=False, allow_unicode=True)
    return f"---\n{header}---\n\n## {title}\n"


def write_post(
    content_dir: Path,
    kind: PostKind,
    title: str,
    *,
    published: date,
    summary: str = "",
    tag: str | None = None,
) -> Path:
    """Write `<content_dir>/<kind>/<slug>.mdx`, refusing to overwrite."""
    slug = slugify(title)
    text = render_post(title, published=published, summary=summary, tag=tag)
    # Validate with the same parser the site uses before touching disk.
    parse_post(text, slug=slug, kind=kind)

    path = content_dir / kind.value / f"{slug}.mdx"
    if path.exists():
        raise FileExistsError(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Scaffold a new post")
    parser.add_argument("kind", choices=[k.value for k in PostKind])
    parser.add_argument("title")
    parser.add_argument("--summary", default="")
    parser.add_argument("--tag", default=None)
    parser.add_argument("--content-dir", default=str(DEFAULT_CONTENT_DIR))
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    try:
        path = write_post(
            Path(args.content_dir),
            PostKind(args.kind),
            args.title,
            published=date.today(),
            summary=args.summary,
            tag=args.tag,
        )
    except FileExistsError as e:
        raise SystemExit(f"Post already exists: {e}")
    print(f"Created {path}")


if __name__ == "__main__":
    main()
