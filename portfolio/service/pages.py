from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any

from ..domain import content
from ..domain.posts import Post, PostKind, format_date, get_post, list_posts
from ..logging_conf import get_logger

logger = get_logger("service.pages")

# About subsections that carry a `display` flag.
_ABOUT_SECTIONS = (
    "calendar",
    "intro",
    "work",
    "other_relevant_experience",
    "studies",
    "technical",
)


def _summary(post: Post, today: date | None = None) -> dict:
    meta = post.metadata
    return {
        "slug": post.slug,
        "title": meta.title,
        "summary": meta.summary,
        "published_at": meta.published_at,
        "published_label": format_date(meta.published_at, today),
        "image": meta.image,
        "images": meta.images,
        "tag": meta.tag,
        "link": meta.link,
    }


def _detail(post: Post, today: date | None = None) -> dict:
    out = _summary(post, today)
    out["published_label"] = format_date(post.metadata.published_at, today, include_relative=True)
    out["team"] = [m.model_dump() for m in post.metadata.team]
    out["content"] = post.content
    return out


# ------------------------
# Use-cases
# ------------------------

def home_page(*, content_dir: Path) -> dict:
    """Home section plus the most recent project, if any."""
    projects = list_posts(content_dir, PostKind.work)
    return {
        "home": content.home.model_dump(),
        "person": content.person.model_dump(),
        "newsletter": content.newsletter.model_dump() if content.newsletter.display else None,
        "latest_project": _summary(projects[0]) if projects else None,
    }


def about_page() -> dict:
    """About section with hidden subsections left out."""
    about: dict[str, Any] = content.about.model_dump()
    for key in _ABOUT_SECTIONS:
        if not about[key]["display"]:
            del about[key]
    return {
        "about": about,
        "person": content.person.model_dump(),
        "social": [s.model_dump() for s in content.social],
    }


def work_page(*, content_dir: Path) -> dict:
    projects = list_posts(content_dir, PostKind.work)
    logger.debug("work.list", extra={"event": "work_list", "count": len(projects)})
    return {"work": content.work.model_dump(), "projects": [_summary(p) for p in projects]}


def project_page(*, content_dir: Path, slug: str, today: date | None = None) -> dict:
    return _detail(get_post(content_dir, PostKind.work, slug), today)


def blog_page(*, content_dir: Path) -> dict:
    posts = list_posts(content_dir, PostKind.blog)
    logger.debug("blog.list", extra={"event": "blog_list", "count": len(posts)})
    return {"blog": content.blog.model_dump(), "posts": [_summary(p) for p in posts]}


def post_page(*, content_dir: Path, slug: str, today: date | None = None) -> dict:
    return _detail(get_post(content_dir, PostKind.blog, slug), today)


def gallery_page() -> dict:
    return {"gallery": content.gallery.model_dump(mode="json")}
