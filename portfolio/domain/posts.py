from __future__ import annotations

import re
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

__all__ = [
    "POST_SUFFIXES",
    "PostKind",
    "TeamMember",
    "PostMetadata",
    "Post",
    "PostError",
    "MalformedPostError",
    "PostNotFoundError",
    "parse_post",
    "list_posts",
    "get_post",
    "format_date",
]

POST_SUFFIXES = (".md", ".mdx")

_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?(.*)\Z", re.S | re.M)


class PostKind(str, Enum):
    blog = "blog"
    work = "work"


# ------------------------
# Errors
# ------------------------
class PostError(ValueError):
    """Base class for post loading errors.

    The `code` attribute is the machine code surfaced by the API.
    """

    code: str = "post_error"


class MalformedPostError(PostError):
    code = "malformed_post"


class PostNotFoundError(PostError):
    code = "post_not_found"


# ------------------------
# Schema
# ------------------------
class TeamMember(BaseModel):
    name: str
    role: str = ""
    avatar: str = ""
    linkedin: str = ""


class PostMetadata(BaseModel):
    """Front matter of a post file. Keys use the camelCase of the files."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    published_at: date = Field(..., alias="publishedAt")
    summary: str = ""
    image: Optional[str] = None
    images: list[str] = Field(default_factory=list)
    tag: Optional[str] = None
    team: list[TeamMember] = Field(default_factory=list)
    link: Optional[str] = None


class Post(BaseModel):
    slug: str
    kind: PostKind
    metadata: PostMetadata
    content: str


# ------------------------
# Loading
# ------------------------

def parse_post(text: str, *, slug: str, kind: PostKind) -> Post:
    """Split a post file into front matter and body and validate the metadata.

    Raises:
        MalformedPostError: no front matter block, invalid YAML, or bad fields.
    """
    m = _FRONT_MATTER_RE.match(text)
    if m is None:
        raise MalformedPostError(f"{slug}: missing front matter")

    try:
        data = yaml.safe_load(m.group(1))
    except yaml.YAMLError as e:
        raise MalformedPostError(f"{slug}: front matter is not valid YAML") from e
    if not isinstance(data, dict):
        raise MalformedPostError(f"{slug}: front matter must be a mapping")

    try:
        metadata = PostMetadata.model_validate(data)
    except ValidationError as e:
        raise MalformedPostError(f"{slug}: front matter invalid: {e}") from e

    return Post(slug=slug, kind=kind, metadata=metadata, content=m.group(2).strip())


def _post_files(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    return [p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in POST_SUFFIXES]


def _load(path: Path, kind: PostKind) -> Post:
    return parse_post(path.read_text(encoding="utf-8"), slug=path.stem, kind=kind)


def list_posts(content_dir: Path, kind: PostKind) -> list[Post]:
    """Return every post of `kind`, newest first (ties broken by slug)."""
    posts = [_load(p, kind) for p in _post_files(content_dir / kind.value)]
    posts.sort(key=lambda p: p.slug)
    posts.sort(key=lambda p: p.metadata.published_at, reverse=True)
    return posts


def get_post(content_dir: Path, kind: PostKind, slug: str) -> Post:
    """Load a single post by slug.

    Raises:
        PostNotFoundError: unknown slug, or a slug that could escape the directory.
    """
    if not slug or slug.startswith(".") or "/" in slug or "\\" in slug:
        raise PostNotFoundError(f"no {kind.value} post named {slug!r}")

    for path in _post_files(content_dir / kind.value):
        if path.stem == slug:
            return _load(path, kind)
    raise PostNotFoundError(f"no {kind.value} post named {slug!r}")


def _relative(published: date, today: date) -> str:
    days = (today - published).days
    if days <= 0:
        return "Today"
    if days < 30:
        return f"{days}d ago"
    if days < 365:
        return f"{days // 30}mo ago"
    return f"{days // 365}y ago"


def format_date(published: date, today: Optional[date] = None, include_relative: bool = False) -> str:
    """Format a publish date as "March 3, 2025", optionally with "(2mo ago)"."""
    full = f"{published.strftime('%B')} {published.day}, {published.year}"
    if not include_relative:
        return full
    return f"{full} ({_relative(published, today or date.today())})"
