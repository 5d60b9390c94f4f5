from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel

from ..domain.content import Blog, Gallery, Home, Newsletter, Person, SocialLink, Work
from ..domain.posts import TeamMember


class PostSummary(BaseModel):
    """Listing entry for a blog post or project."""
    slug: str
    title: str
    summary: str = ""
    published_at: date
    published_label: str
    image: Optional[str] = None
    images: list[str] = []
    tag: Optional[str] = None
    link: Optional[str] = None


class PostDetail(PostSummary):
    """A single post with its raw markup body."""
    team: list[TeamMember] = []
    content: str


class HomePage(BaseModel):
    home: Home
    person: Person
    newsletter: Optional[Newsletter] = None
    latest_project: Optional[PostSummary] = None


class AboutPage(BaseModel):
    about: dict[str, Any]
    person: Person
    social: list[SocialLink]


class WorkPage(BaseModel):
    work: Work
    projects: list[PostSummary]


class BlogPage(BaseModel):
    blog: Blog
    posts: list[PostSummary]


class GalleryPage(BaseModel):
    gallery: Gallery


class ErrorBody(BaseModel):
    """Shape of every error `detail` returned by the site."""
    error_code: str
    error_message: str
