from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse

from ..domain.gate import NOT_FOUND_PATH
from ..domain.posts import MalformedPostError, PostError, PostNotFoundError
from ..logging_conf import get_logger
from ..service import pages
from .models import AboutPage, BlogPage, GalleryPage, HomePage, PostDetail, WorkPage

router = APIRouter()
logger = get_logger("api")


def _content_dir(request: Request) -> Path:
    return request.app.state.content_dir


def _post_error(exc: PostError) -> HTTPException:
    """Map a post loading error onto an HTTP error with a stable code."""
    if isinstance(exc, PostNotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error_code": exc.code, "error_message": str(exc)},
        )
    if isinstance(exc, MalformedPostError):
        logger.exception("posts.malformed", extra={"event": "posts_malformed"})
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error_code": exc.code, "error_message": str(exc)},
    )


@router.get("/", response_model=HomePage, summary="Home page")
async def home(request: Request) -> HomePage:
    try:
        out = pages.home_page(content_dir=_content_dir(request))
    except PostError as e:
        raise _post_error(e) from e
    return HomePage(**out)


@router.get("/about", response_model=AboutPage, summary="About page")
async def about() -> AboutPage:
    return AboutPage(**pages.about_page())


@router.get("/work", response_model=WorkPage, summary="List projects")
async def work(request: Request) -> WorkPage:
    try:
        out = pages.work_page(content_dir=_content_dir(request))
    except PostError as e:
        raise _post_error(e) from e
    return WorkPage(**out)


@router.get("/work/{slug}", response_model=PostDetail, summary="Project detail")
async def project(slug: str, request: Request) -> PostDetail:
    try:
        out = pages.project_page(content_dir=_content_dir(request), slug=slug)
    except PostError as e:
        raise _post_error(e) from e
    return PostDetail(**out)


@router.get("/blog", response_model=BlogPage, summary="List blog posts")
async def blog(request: Request) -> BlogPage:
    try:
        out = pages.blog_page(content_dir=_content_dir(request))
    except PostError as e:
        raise _post_error(e) from e
    return BlogPage(**out)


@router.get("/blog/{slug}", response_model=PostDetail, summary="Blog post detail")
async def post(slug: str, request: Request) -> PostDetail:
    try:
        out = pages.post_page(content_dir=_content_dir(request), slug=slug)
    except PostError as e:
        raise _post_error(e) from e
    return PostDetail(**out)


@router.get("/gallery", response_model=GalleryPage, summary="Photo gallery")
async def gallery() -> GalleryPage:
    return GalleryPage(**pages.gallery_page())


@router.get(NOT_FOUND_PATH, summary="Not found page", include_in_schema=False)
async def not_found() -> JSONResponse:
    """Target of route gate rewrites."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error_code": "not_found", "error_message": "Page not found"},
    )
