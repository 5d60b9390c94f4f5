"""FastAPI app factory: route gate, request logging, health and page routes."""
from __future__ import annotations

import os
import time
from collections.abc import Callable, Mapping
from pathlib import Path
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from portfolio.api import router as pages_router
from portfolio.config import get_content_dir_from_env, get_registry_from_env
from portfolio.domain.gate import base_segment, evaluate
from portfolio.domain.matcher import should_gate
from portfolio.logging_conf import get_logger, setup_logging

# Configure logging before anything else.
setup_logging()
logger = get_logger("app")
gate_logger = get_logger("gate")


def create_app(
    *,
    registry: Mapping[str, bool] | None = None,
    content_dir: Path | None = None,
) -> FastAPI:
    """Build the site.

    `registry` and `content_dir` default to the environment configuration;
    both are fixed for the lifetime of the returned app.
    """
    routes = registry if registry is not None else get_registry_from_env()
    posts_root = content_dir if content_dir is not None else get_content_dir_from_env()

    app = FastAPI(
        title="Portfolio",
        version=os.getenv("APP_VERSION", "0.1.0"),
    )
    app.state.registry = routes
    app.state.content_dir = posts_root

    @app.on_event("startup")
    async def _on_startup() -> None:
        logger.info(
            "startup",
            extra={
                "event": "startup",
                "disabled_routes": sorted(k for k, v in routes.items() if not v),
                "content_dir": str(posts_root),
            },
        )

    @app.on_event("shutdown")
    async def _on_shutdown() -> None:
        logger.info("shutdown", extra={"event": "shutdown"})

    # Registered before request_logger so it runs inside it and the logs
    # keep the path the client asked for.
    @app.middleware("http")
    async def route_gate(request: Request, call_next: Callable[[Request], Response]):
        """Rewrite requests for disabled routes to the not-found page.

        Only paths matched by the gated patterns are evaluated. A rewrite
        swaps the ASGI path before routing, so the client sees the not-found
        page at its original URL.
        """
        path = request.url.path
        if should_gate(path):
            directive = evaluate(path, routes)
            if directive.is_rewrite:
                origin = f"{request.url.scheme}://{request.url.netloc}"
                gate_logger.info(
                    "route.rewrite",
                    extra={
                        "event": "route_rewrite",
                        "path": path,
                        "base_segment": base_segment(path),
                        "target": directive.url_for(origin),
                        "request_id": getattr(request.state, "request_id", None),
                    },
                )
                request.scope["path"] = directive.target
                request.scope["raw_path"] = directive.target.encode("ascii")
        return await call_next(request)

    @app.middleware("http")
    async def request_logger(request: Request, call_next: Callable[[Request], Response]):
        """JSON request logging with a correlation id.

        Propagates an incoming X-Request-ID or mints one, and echoes it on
        the response.
        """
        request_id = request.headers.get("X-Request-ID", str(uuid4()))
        request.state.request_id = request_id

        start = time.perf_counter()
        logger.info(
            "request.start",
            extra={
                "event": "request_start",
                "method": request.method,
                "path": request.url.path,
                "request_id": request_id,
            },
        )
        try:
            response = await call_next(request)
        except Exception as exc:  # Log and re-raise to let FastAPI handle 500
            logger.exception(
                "request.error",
                extra={
                    "event": "request_error",
                    "path": request.url.path,
                    "method": request.method,
                    "request_id": request_id,
                },
            )
            raise exc
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000.0

        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request.end",
            extra={
                "event": "request_end",
                "status_code": response.status_code,
                "elapsed_ms": round(elapsed_ms, 2),
                "request_id": request_id,
            },
        )
        return response

    @app.get("/health", summary="Liveness/readiness check")
    async def health() -> JSONResponse:
        return JSONResponse(content={"ok": True})

    app.include_router(pages_router)

    return app


# ASGI entrypoint for uvicorn: `uvicorn portfolio.main:app --port 8000`
app = create_app()
