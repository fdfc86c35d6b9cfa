from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from learning_api.api.router import api_router
from learning_api.core.config import Settings, settings
from learning_api.core.errors import LearningAPIError
from learning_api.core.rate_limit import BodySizeLimitMiddleware, RateLimitMiddleware
from learning_api.schemas.learning import HealthResponse
from learning_api.services.ai_service import AIService
from learning_api.services.providers.base import CompletionProvider
from learning_api.services.providers.factory import build_provider

logger = logging.getLogger(__name__)


def _static_file(static_root: Path, path: str) -> Path | None:
    """Built UI asset for ``path``, or ``index.html`` for client-side routes."""
    root = static_root.resolve()
    candidate = (root / path.lstrip("/")).resolve()
    if candidate.is_relative_to(root) and candidate.is_file():
        return candidate
    index = root / "index.html"
    return index if index.is_file() else None


def _register_exception_handlers(app: FastAPI, app_settings: Settings) -> None:
    static_root = Path(app_settings.static_dir) if app_settings.is_production and app_settings.static_dir else None

    @app.exception_handler(LearningAPIError)
    async def learning_error_handler(request: Request, exc: LearningAPIError):
        if exc.status_code < 500:
            logger.info("Rejected %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Invalid body for %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and known paths with the wrong method are both "not found" to clients.
        if exc.status_code in (404, 405):
            if (
                static_root is not None
                and request.method == "GET"
                and not request.url.path.startswith(app_settings.api_prefix)
            ):
                asset = _static_file(static_root, request.url.path)
                if asset is not None:
                    return FileResponse(asset)
            return JSONResponse(status_code=404, content={"error": "Endpoint not found"})
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error in %s", request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(provider: CompletionProvider | None = None, app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    provider = provider or build_provider(app_settings)
    ai_service = AIService(provider)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info("AI Learning System API using %s (%s)", provider.name, ai_service.model_name)
        yield
        await provider.aclose()

    app = FastAPI(
        title="AI Learning System API",
        version="1.0.0",
        description="Question answering, summaries, quizzes and learning roadmaps backed by a hosted LLM.",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.ai_service = ai_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_origin_regex=app_settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RateLimitMiddleware, limit=app_settings.rate_limit_per_minute, path_prefix=app_settings.api_prefix)
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=app_settings.max_body_bytes)

    _register_exception_handlers(app, app_settings)

    @app.get("/health", response_model=HealthResponse)
    def health():
        return {"status": "OK", "message": "AI Learning System API is running"}

    app.include_router(api_router, prefix=app_settings.api_prefix)
    return app


app = create_app()
