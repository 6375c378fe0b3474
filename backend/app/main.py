"""
backend/app/main.py

FastAPI Entrypoint.
Wires the prompt generation backend together.

Responsibilities:
- Build the platform registry, provider clients and prompt service
- Register routers (platforms, generate-prompt, analyze-video)
- Setup middleware (CORS) and logging
- Render errors as {"error": message}
- Health check endpoint, optional static client serving
"""

import os
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings, settings as default_settings
from app.core.logger import logger, setup_logger
from app.routes import analyze, generate, platforms
from app.services.completion_service import CompletionClient, OpenAICompletionClient
from app.services.platform_registry import PlatformRegistry
from app.services.prompt_service import PromptService
from app.services.upload_validator import UploadValidator
from app.services.video_analysis_service import GeminiVideoAnalysisClient, MediaAnalysisClient


def create_app(
    settings: Optional[Settings] = None,
    completion_client: Optional[CompletionClient] = None,
    media_client: Optional[MediaAnalysisClient] = None,
    registry: Optional[PlatformRegistry] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Provider clients default to the OpenAI / Gemini SDK wrappers; tests
    pass their own.
    """
    settings = settings or default_settings
    setup_logger(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(
        title=f"{settings.PROJECT_NAME} Backend",
        description="API for turning scene descriptions and video clips into AI video prompts",
        version="0.1.0"
    )

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if registry is None:
        registry = PlatformRegistry.from_file(settings.PLATFORM_TEMPLATES_FILE)

    if completion_client is None:
        completion_client = OpenAICompletionClient(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            max_completion_tokens=settings.OPENAI_MAX_COMPLETION_TOKENS,
            temperature=settings.OPENAI_TEMPERATURE,
        )

    if media_client is None:
        media_client = GeminiVideoAnalysisClient(
            api_key=settings.GOOGLE_AI_API_KEY,
            model=settings.GEMINI_MODEL,
        )

    app.state.settings = settings
    app.state.registry = registry
    app.state.prompt_service = PromptService(
        registry=registry,
        completion_client=completion_client,
        media_client=media_client,
        validator=UploadValidator(max_file_size=settings.MAX_UPLOAD_BYTES),
        temp_dir=settings.UPLOAD_DIR,
    )

    _register_error_handlers(app)

    app.include_router(platforms.router, prefix=settings.API_PREFIX)
    app.include_router(generate.router, prefix=settings.API_PREFIX)
    app.include_router(analyze.router, prefix=settings.API_PREFIX)

    static_dir = settings.STATIC_DIR
    if static_dir and os.path.isdir(static_dir):
        _mount_client(app, static_dir)
    else:
        @app.get("/")
        async def root():
            """Health check endpoint."""
            return {"message": f"{settings.PROJECT_NAME} Backend is running"}

    logger.info(f"{settings.PROJECT_NAME} backend ready with {len(registry)} platforms")
    return app


def _register_error_handlers(app: FastAPI):
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def _mount_client(app: FastAPI, static_dir: str):
    """Serve the built client, falling back to index.html for SPA routes."""
    root = os.path.realpath(static_dir)
    index_path = os.path.join(root, "index.html")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_client(full_path: str):
        if full_path.startswith("api/"):
            raise HTTPException(status_code=404, detail="Not Found")

        candidate = os.path.realpath(os.path.join(root, full_path))
        if full_path and candidate.startswith(root + os.sep) and os.path.isfile(candidate):
            return FileResponse(candidate)

        if not os.path.isfile(index_path):
            raise HTTPException(status_code=404, detail="Not Found")
        return FileResponse(index_path)

    logger.info(f"Serving client from {root}")


app = create_app()


def run():
    """Console entrypoint: serve the app with uvicorn."""
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
