from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from typing import Optional
import logging

from analyzer import AnalyzerSettings, MappingStore, get_settings
from analyzer.logging_setup import configure_logging
from analyzer_api import router as analyzer_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[AnalyzerSettings] = None,
    mapping_store: Optional[MappingStore] = None
) -> FastAPI:
    """Build the analyzer service"""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="CF Analyzer Service")

    # Read by the routers; the store is created from settings on first use if not given
    app.state.settings = settings
    app.state.mapping_store = mapping_store

    # Raw request body limit, checked before the JSON body is parsed
    @app.middleware("http")
    async def limit_body_size(request: Request, call_next):
        content_length = request.headers.get("content-length", "")
        if content_length.isdigit() and int(content_length) > settings.max_body_bytes:
            logger.warning(f"Rejected request to {request.url.path}: body exceeds {settings.max_body_bytes} bytes")
            return JSONResponse(status_code=413, content={"error": "Payload too large"})
        return await call_next(request)

    # CORS Configuration
    # Set CORS_ORIGINS to a comma-separated list to restrict origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
    )

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "cf-analyzer-service is running!"

    # Include routers
    app.include_router(analyzer_router)

    logger.debug(f"Log level set to {settings.log_level}")
    return app


app = create_app()
