"""
FastAPI application for the Tweede Kamer Attendance API.

Provides JSON endpoints for attendance records, activity details and
statistics, plus a documentation page at ``/``.

Responsibility: Main API application setup and configuration
"""

# Load .env BEFORE importing settings (critical for pydantic-settings)
from dotenv import load_dotenv
load_dotenv('.env', override=True)

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
import logging

from src.adapters.tweedekamer_activities import TweedeKamerActivitiesAdapter
from src.config import Settings, settings as default_settings
from src.services.attendance_service import AttendanceService
from api.errors import register_exception_handlers
from api.pages import render_index_page
from api.v1.endpoints import activities, attendance, health, stats

# Configure logging
logging.basicConfig(
    level=default_settings.app.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def build_adapter(config: Settings) -> TweedeKamerActivitiesAdapter:
    """Create the upstream adapter from configuration."""
    return TweedeKamerActivitiesAdapter(
        base_url=config.upstream.base_url,
        timeout_seconds=config.upstream.timeout_seconds,
        user_agent=config.upstream.user_agent,
    )


def create_app(
    config: Optional[Settings] = None,
    adapter: Optional[TweedeKamerActivitiesAdapter] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    The upstream client is initialized in the lifespan handler, so it is
    ready before the first request is accepted.

    Args:
        config: Settings to use (defaults to the global settings)
        adapter: Pre-built adapter (tests pass one with a stub transport)
    """
    config = config or default_settings
    adapter = adapter or build_adapter(config)
    service = AttendanceService(adapter, config.upstream)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {config.app.app_name}...")
        logger.info(f"Environment: {config.app.environment.value}")
        logger.info(f"Upstream: {config.upstream.base_url}")
        await adapter.initialize()
        logger.info("Available endpoints: /api/attendance, /api/activity/{id}, /api/stats, /api/health")
        try:
            yield
        finally:
            logger.info(f"Shutting down {config.app.app_name}...")
            await adapter.close()

    app = FastAPI(
        title=config.app.app_name,
        description="Attendance records for the Dutch House of Representatives (Tweede Kamer)",
        version=config.app.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.attendance_service = service

    logger.info(f"CORS Origins configured: {config.app.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    for module in (attendance, activities, stats, health):
        app.include_router(module.router, prefix="/api", tags=["attendance"])

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def root(request: Request):
        """Root endpoint - API documentation page."""
        return render_index_page(
            title=config.app.app_name,
            ready=request.app.state.attendance_service.is_ready,
            default_limit=config.upstream.default_limit,
            sample_size=config.upstream.stats_sample_size,
        )

    # Frontend files; registered last so API routes and "/" take precedence
    static_dir = Path(config.app.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        logger.info(f"Serving static files from {static_dir.resolve()}")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=default_settings.app.api_host,
        port=default_settings.app.api_port,
        reload=default_settings.app.debug
    )
