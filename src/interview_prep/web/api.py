"""FastAPI application factory.

Main entry point for the InterviewPrep Web API.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from interview_prep import __version__
from interview_prep.config.app_config import load_app_config
from interview_prep.db.database import init_db
from interview_prep.web.routes import (
    health_router,
    landing_router,
    dashboard_router,
    questions_router,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifespan context manager for startup/shutdown events."""
    # Startup
    config = load_app_config()
    db_path = config.database.resolve_path()
    init_db(db_path)
    logger.info("api_startup", db_path=str(db_path.absolute()))
    yield
    # Shutdown (nothing to do for now)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI app instance
    """
    config = load_app_config()

    app = FastAPI(
        title=f"{config.web.title} API",
        description="Interview question practice and progress tracking",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS middleware for web clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.web.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health_router)
    app.include_router(landing_router)
    app.include_router(dashboard_router)
    app.include_router(questions_router)

    return app


# Default app instance for uvicorn
app = create_app()
