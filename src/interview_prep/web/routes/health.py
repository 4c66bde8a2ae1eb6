"""Health check endpoint."""

import sqlite3

import structlog
from fastapi import APIRouter

from interview_prep import __version__
from interview_prep.db.database import get_db, get_db_path
from interview_prep.web.schemas import HealthResponse

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report the app version and whether the database answers a query."""
    db_path = get_db_path()
    try:
        with get_db() as conn:
            conn.execute("SELECT 1").fetchone()
    except sqlite3.Error as e:
        logger.warning("health.database_unavailable", path=str(db_path), error=str(e))
        return HealthResponse(
            status="degraded",
            version=__version__,
            database=str(db_path),
            database_ok=False,
        )

    return HealthResponse(version=__version__, database=str(db_path))
