"""Route handlers for the Web API."""

from interview_prep.web.routes.health import router as health_router
from interview_prep.web.routes.landing import router as landing_router
from interview_prep.web.routes.dashboard import router as dashboard_router
from interview_prep.web.routes.questions import router as questions_router

__all__ = [
    "health_router",
    "landing_router",
    "dashboard_router",
    "questions_router",
]
