"""Pydantic schemas for the Web API.

Serialization models for the landing, dashboard and question detail pages.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from interview_prep import __version__
from interview_prep.core.models import BadgePalette, CategoryIcon, ProgressStatus
from interview_prep.core.question_detail import DetailState


# =============================================================================
# SHARED SCHEMAS
# =============================================================================


class NotificationResponse(BaseModel):
    """A transient message for the user."""

    title: str
    description: str
    variant: str = "default"


class PageResponse(BaseModel):
    """Fields every page carries."""

    notifications: list[NotificationResponse] = Field(default_factory=list)
    redirect_to: str | None = None


# =============================================================================
# LANDING SCHEMAS
# =============================================================================


class ActionResponse(BaseModel):
    label: str
    href: str
    primary: bool = True


class FeatureResponse(BaseModel):
    title: str
    description: str


class LandingResponse(PageResponse):
    """Response for the landing page."""

    headline: str
    tagline: str
    signed_in: bool
    features: list[FeatureResponse]
    actions: list[ActionResponse]
    signup_prompt: ActionResponse | None = None


# =============================================================================
# DASHBOARD SCHEMAS
# =============================================================================


class CategoryTileResponse(BaseModel):
    id: str
    name: str
    description: str
    icon: CategoryIcon
    active: bool


class QuestionRowResponse(BaseModel):
    id: str
    title: str
    difficulty: str
    badge: BadgePalette
    href: str


class DashboardResponse(PageResponse):
    """Response for the dashboard page."""

    loading: bool
    user_email: str = ""
    heading: str = ""
    selected_category_id: str | None = None
    categories: list[CategoryTileResponse] = Field(default_factory=list)
    questions: list[QuestionRowResponse] = Field(default_factory=list)
    question_count: int = 0
    empty_message: str | None = None


# =============================================================================
# QUESTION DETAIL SCHEMAS
# =============================================================================


class ProgressSaveRequest(BaseModel):
    """Request to save progress on a question."""

    status: ProgressStatus
    notes: str = Field(default="", max_length=20000)


class QuestionDetailResponse(PageResponse):
    """Response for the question detail page."""

    state: DetailState
    question_id: str
    title: str = ""
    description: str = ""
    difficulty: str = ""
    badge: BadgePalette = BadgePalette.NEUTRAL
    tips: str | None = None
    example_answer: str | None = None
    status: ProgressStatus = ProgressStatus.NOT_STARTED
    notes: str = ""
    completed_at: str | None = None


# =============================================================================
# AUTH / HEALTH SCHEMAS
# =============================================================================


class SignOutResponse(PageResponse):
    """Response after signing out; redirect_to points at the landing page."""


class HealthResponse(BaseModel):
    """Health check response. Status is "degraded" when the database is unreachable."""

    status: str = "ok"
    version: str = __version__
    database: str
    database_ok: bool = True
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
