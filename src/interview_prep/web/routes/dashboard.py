"""Dashboard endpoint."""

from fastapi import APIRouter, Depends, Query

from interview_prep.core.auth import AuthProvider, AuthSession
from interview_prep.core.dashboard import DashboardView
from interview_prep.core.data_client import DataClient
from interview_prep.web.dependencies import (
    auth_provider,
    data_client,
    page_fields,
    require_session,
)
from interview_prep.web.schemas import (
    CategoryTileResponse,
    DashboardResponse,
    QuestionRowResponse,
    SignOutResponse,
)

router = APIRouter(prefix="/dashboard", tags=["pages"])


@router.get("", response_model=DashboardResponse)
async def dashboard(
    category_id: str | None = Query(default=None),
    session: AuthSession = Depends(require_session),
    client: DataClient = Depends(data_client),
    provider: AuthProvider = Depends(auth_provider),
) -> DashboardResponse:
    """Render the dashboard, optionally filtered to one category."""
    view = DashboardView(session, client, provider)
    view.mount(category_id)
    page = view.render()

    return DashboardResponse(
        loading=page.loading,
        user_email=page.user_email,
        heading=page.heading,
        selected_category_id=page.selected_category_id,
        categories=[
            CategoryTileResponse(
                id=t.id,
                name=t.name,
                description=t.description,
                icon=t.icon,
                active=t.active,
            )
            for t in page.categories
        ],
        questions=[
            QuestionRowResponse(
                id=r.id,
                title=r.title,
                difficulty=r.difficulty,
                badge=r.badge,
                href=r.href,
            )
            for r in page.questions
        ],
        question_count=page.question_count,
        empty_message=page.empty_message,
        **page_fields(view),
    )


@router.post("/sign-out", response_model=SignOutResponse)
async def sign_out(
    session: AuthSession = Depends(require_session),
    client: DataClient = Depends(data_client),
    provider: AuthProvider = Depends(auth_provider),
) -> SignOutResponse:
    """Invalidate the current session and send the user to the landing page."""
    view = DashboardView(session, client, provider)
    await view.sign_out()
    return SignOutResponse(**page_fields(view))
