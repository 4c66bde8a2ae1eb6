"""Question detail endpoints."""

from fastapi import APIRouter, Depends

from interview_prep.core.auth import AuthSession
from interview_prep.core.data_client import DataClient
from interview_prep.core.question_detail import DetailState, QuestionDetailView
from interview_prep.web.dependencies import data_client, page_fields, require_session
from interview_prep.web.schemas import ProgressSaveRequest, QuestionDetailResponse

router = APIRouter(prefix="/question", tags=["pages"])


def _to_response(view: QuestionDetailView) -> QuestionDetailResponse:
    page = view.render()
    return QuestionDetailResponse(
        state=page.state,
        question_id=page.question_id,
        title=page.title,
        description=page.description,
        difficulty=page.difficulty,
        badge=page.badge,
        tips=page.tips,
        example_answer=page.example_answer,
        status=page.status,
        notes=page.notes,
        completed_at=page.completed_at,
        **page_fields(view),
    )


@router.get("/{question_id}", response_model=QuestionDetailResponse)
async def get_question(
    question_id: str,
    session: AuthSession = Depends(require_session),
    client: DataClient = Depends(data_client),
) -> QuestionDetailResponse:
    """Render a question with the current user's progress.

    An unknown question renders no content and redirects to /dashboard.
    """
    view = QuestionDetailView(question_id, session, client)
    view.mount()
    return _to_response(view)


@router.post("/{question_id}/progress", response_model=QuestionDetailResponse)
async def save_progress(
    question_id: str,
    request: ProgressSaveRequest,
    session: AuthSession = Depends(require_session),
    client: DataClient = Depends(data_client),
) -> QuestionDetailResponse:
    """Save notes and status, then render the page with the stored progress."""
    view = QuestionDetailView(question_id, session, client)
    view.mount()

    if view.state is DetailState.LOADED:
        view.edit_notes(request.notes)
        view.save_progress(request.status)

    return _to_response(view)
