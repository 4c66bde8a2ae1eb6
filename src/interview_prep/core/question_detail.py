"""Question detail page: question content, practice notes, progress saves.

State machine, keyed by the route's question ID:

    LOADING -> LOADED      question found; progress defaults to not_started
    LOADING -> NOT_FOUND   question fetch failed; navigates to /dashboard
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

import structlog

from interview_prep.core.auth import AuthSession
from interview_prep.core.data_client import DataClient, DataClientError
from interview_prep.core.models import (
    BadgePalette,
    ProgressStatus,
    Question,
    UserProgress,
)
from interview_prep.core.view_state import DASHBOARD_ROUTE, PageView

logger = structlog.get_logger(__name__)


class DetailState(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    NOT_FOUND = "not_found"


@dataclass
class QuestionDetailPage:
    """Rendered detail page. `question_*` fields are empty unless LOADED."""

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


class QuestionDetailView(PageView):
    """Controller for the /question/{id} page."""

    def __init__(self, question_id: str, session: AuthSession, client: DataClient):
        super().__init__()
        self.question_id = question_id
        self.session = session
        self.client = client
        self.state = DetailState.LOADING
        self.question: Question | None = None
        self.progress = UserProgress.default(session.user_id, question_id)

    def mount(self) -> None:
        """Initial fetch of the question and the user's progress on it."""
        self.load_question()
        if self.state is DetailState.LOADED:
            self.load_progress()

    def load_question(self) -> None:
        try:
            self.question = self.client.get_question(self.question_id)
        except DataClientError as e:
            logger.info("question_detail.not_found", question_id=self.question_id, error=str(e))
            self.question = None
            self.state = DetailState.NOT_FOUND
            self.notify_error("Failed to load question")
            self.navigate(DASHBOARD_ROUTE)
            return

        self.state = DetailState.LOADED

    def load_progress(self) -> None:
        """Fetch the stored progress; no row keeps the current local state."""
        try:
            stored = self.client.get_progress(self.session.user_id, self.question_id)
        except DataClientError as e:
            logger.warning(
                "question_detail.progress_failed",
                question_id=self.question_id,
                error=str(e),
            )
            self.notify_error("Failed to load progress")
            return

        if stored is not None:
            self.progress = stored

    def edit_notes(self, text: str) -> None:
        """Update the practice answer locally; persisted on the next save."""
        self.progress.notes = text

    def save_progress(self, status: ProgressStatus) -> bool:
        """Persist status and notes for this question.

        Updates the known row when the progress already has an ID, otherwise
        upserts on (user, question). Local status only changes through the
        re-fetch after a successful write.

        Returns:
            True if the write succeeded
        """
        status = ProgressStatus(status)
        completed_at = None
        if status is ProgressStatus.COMPLETED:
            completed_at = datetime.now(timezone.utc).isoformat()

        payload = UserProgress(
            user_id=self.session.user_id,
            question_id=self.question_id,
            status=status,
            notes=self.progress.notes,
            completed_at=completed_at,
        )

        try:
            if self.progress.id is not None:
                self.client.update_progress(self.progress.id, payload)
            else:
                self.client.upsert_progress(payload)
        except DataClientError as e:
            logger.warning(
                "question_detail.save_failed",
                question_id=self.question_id,
                status=status.value,
                error=str(e),
            )
            self.notify_error("Failed to save progress")
            return False

        logger.info(
            "progress.saved",
            question_id=self.question_id,
            user_id=self.session.user_id,
            status=status.value,
        )
        self.notify_success("Progress saved successfully")

        # Re-fetch so the next save targets the persisted row ID
        self.load_progress()
        return True

    def save_draft(self) -> bool:
        """Handler for the "Save Progress" button."""
        return self.save_progress(ProgressStatus.IN_PROGRESS)

    def mark_complete(self) -> bool:
        """Handler for the "Mark Complete" button."""
        return self.save_progress(ProgressStatus.COMPLETED)

    def render(self) -> QuestionDetailPage:
        if self.state is not DetailState.LOADED or self.question is None:
            return QuestionDetailPage(state=self.state, question_id=self.question_id)

        q = self.question
        return QuestionDetailPage(
            state=self.state,
            question_id=q.id,
            title=q.title,
            description=q.description,
            difficulty=q.difficulty,
            badge=q.badge,
            tips=q.tips or None,
            example_answer=q.example_answer or None,
            status=self.progress.status,
            notes=self.progress.notes,
            completed_at=self.progress.completed_at,
        )
