"""Dashboard page: category tiles, filtered question list, sign-out.

Typical flow:
    view = DashboardView(session, get_data_client(), get_auth_provider())
    view.mount()
    view.select_category("c1")
    page = view.render()
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from interview_prep.core.auth import AuthError, AuthProvider, AuthSession
from interview_prep.core.data_client import DataClient, DataClientError
from interview_prep.core.models import BadgePalette, Category, CategoryIcon, Question
from interview_prep.core.view_state import LANDING_ROUTE, PageView, question_route

logger = structlog.get_logger(__name__)

EMPTY_MESSAGE = "No questions found in this category"


@dataclass
class CategoryTile:
    id: str
    name: str
    description: str
    icon: CategoryIcon
    active: bool


@dataclass
class QuestionRow:
    id: str
    title: str
    difficulty: str
    badge: BadgePalette
    href: str


@dataclass
class DashboardPage:
    """Rendered dashboard.

    While loading, only `loading` is meaningful and everything else is empty.
    """

    loading: bool
    user_email: str = ""
    heading: str = ""
    selected_category_id: str | None = None
    categories: list[CategoryTile] = field(default_factory=list)
    questions: list[QuestionRow] = field(default_factory=list)
    question_count: int = 0
    empty_message: str | None = None


class DashboardView(PageView):
    """Controller for the /dashboard page."""

    def __init__(
        self,
        session: AuthSession,
        client: DataClient,
        auth_provider: AuthProvider,
    ):
        super().__init__()
        self.session = session
        self.client = client
        self.auth_provider = auth_provider
        self.categories: list[Category] = []
        self.questions: list[Question] = []
        self.selected_category: str | None = None
        self.loading = True

    def mount(self, category_id: str | None = None) -> None:
        """Initial fetch: categories, then questions for the given filter."""
        self.selected_category = category_id
        self.load_categories()
        self.load_questions(category_id)

    def load_categories(self) -> None:
        try:
            self.categories = self.client.list_categories()
        except DataClientError as e:
            logger.warning("dashboard.categories_failed", error=str(e))
            self.notify_error("Failed to load categories")
        finally:
            self.loading = False

    def load_questions(self, category_id: str | None = None) -> None:
        try:
            self.questions = self.client.list_questions(category_id)
        except DataClientError as e:
            logger.warning(
                "dashboard.questions_failed", category_id=category_id, error=str(e)
            )
            self.notify_error("Failed to load questions")

    def select_category(self, category_id: str | None) -> None:
        """Toggle the category filter.

        Selecting the already active category clears the filter.
        """
        if category_id is not None and category_id == self.selected_category:
            category_id = None

        self.selected_category = category_id
        self.load_questions(category_id)

    def open_question(self, question_id: str) -> None:
        self.navigate(question_route(question_id))

    async def sign_out(self) -> None:
        try:
            await self.auth_provider.sign_out(self.session)
        except AuthError as e:
            logger.warning("dashboard.sign_out_failed", error=str(e))
            self.notify_error("Failed to sign out")
            return
        self.navigate(LANDING_ROUTE)

    def heading(self) -> str:
        if self.selected_category is None:
            return "All Questions"
        name = next(
            (c.name for c in self.categories if c.id == self.selected_category),
            "",
        )
        return f"{name} Questions"

    def render(self) -> DashboardPage:
        if self.loading:
            return DashboardPage(loading=True)

        tiles = [
            CategoryTile(
                id=c.id,
                name=c.name,
                description=c.description,
                icon=c.glyph,
                active=c.id == self.selected_category,
            )
            for c in self.categories
        ]
        rows = [
            QuestionRow(
                id=q.id,
                title=q.title,
                difficulty=q.difficulty,
                badge=q.badge,
                href=question_route(q.id),
            )
            for q in self.questions
        ]

        return DashboardPage(
            loading=False,
            user_email=self.session.email,
            heading=self.heading(),
            selected_category_id=self.selected_category,
            categories=tiles,
            questions=rows,
            question_count=len(rows),
            empty_message=EMPTY_MESSAGE if not rows else None,
        )
