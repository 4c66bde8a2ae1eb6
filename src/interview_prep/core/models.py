"""Domain records for categories, questions and per-user progress.

Category and Question rows are created out-of-band and only read by the
views. UserProgress is created on the first save for a (user, question)
pair and mutated in place afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ProgressStatus(str, Enum):
    """Completion status of a question for one user."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class Difficulty(str, Enum):
    """Question difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: str | None) -> Difficulty | None:
        """Parse a stored difficulty; unrecognized values yield None."""
        try:
            return cls(value)
        except ValueError:
            return None


class BadgePalette(str, Enum):
    """Color palette for the difficulty badge."""

    SUCCESS = "success"
    WARNING = "warning"
    DESTRUCTIVE = "destructive"
    NEUTRAL = "neutral"


_BADGE_PALETTES = {
    Difficulty.EASY: BadgePalette.SUCCESS,
    Difficulty.MEDIUM: BadgePalette.WARNING,
    Difficulty.HARD: BadgePalette.DESTRUCTIVE,
}


def difficulty_badge(difficulty: str | None) -> BadgePalette:
    """Map a raw difficulty value to its badge palette."""
    parsed = Difficulty.parse(difficulty)
    if parsed is None:
        return BadgePalette.NEUTRAL
    return _BADGE_PALETTES[parsed]


class CategoryIcon(str, Enum):
    """Glyphs a category tile can show."""

    CODE = "Code"
    USERS = "Users"
    NETWORK = "Network"
    CROWN = "Crown"
    LIGHTBULB = "Lightbulb"

    @classmethod
    def resolve(cls, name: str | None) -> CategoryIcon:
        """Resolve an icon key, falling back to CODE for unknown keys."""
        try:
            return cls(name)
        except ValueError:
            return cls.CODE


@dataclass
class Category:
    """A grouping label for questions (e.g. "Behavioral")."""

    id: str
    name: str
    description: str = ""
    icon: str = CategoryIcon.CODE.value

    @property
    def glyph(self) -> CategoryIcon:
        return CategoryIcon.resolve(self.icon)

    @classmethod
    def from_row(cls, row: Any) -> Category:
        return cls(
            id=row["id"],
            name=row["name"],
            description=row["description"] or "",
            icon=row["icon"] or "",
        )


@dataclass
class Question:
    """An interview question with optional tips and example answer."""

    id: str
    title: str
    description: str = ""
    difficulty: str = ""
    category_id: str | None = None
    tips: str = ""
    example_answer: str = ""
    created_at: str = ""

    @property
    def badge(self) -> BadgePalette:
        return difficulty_badge(self.difficulty)

    @classmethod
    def from_row(cls, row: Any) -> Question:
        return cls(
            id=row["id"],
            title=row["title"],
            description=row["description"] or "",
            difficulty=row["difficulty"] or "",
            category_id=row["category_id"],
            tips=row["tips"] or "",
            example_answer=row["example_answer"] or "",
            created_at=row["created_at"],
        )


@dataclass
class UserProgress:
    """Per-user, per-question status and practice notes.

    `id` is None until the record has been persisted. `completed_at` is
    set only while the status is completed.
    """

    user_id: str
    question_id: str
    status: ProgressStatus = ProgressStatus.NOT_STARTED
    notes: str = ""
    completed_at: str | None = None
    id: str | None = None

    @classmethod
    def default(cls, user_id: str, question_id: str) -> UserProgress:
        """Progress for a question the user has never saved."""
        return cls(user_id=user_id, question_id=question_id)

    @classmethod
    def from_row(cls, row: Any) -> UserProgress:
        return cls(
            id=row["id"],
            user_id=row["user_id"],
            question_id=row["question_id"],
            status=ProgressStatus(row["status"]),
            notes=row["notes"] or "",
            completed_at=row["completed_at"],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "question_id": self.question_id,
            "status": self.status.value,
            "notes": self.notes,
            "completed_at": self.completed_at,
        }
