"""Landing page: marketing content and the entry call-to-action."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from interview_prep.core.auth import AuthSession
from interview_prep.core.view_state import (
    AUTH_ROUTE,
    DASHBOARD_ROUTE,
    PageView,
)

HEADLINE = "Ace Your Next Interview"
TAGLINE = (
    "Practice with curated interview questions across technical, behavioral, "
    "and system design categories. Track your progress and build confidence."
)

FEATURES = [
    (
        "Curated Questions",
        "Access a comprehensive library of interview questions across "
        "multiple categories and difficulty levels.",
    ),
    (
        "Track Progress",
        "Monitor your preparation journey, save your answers, and mark "
        "questions as completed.",
    ),
    (
        "Real-World Prep",
        "Practice with questions from actual interviews, complete with tips "
        "and example answers.",
    ),
]


@dataclass
class Action:
    """A navigation button."""

    label: str
    href: str
    primary: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "href": self.href, "primary": self.primary}


@dataclass
class LandingPage:
    headline: str
    tagline: str
    features: list[dict[str, str]]
    actions: list[Action]
    signup_prompt: Action | None = None
    signed_in: bool = False


class LandingView(PageView):
    """Static page that branches only on whether a session exists."""

    def __init__(self, session: AuthSession | None):
        super().__init__()
        self.session = session

    def actions(self) -> list[Action]:
        if self.session is not None:
            return [Action(label="Go to Dashboard", href=DASHBOARD_ROUTE)]
        return [
            Action(label="Get Started", href=AUTH_ROUTE),
            Action(label="Sign In", href=AUTH_ROUTE, primary=False),
        ]

    def activate(self, label: str) -> None:
        """Follow the action with the given label."""
        for action in self.actions():
            if action.label == label:
                self.navigate(action.href)
                return
        raise ValueError(f"No action labelled '{label}'")

    def render(self) -> LandingPage:
        signup_prompt = None
        if self.session is None:
            signup_prompt = Action(label="Create Free Account", href=AUTH_ROUTE)

        return LandingPage(
            headline=HEADLINE,
            tagline=TAGLINE,
            features=[{"title": t, "description": d} for t, d in FEATURES],
            actions=self.actions(),
            signup_prompt=signup_prompt,
            signed_in=self.session is not None,
        )
