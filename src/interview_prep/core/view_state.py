"""Shared state for page controllers: notifications and navigation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

# Routes
LANDING_ROUTE = "/"
DASHBOARD_ROUTE = "/dashboard"
AUTH_ROUTE = "/auth"


def question_route(question_id: str) -> str:
    return f"/question/{question_id}"


class NotificationVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass
class Notification:
    """A transient, non-blocking message shown to the user."""

    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "variant": self.variant.value,
        }


class PageView:
    """Base for page controllers.

    Collects notifications raised while handling one user action and
    records where the page asked to navigate.
    """

    def __init__(self) -> None:
        self.notifications: list[Notification] = []
        self.redirect_to: str | None = None

    def notify_error(self, description: str) -> None:
        self.notifications.append(
            Notification(
                title="Error",
                description=description,
                variant=NotificationVariant.DESTRUCTIVE,
            )
        )

    def notify_success(self, description: str) -> None:
        self.notifications.append(Notification(title="Success", description=description))

    def navigate(self, route: str) -> None:
        logger.debug("view.navigate", view=type(self).__name__, route=route)
        self.redirect_to = route
