"""Core page logic.

Modules:
- models: Category, Question, UserProgress and their enumerations
- data_client: Data store operations used by the pages
- auth: Session identity and sign-out
- view_state: Notifications and navigation shared by the pages
- landing, dashboard, question_detail: Page controllers
"""

__all__ = [
    "models",
    "data_client",
    "auth",
    "view_state",
    "landing",
    "dashboard",
    "question_detail",
]
