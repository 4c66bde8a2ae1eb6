"""Database module for SQLite persistence.

Provides:
- Database connection management
- Schema initialization
- Repository functions for catalog, progress and users tables
"""

from interview_prep.db.database import get_db, init_db

__all__ = ["get_db", "init_db"]
