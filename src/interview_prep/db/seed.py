"""Out-of-band creation of categories and questions from a YAML file.

Expected layout:

    categories:
      - id: behavioral          # optional, generated when missing
        name: Behavioral
        description: Soft skills and past experience
        icon: Users
        questions:
          - title: Tell me about yourself
            difficulty: easy
            description: ...
            tips: ...
            example_answer: ...
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog
import yaml

from interview_prep.db import catalog_repository
from interview_prep.db.database import get_db

logger = structlog.get_logger(__name__)


class SeedError(Exception):
    """Raised when a seed file is missing, malformed or conflicts with stored rows."""


@dataclass
class SeedResult:
    categories: int
    questions: int


def load_seed_file(path: Path) -> dict[str, Any]:
    """Read and minimally validate a seed file.

    Raises:
        SeedError: If the file is missing, unreadable, or has no categories list
    """
    if not path.exists():
        raise SeedError(f"Seed file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except UnicodeDecodeError as e:
        raise SeedError(f"{path} is not UTF-8 text: {e}") from e
    except yaml.YAMLError as e:
        raise SeedError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise SeedError(f"{path}: top level must be a mapping")

    categories = data.get("categories")
    if not isinstance(categories, list):
        raise SeedError(f"{path}: 'categories' must be a list")

    for i, category in enumerate(categories):
        if not isinstance(category, dict) or not category.get("name"):
            raise SeedError(f"{path}: category #{i + 1} has no name")
        for j, question in enumerate(category.get("questions") or []):
            if not isinstance(question, dict) or not question.get("title"):
                raise SeedError(
                    f"{path}: question #{j + 1} of '{category['name']}' has no title"
                )

    return data


def seed_catalog(data: dict[str, Any]) -> SeedResult:
    """Insert the categories and questions described by a loaded seed file.

    All rows are written in one transaction; on a conflict nothing is stored.

    Raises:
        SeedError: If a row conflicts with one already stored
    """
    counts = {"categories": 0, "questions": 0}

    try:
        with get_db() as conn:
            _write_entries(conn, data["categories"], counts)
    except sqlite3.IntegrityError as e:
        raise SeedError(f"Seed conflicts with stored data, nothing was loaded: {e}") from e

    logger.info("catalog.seeded", **counts)
    return SeedResult(**counts)


def _write_entries(
    conn: sqlite3.Connection, entries: list[dict[str, Any]], counts: dict[str, int]
) -> None:
    for entry in entries:
        category = catalog_repository.insert_category(
            name=entry["name"],
            description=entry.get("description", ""),
            icon=entry.get("icon", "Code"),
            category_id=entry.get("id"),
            conn=conn,
        )
        counts["categories"] += 1

        for q in entry.get("questions") or []:
            catalog_repository.insert_question(
                title=q["title"],
                category_id=category.id,
                difficulty=q.get("difficulty", ""),
                description=q.get("description", ""),
                tips=q.get("tips", ""),
                example_answer=q.get("example_answer", ""),
                question_id=q.get("id"),
                conn=conn,
            )
            counts["questions"] += 1
