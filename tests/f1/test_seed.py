"""Tests for catalog seeding (F1)."""

from pathlib import Path

import pytest

from interview_prep.db import catalog_repository
from interview_prep.db.seed import SeedError, load_seed_file, seed_catalog

SEED_YAML = """
categories:
  - id: behavioral
    name: Behavioral
    icon: Users
    questions:
      - title: Tell me about yourself
        difficulty: easy
        tips: Keep it short
  - name: Coding
    questions: []
"""


@pytest.fixture
def seed_file(tmp_path) -> Path:
    path = tmp_path / "seed.yaml"
    path.write_text(SEED_YAML, encoding="utf-8")
    return path


class TestLoadSeedFile:
    def test_loads_categories(self, seed_file):
        data = load_seed_file(seed_file)
        assert len(data["categories"]) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(SeedError, match="not found"):
            load_seed_file(tmp_path / "missing.yaml")

    def test_categories_must_be_list(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("categories: nope\n", encoding="utf-8")
        with pytest.raises(SeedError, match="must be a list"):
            load_seed_file(path)

    def test_question_without_title(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(
            "categories:\n  - name: X\n    questions:\n      - difficulty: easy\n",
            encoding="utf-8",
        )
        with pytest.raises(SeedError, match="no title"):
            load_seed_file(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("categories: [unclosed\n", encoding="utf-8")
        with pytest.raises(SeedError, match="Invalid YAML"):
            load_seed_file(path)

    def test_top_level_list_is_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("- name: Behavioral\n", encoding="utf-8")
        with pytest.raises(SeedError, match="top level must be a mapping"):
            load_seed_file(path)

    def test_top_level_scalar_is_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("just a string\n", encoding="utf-8")
        with pytest.raises(SeedError, match="top level must be a mapping"):
            load_seed_file(path)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_bytes(b"categories: \xff\xfe\x00bad\n")
        with pytest.raises(SeedError, match="not UTF-8"):
            load_seed_file(path)


class TestSeedCatalog:
    def test_inserts_rows(self, db, seed_file):
        result = seed_catalog(load_seed_file(seed_file))

        assert result.categories == 2
        assert result.questions == 1
        question = catalog_repository.list_questions("behavioral")[0]
        assert question.tips == "Keep it short"

    def test_seeding_twice_conflicts(self, db, seed_file):
        data = load_seed_file(seed_file)
        seed_catalog(data)
        with pytest.raises(SeedError, match="conflicts"):
            seed_catalog(data)

    def test_conflict_rolls_back_whole_seed(self, db):
        catalog_repository.insert_category(name="Existing", category_id="dup")
        data = {
            "categories": [
                {"id": "new1", "name": "New", "questions": [{"title": "Q"}]},
                {"id": "dup", "name": "Dup"},
            ]
        }

        with pytest.raises(SeedError, match="conflicts"):
            seed_catalog(data)

        assert [c.name for c in catalog_repository.list_categories()] == ["Existing"]
        assert catalog_repository.list_questions() == []

    def test_shipped_seed_file_is_valid(self, db):
        shipped = Path(__file__).parents[2] / "data" / "seed" / "questions_v1.yaml"
        result = seed_catalog(load_seed_file(shipped))
        assert result.categories >= 2
