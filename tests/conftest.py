"""Shared fixtures: the real app wired to in-memory storage."""

import dataclasses
from typing import Optional

import psycopg2
import pytest
from fastapi.testclient import TestClient

from app import create_app
from models.skill import Skill
from repositories.skill_repo import UPDATABLE_FIELDS
from services.skill_service import SkillService


class FakeSkillRepository:
    """Dict-backed stand-in with the same interface as SkillRepository."""

    def __init__(self):
        self.rows: dict[str, Skill] = {}
        self.error: Optional[Exception] = None

    def _check(self):
        if self.error is not None:
            raise self.error

    def get(self, key: str) -> Optional[Skill]:
        self._check()
        skill = self.rows.get(key)
        return dataclasses.replace(skill, tags=list(skill.tags)) if skill else None

    def get_all(self) -> list[Skill]:
        self._check()
        return [dataclasses.replace(s, tags=list(s.tags)) for s in self.rows.values()]

    def create(self, skill: Skill) -> Optional[Skill]:
        self._check()
        if skill.key in self.rows:
            return None
        self.rows[skill.key] = dataclasses.replace(skill, tags=list(skill.tags))
        return skill

    def replace(self, key: str, skill: Skill) -> Optional[Skill]:
        self._check()
        if key not in self.rows:
            return None
        self.rows[key] = dataclasses.replace(skill, key=key, tags=list(skill.tags))
        return self.get(key)

    def update_field(self, key: str, field: str, value) -> Optional[Skill]:
        self._check()
        if field not in UPDATABLE_FIELDS:
            raise ValueError(f"Unknown skill field: {field!r}")
        if key not in self.rows:
            return None
        setattr(self.rows[key], field, list(value) if field == "tags" else value)
        return self.get(key)

    def delete(self, key: str) -> bool:
        self._check()
        return self.rows.pop(key, None) is not None


class FakeDatabase:
    def __init__(self):
        self.healthy = True
        self.closed = False

    def ping(self) -> None:
        if not self.healthy:
            raise psycopg2.OperationalError("connection refused")

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def repo():
    return FakeSkillRepository()


@pytest.fixture
def database():
    return FakeDatabase()


@pytest.fixture
def client(repo, database):
    app = create_app(SkillService(repo), database)
    return TestClient(app)


@pytest.fixture
def python_skill():
    return Skill(
        key="python",
        name="Python",
        description="Python is an interpreted, high-level, general-purpose programming language.",
        logo="https://upload.wikimedia.org/wikipedia/commons/c/c3/Python-logo-notext.svg",
        tags=["programming language", "scripting"],
    )


@pytest.fixture
def golang_skill():
    return Skill(
        key="golang",
        name="Go",
        description="Go is a statically typed, compiled programming language designed at Google.",
        logo="https://upload.wikimedia.org/wikipedia/commons/0/05/Go_Logo_Blue.svg",
        tags=["programming language", "system"],
    )
