"""Tests for SkillService outcome mapping."""

from unittest.mock import Mock

import pytest

from models.skill import Skill
from repositories.skill_repo import SkillRepository
from services.errors import SkillConflictError, SkillNotFoundError
from services.skill_service import SkillService


@pytest.fixture
def repository():
    return Mock(spec=SkillRepository)


@pytest.fixture
def service(repository):
    return SkillService(repository)


def test_get_skill_not_found(service, repository):
    repository.get.return_value = None

    with pytest.raises(SkillNotFoundError) as exc_info:
        service.get_skill("cobol")

    assert exc_info.value.key == "cobol"
    assert exc_info.value.message == "Skill not found"


def test_create_skill_conflict(service, repository):
    repository.create.return_value = None

    with pytest.raises(SkillConflictError):
        service.create_skill(Skill(key="python"))


def test_create_skill_returns_created(service, repository):
    skill = Skill(key="python", name="Python")
    repository.create.return_value = skill

    assert service.create_skill(skill) is skill


def test_replace_skill_not_found(service, repository):
    repository.replace.return_value = None

    with pytest.raises(SkillNotFoundError):
        service.replace_skill("cobol", Skill(key="cobol"))


def test_update_field_passes_through(service, repository):
    updated = Skill(key="python", name="Python 3")
    repository.update_field.return_value = updated

    assert service.update_field("python", "name", "Python 3") is updated
    repository.update_field.assert_called_once_with("python", "name", "Python 3")


def test_update_field_not_found(service, repository):
    repository.update_field.return_value = None

    with pytest.raises(SkillNotFoundError):
        service.update_field("cobol", "tags", ["x"])


def test_delete_skill_not_found(service, repository):
    repository.delete.return_value = False

    with pytest.raises(SkillNotFoundError):
        service.delete_skill("cobol")


def test_list_skills(service, repository):
    repository.get_all.return_value = []

    assert service.list_skills() == []
