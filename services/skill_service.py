"""
services/skill_service.py
--------------------------
Business logic for skills: turns repository results into domain
outcomes (found, not found, conflict).
"""

from models.skill import Skill
from repositories.skill_repo import SkillRepository
from services.errors import SkillConflictError, SkillNotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)


class SkillService:
    """Coordinates skill reads and writes against a repository."""

    def __init__(self, repository: SkillRepository):
        self.repository = repository

    def get_skill(self, key: str) -> Skill:
        skill = self.repository.get(key)
        if skill is None:
            raise SkillNotFoundError(key)
        return skill

    def list_skills(self) -> list[Skill]:
        return self.repository.get_all()

    def create_skill(self, skill: Skill) -> Skill:
        """Persist a new skill; raises SkillConflictError if the key exists."""
        created = self.repository.create(skill)
        if created is None:
            logger.info(f"Rejected duplicate skill '{skill.key}'")
            raise SkillConflictError(skill.key)
        return created

    def replace_skill(self, key: str, skill: Skill) -> Skill:
        """
        Overwrite every mutable field of the skill at `key`.
        Whatever key the incoming skill carries is ignored.
        """
        updated = self.repository.replace(key, skill)
        if updated is None:
            raise SkillNotFoundError(key)
        return updated

    def update_field(self, key: str, field: str, value) -> Skill:
        """Change a single field and return the whole updated skill."""
        updated = self.repository.update_field(key, field, value)
        if updated is None:
            raise SkillNotFoundError(key)
        return updated

    def delete_skill(self, key: str) -> None:
        if not self.repository.delete(key):
            raise SkillNotFoundError(key)
