"""
handlers/skill_handler.py
--------------------------
HTTP handlers for the skills resource.

Each handler parses the path key and (optionally) a typed JSON body,
makes exactly one call into SkillService, and wraps the result in the
response envelope. Domain and storage errors propagate to the
exception handlers installed by `app.create_app`.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, field_validator

from models.skill import Skill
from services.skill_service import SkillService
from handlers.responses import success, success_message


# ── Request bodies ────────────────────────────────────────

class NullAsEmpty(BaseModel):
    """Reads JSON null in a string or list field as its empty value."""

    @field_validator("name", "description", "logo", "tags", mode="before", check_fields=False)
    @classmethod
    def _null_as_empty(cls, value, info):
        if value is None:
            return [] if info.field_name == "tags" else ""
        return value


class SkillUpdate(NullAsEmpty):
    """Full skill body for PUT. Any key in the body is ignored."""
    key: Optional[str] = None
    name: str = Field(default="", max_length=100)
    description: str = ""
    logo: str = ""
    tags: list[str] = Field(default_factory=list)

    def to_skill(self, key: str) -> Skill:
        return Skill(
            key=key,
            name=self.name,
            description=self.description,
            logo=self.logo,
            tags=list(self.tags),
        )


class SkillCreate(SkillUpdate):
    """Full skill body for POST; the key is required."""
    key: str = Field(min_length=1, max_length=100)


class NameUpdate(NullAsEmpty):
    name: str = Field(max_length=100)


class DescriptionUpdate(NullAsEmpty):
    description: str


class LogoUpdate(NullAsEmpty):
    logo: str


class TagsUpdate(NullAsEmpty):
    tags: list[str]


def get_skill_service(request: Request) -> SkillService:
    """Resolve the SkillService injected into the app at startup."""
    return request.app.state.skill_service


# ── Handlers ──────────────────────────────────────────────

def list_skills(service: SkillService = Depends(get_skill_service)) -> JSONResponse:
    skills = service.list_skills()
    return success([s.to_dict() for s in skills])


def get_skill(key: str, service: SkillService = Depends(get_skill_service)) -> JSONResponse:
    return success(service.get_skill(key).to_dict())


def create_skill(payload: SkillCreate, service: SkillService = Depends(get_skill_service)) -> JSONResponse:
    skill = service.create_skill(payload.to_skill(payload.key))
    return success(skill.to_dict(), status_code=201)


def replace_skill(
    key: str, payload: SkillUpdate, service: SkillService = Depends(get_skill_service)
) -> JSONResponse:
    skill = service.replace_skill(key, payload.to_skill(key))
    return success(skill.to_dict())


def update_skill_name(
    key: str, payload: NameUpdate, service: SkillService = Depends(get_skill_service)
) -> JSONResponse:
    skill = service.update_field(key, "name", payload.name)
    return success(skill.to_dict())


def update_skill_description(
    key: str, payload: DescriptionUpdate, service: SkillService = Depends(get_skill_service)
) -> JSONResponse:
    skill = service.update_field(key, "description", payload.description)
    return success(skill.to_dict())


def update_skill_logo(
    key: str, payload: LogoUpdate, service: SkillService = Depends(get_skill_service)
) -> JSONResponse:
    skill = service.update_field(key, "logo", payload.logo)
    return success(skill.to_dict())


def update_skill_tags(
    key: str, payload: TagsUpdate, service: SkillService = Depends(get_skill_service)
) -> JSONResponse:
    skill = service.update_field(key, "tags", payload.tags)
    return success(skill.to_dict())


def delete_skill(key: str, service: SkillService = Depends(get_skill_service)) -> JSONResponse:
    service.delete_skill(key)
    return success_message("Skill deleted")
