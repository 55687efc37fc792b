"""
routes.py
---------
Static routing table: binds (method, path) pairs to handlers.
"""

from fastapi import APIRouter, FastAPI

from handlers import skill_handler
from handlers.health_handler import health

API_PREFIX = "/api/v1/skills"

# (method, path relative to API_PREFIX, handler, success status)
SKILL_ROUTES = [
    ("GET", "", skill_handler.list_skills, 200),
    ("GET", "/{key}", skill_handler.get_skill, 200),
    ("POST", "", skill_handler.create_skill, 201),
    ("PUT", "/{key}", skill_handler.replace_skill, 200),
    ("PATCH", "/{key}/actions/name", skill_handler.update_skill_name, 200),
    ("PATCH", "/{key}/actions/description", skill_handler.update_skill_description, 200),
    ("PATCH", "/{key}/actions/logo", skill_handler.update_skill_logo, 200),
    ("PATCH", "/{key}/actions/tags", skill_handler.update_skill_tags, 200),
    ("DELETE", "/{key}", skill_handler.delete_skill, 200),
]


def setup_routes(app: FastAPI) -> None:
    """Register every skill route under API_PREFIX, plus /health."""
    router = APIRouter(prefix=API_PREFIX, tags=["skills"])
    for method, path, handler, status_code in SKILL_ROUTES:
        router.add_api_route(path, handler, methods=[method], status_code=status_code)
    app.include_router(router)
    app.add_api_route("/health", health, methods=["GET"], tags=["health"])
