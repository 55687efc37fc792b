"""
services/errors.py
------------------
Domain errors raised by the service layer and mapped to HTTP
statuses by the application.
"""


class SkillError(Exception):
    """Base error for skill operations."""

    message = "Skill error"

    def __init__(self, key: str):
        super().__init__(f"{self.message}: {key}")
        self.key = key


class SkillNotFoundError(SkillError):
    """Raised when no stored skill matches the requested key."""

    message = "Skill not found"


class SkillConflictError(SkillError):
    """Raised when creating a skill whose key is already taken."""

    message = "Skill already exists"
