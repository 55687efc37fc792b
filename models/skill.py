"""
models/skill.py
---------------
Domain model for a skill: a named competency with descriptive metadata.
"""

from dataclasses import asdict, dataclass, field


@dataclass
class Skill:
    """
    Represents a single skill.

    Attributes:
        key: Client-supplied primary identifier. Never changes after creation.
        name: Display name. Empty string is allowed.
        description: Free text.
        logo: Logo URL (not validated).
        tags: Labels, kept in the order they were written.
    """
    key: str
    name: str = ""
    description: str = ""
    logo: str = ""
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """JSON-ready representation used in API responses."""
        return asdict(self)

    def __str__(self) -> str:
        tags = ", ".join(self.tags) if self.tags else "-"
        return f"{self.key} | {self.name} | tags: {tags}"
