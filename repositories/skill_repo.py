"""
repositories/skill_repo.py
---------------------------
Data access layer for skills.
All SQL queries related to the `skills` table live here.
"""

from typing import Optional

from db.connection import Database
from models.skill import Skill
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "key, name, description, logo, tags"

# One prebuilt statement per updatable column; the column name never
# comes from request input.
_UPDATE_FIELD_SQL = {
    "name": f"UPDATE skills SET name = %s WHERE key = %s RETURNING {_COLUMNS};",
    "description": f"UPDATE skills SET description = %s WHERE key = %s RETURNING {_COLUMNS};",
    "logo": f"UPDATE skills SET logo = %s WHERE key = %s RETURNING {_COLUMNS};",
    "tags": f"UPDATE skills SET tags = %s WHERE key = %s RETURNING {_COLUMNS};",
}

UPDATABLE_FIELDS = tuple(_UPDATE_FIELD_SQL)


class SkillRepository:
    """Repository for CRUD operations on the skills table."""

    def __init__(self, database: Database):
        self.database = database

    # ── CREATE ────────────────────────────────────────────

    def create(self, skill: Skill) -> Optional[Skill]:
        """
        Insert a new skill unless its key is already taken.

        The existence check and the insert are one statement, so two
        concurrent creates for the same key cannot both succeed.

        Args:
            skill: The Skill domain object to persist.

        Returns:
            The same Skill, or None if a skill with that key already exists.
        """
        sql = f"""
            INSERT INTO skills ({_COLUMNS})
            VALUES (%s, %s, %s, %s, %s)
            ON CONFLICT (key) DO NOTHING
            RETURNING key;
        """
        conn = self.database.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    skill.key, skill.name, skill.description,
                    skill.logo, list(skill.tags),
                ))
                row = cur.fetchone()
            conn.commit()
            if row is None:
                return None
            logger.info(f"Created skill '{skill.key}'")
            return skill
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to create skill '{skill.key}': {e}")
            raise
        finally:
            self.database.release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def get(self, key: str) -> Optional[Skill]:
        """
        Fetch a single skill by key.

        Returns:
            A Skill object or None if not found.
        """
        sql = f"SELECT {_COLUMNS} FROM skills WHERE key = %s;"
        conn = self.database.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (key,))
                row = cur.fetchone()
                return self._row_to_skill(row) if row else None
        finally:
            self.database.release_connection(conn)

    def get_all(self) -> list[Skill]:
        """Fetch every skill, in whatever order the database returns them."""
        sql = f"SELECT {_COLUMNS} FROM skills;"
        conn = self.database.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_skill(r) for r in cur.fetchall()]
        finally:
            self.database.release_connection(conn)

    # ── UPDATE ────────────────────────────────────────────

    def replace(self, key: str, skill: Skill) -> Optional[Skill]:
        """
        Overwrite name, description, logo and tags of an existing skill.
        The key itself is never touched; `skill.key` is ignored.

        Returns:
            The stored Skill after the update, or None if no row matched.
        """
        sql = f"""
            UPDATE skills
            SET name = %s, description = %s, logo = %s, tags = %s
            WHERE key = %s
            RETURNING {_COLUMNS};
        """
        conn = self.database.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    skill.name, skill.description, skill.logo,
                    list(skill.tags), key,
                ))
                row = cur.fetchone()
            conn.commit()
            return self._row_to_skill(row) if row else None
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update skill '{key}': {e}")
            raise
        finally:
            self.database.release_connection(conn)

    def update_field(self, key: str, field: str, value) -> Optional[Skill]:
        """
        Update exactly one column of a skill.

        Args:
            key: Skill key.
            field: One of UPDATABLE_FIELDS.
            value: New value (a list of strings for 'tags').

        Returns:
            The full updated Skill, or None if no row matched.

        Raises:
            ValueError: If `field` is not updatable.
        """
        sql = _UPDATE_FIELD_SQL.get(field)
        if sql is None:
            raise ValueError(f"Unknown skill field: {field!r}")
        if field == "tags":
            value = list(value)

        conn = self.database.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (value, key))
                row = cur.fetchone()
            conn.commit()
            return self._row_to_skill(row) if row else None
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update {field} of skill '{key}': {e}")
            raise
        finally:
            self.database.release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, key: str) -> bool:
        """
        Delete a skill by key.

        Returns:
            True if a row was deleted, False otherwise.
        """
        sql = "DELETE FROM skills WHERE key = %s;"
        conn = self.database.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (key,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted skill '{key}'")
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete skill '{key}': {e}")
            raise
        finally:
            self.database.release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_skill(row: tuple) -> Skill:
        """Convert a database row tuple to a Skill domain object."""
        return Skill(
            key=row[0],
            name=row[1],
            description=row[2] or "",
            logo=row[3] or "",
            tags=list(row[4] or []),
        )
