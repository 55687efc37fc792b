"""
db/init_db.py
-------------
Creates the database schema if it does not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

import psycopg2

from db.connection import Database, StorageInitError
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Skills table: one row per skill, addressed by its client-supplied key
CREATE TABLE IF NOT EXISTS skills (
    key             VARCHAR(100) PRIMARY KEY,
    name            VARCHAR(100) NOT NULL,
    description     TEXT,
    logo            TEXT,
    tags            TEXT[]
);
"""


def create_tables(database: Database) -> None:
    """
    Execute the schema SQL to create the skills table.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = database.get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        database.release_connection(conn)


def init_storage(dsn: str, min_conn: int = 1, max_conn: int = 10) -> Database:
    """
    Open the pool, verify connectivity and ensure the schema exists.

    Returns:
        An opened Database ready to hand to repositories.

    Raises:
        StorageInitError: If the DSN is empty or any step fails. The pool
            is closed again before raising.
    """
    if not dsn:
        raise StorageInitError("POSTGRES_URI environment variable is not set")

    database = Database(dsn, min_conn, max_conn)
    try:
        database.open()
        create_tables(database)
    except psycopg2.Error as e:
        database.close()
        raise StorageInitError(f"Failed to initialize storage: {e}") from e

    logger.info("Successfully connected to the database!")
    return database


if __name__ == "__main__":
    from config import DB_POOL_MAX, DB_POOL_MIN, POSTGRES_URI

    db = init_storage(POSTGRES_URI, DB_POOL_MIN, DB_POOL_MAX)
    db.close()
    print("✅ Database schema created successfully.")
