"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool because request handlers run
on a worker thread pool and share a single pool.
"""

import threading

import psycopg2
from psycopg2 import pool

from utils.logger import get_logger

logger = get_logger(__name__)


class StorageInitError(RuntimeError):
    """Raised when the storage layer cannot be brought up at startup."""


class Database:
    """
    Handle around a PostgreSQL connection pool.

    A single instance is created at startup and passed explicitly to
    every repository that needs it. ThreadedConnectionPool raises
    PoolError when every connection is checked out, so callers first
    take a slot from a semaphore sized to the pool and wait there
    instead.
    """

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 10):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self._pool: pool.ThreadedConnectionPool | None = None
        self._slots = threading.BoundedSemaphore(max_conn)

    def open(self) -> None:
        """
        Create the pool and verify that the database answers.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.ThreadedConnectionPool(self.min_conn, self.max_conn, self.dsn)
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise
        logger.info("Database connection pool initialized successfully.")
        self.ping()

    def ping(self) -> None:
        """Run a trivial query; raises the driver error if it fails."""
        conn = self.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute("SELECT 1;")
                cur.fetchone()
            conn.rollback()
        finally:
            self.release_connection(conn)

    def get_connection(self):
        """
        Get a connection from the pool, blocking until one is free.

        Returns:
            A psycopg2 connection object.

        Raises:
            RuntimeError: If the pool has not been opened.
        """
        if self._pool is None:
            raise RuntimeError("Database pool not initialized. Call open() first.")
        self._slots.acquire()
        try:
            return self._pool.getconn()
        except Exception:
            self._slots.release()
            raise

    def release_connection(self, conn) -> None:
        """Return a connection back to the pool."""
        if self._pool is None:
            return
        try:
            self._pool.putconn(conn)
        finally:
            self._slots.release()

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")
