"""
main.py
-------
Entry point for the Skills API.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Build the FastAPI application with all routes.
    - Serve HTTP until SIGINT/SIGTERM, then shut down gracefully.
"""

import contextlib
import signal
import sys
import threading

import uvicorn
from uvicorn.server import HANDLED_SIGNALS

from app import create_app
from config import (
    DB_POOL_MAX,
    DB_POOL_MIN,
    HOST,
    PORT,
    POSTGRES_URI,
    SHUTDOWN_GRACE_SECONDS,
)
from db.connection import StorageInitError
from db.init_db import init_storage
from repositories.skill_repo import SkillRepository
from services.skill_service import SkillService
from utils.logger import get_logger, route_uvicorn_logs

logger = get_logger(__name__)


def _parse_port(raw: str) -> int | None:
    """Return the port as an int, or None if it is missing or not a number."""
    try:
        port = int(raw)
    except (TypeError, ValueError):
        return None
    return port if 0 < port < 65536 else None


class GracefulServer(uvicorn.Server):
    """
    uvicorn server that treats SIGINT/SIGTERM as a request to stop.

    Stock uvicorn re-raises a captured signal once it has drained, which
    kills the process (SIGTERM) or raises KeyboardInterrupt (SIGINT)
    before main() can close the pool. Here the signal only triggers the
    graceful shutdown and `run()` returns normally.
    """

    @contextlib.contextmanager
    def capture_signals(self):
        # Signals can only be installed from the main thread.
        if threading.current_thread() is not threading.main_thread():
            yield
            return
        original_handlers = {sig: signal.signal(sig, self.handle_exit) for sig in HANDLED_SIGNALS}
        try:
            yield
        finally:
            for sig, handler in original_handlers.items():
                signal.signal(sig, handler)
        for sig in self._captured_signals:
            logger.info(f"Stopped on {signal.Signals(sig).name}")


def build_server(app, host: str, port: int) -> GracefulServer:
    """
    Configure uvicorn. On SIGINT/SIGTERM it stops accepting connections,
    gives in-flight requests SHUTDOWN_GRACE_SECONDS to finish, then
    force-closes whatever is left.
    """
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_config=None,
        timeout_graceful_shutdown=SHUTDOWN_GRACE_SECONDS,
    )
    return GracefulServer(config)


def main() -> int:
    """Initialize and run the API. Returns the process exit code."""

    # ── 1. Configuration ──────────────────────────────────
    port = _parse_port(PORT)
    if port is None:
        logger.error(f"PORT environment variable is missing or invalid: {PORT!r}")
        return 1

    # ── 2. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    try:
        database = init_storage(POSTGRES_URI, DB_POOL_MIN, DB_POOL_MAX)
    except StorageInitError as e:
        logger.error(str(e))
        return 1

    # ── 3. Build the application ──────────────────────────
    service = SkillService(SkillRepository(database))
    app = create_app(service, database)

    # ── 4. Serve until a termination signal ───────────────
    route_uvicorn_logs()
    server = build_server(app, HOST, port)
    logger.info(f"Listening on {HOST}:{port}")
    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Interrupted before the server finished starting")
    except Exception as e:
        logger.error(f"Server error: {e}")
    finally:
        # ── 5. Cleanup on shutdown ────────────────────────
        database.close()

    logger.info("Server gracefully stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
