"""
handlers/health_handler.py
---------------------------
Liveness endpoint backed by the same database check used at startup.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from handlers.responses import error, success


def health(request: Request) -> JSONResponse:
    """Ping the database; storage errors surface as a 500 envelope."""
    database = request.app.state.database
    if database is None:
        return error("Database not configured", 503)
    database.ping()
    return success({"database": "ok"})
