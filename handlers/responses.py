"""
handlers/responses.py
---------------------
Builders for the JSON envelope every endpoint answers with:

    {"status": "success", "data": ...}
    {"status": "success", "message": ...}
    {"status": "error", "message": ...}
"""

from typing import Any

from fastapi.responses import JSONResponse


def success(data: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "success", "data": data})


def success_message(message: str, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "success", "message": message})


def error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "message": message})
