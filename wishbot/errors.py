"""Errors that carry a status code and the place where they were created."""

from __future__ import annotations

import inspect


class Errornate(Exception):
    """An error with a status code and the file and line that produced it."""

    def __init__(self, code: int, message: str, file: str = "unknown", line: int = 0) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.file = file
        self.line = line

    def __str__(self) -> str:
        return f"{self.file}:{self.line}: {self.message}"


def _errornate(code: int, message: str) -> Errornate:
    frame = inspect.currentframe()
    try:
        builder = frame.f_back if frame is not None else None
        caller = builder.f_back if builder is not None else None
        if caller is None:
            return Errornate(code, message)
        return Errornate(code, message, caller.f_code.co_filename, caller.f_lineno)
    finally:
        del frame


def err_bad_request(msg: str) -> Errornate:
    """Build a 400 error located at the caller."""
    return _errornate(400, "bad request: " + msg)


def err_not_found(msg: str) -> Errornate:
    """Build a 404 error located at the caller."""
    return _errornate(404, "not found: " + msg)


def err_forbidden(msg: str) -> Errornate:
    """Build a 403 error located at the caller."""
    return _errornate(403, "forbidden: " + msg)


def err_internal_server_error(msg: str) -> Errornate:
    """Build a 500 error located at the caller."""
    return _errornate(500, "internal server error: " + msg)


def err_unauthorized(msg: str) -> Errornate:
    """Build a 401 error located at the caller."""
    return _errornate(401, "unauthorized: " + msg)


def custom_error(message: str) -> Errornate:
    """Build an error with code 999 and the message unchanged."""
    return _errornate(999, message)


def err_conflict(msg: str) -> Errornate:
    """Build a 409 error located at the caller."""
    return _errornate(409, "unique constraint violation: " + msg)