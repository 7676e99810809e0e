from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from flask import g, jsonify, request


@dataclass
class ApiError(Exception):
    """Raise to return a consistent JSON error response."""

    status_code: int
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def to_dict(self, request_id: str | None = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details or {},
                "request_id": request_id,
            }
        }
        return payload


def abort_json(status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None) -> None:
    """Convenience wrapper."""
    raise ApiError(status_code=status_code, code=code, message=message, details=details)


def wants_json() -> bool:
    return request.path == "/api" or request.path.startswith("/api/")


def json_error(status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None):
    err = ApiError(status_code=status_code, code=code, message=message, details=details)
    return jsonify(err.to_dict(getattr(g, "request_id", None))), status_code
