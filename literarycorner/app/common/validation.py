from __future__ import annotations

from typing import Any, Dict, Mapping
from flask import request

from literarycorner.app.common.errors import abort_json


def get_json() -> Dict[str, Any]:
    if not request.is_json:
        abort_json(400, "invalid_json", "Request must be application/json")
    data = request.get_json(silent=True)
    if data is None or not isinstance(data, dict):
        abort_json(400, "invalid_json", "Malformed JSON body")
    return data


def raise_for_field_errors(errors: Mapping[str, str]) -> None:
    if errors:
        abort_json(400, "validation_error", "Please fix the errors in the form", {"fields": dict(errors)})
