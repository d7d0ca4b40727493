from __future__ import annotations

from typing import Any, Optional

from flask import jsonify, request


def json_body() -> dict:
    """Request JSON as a dict; missing or non-object bodies become ``{}``."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def success(data: Any = None, *, message: Optional[str] = None, status: int = 200, **extra: Any):
    payload: dict[str, Any] = {"status": "success"}
    if message is not None:
        payload["message"] = message
    if data is not None:
        payload["data"] = data
    payload.update(extra)
    return jsonify(payload), status


def error(message: str, *, status: int):
    return jsonify({"status": "error", "message": message}), status
