"""Shared request and response helpers for the HTTP layer."""

from flask import current_app, jsonify, request
from logger import get_logger

logger = get_logger()


def get_services():
    """Get the services container the app was created with."""
    return current_app.config["SERVICES"]


def read_body() -> dict:
    """Return the JSON request body, or {} when it is missing or not JSON."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def store_failure(error: Exception):
    """Log a failed store call and build the {ok: false} reply.

    The reply keeps the default 200 status.
    """
    logger.error(f"Error: {error}")
    return jsonify({"ok": False, "message": str(error)})


def not_found(message: str):
    return jsonify({"message": message}), 404
