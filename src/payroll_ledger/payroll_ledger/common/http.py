from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request, session

from ..core.exceptions import (
    DomainError,
    DuplicatePeriodError,
    NotFoundError,
    PartialCommitError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def company_required(view):
    """Inject ``company_id`` from the session populated by the login flow."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        company_id = session.get("company_id")
        if not company_id:
            return jsonify({"error": "Unauthorized"}), 401
        return view(int(company_id), *args, **kwargs)

    return wrapper


def error_response(exc: DomainError):
    if isinstance(exc, ValidationError):
        return jsonify({"error": str(exc)}), 400
    if isinstance(exc, NotFoundError):
        return jsonify({"error": str(exc)}), 404
    if isinstance(exc, DuplicatePeriodError):
        return jsonify({"error": str(exc), "duplicate": True}), 409
    if isinstance(exc, PartialCommitError):
        return jsonify({
            "error": str(exc),
            "succeeded": [c.to_dict() for c in exc.succeeded],
            "failed": [f.to_dict() for f in exc.failed],
        }), 207
    if isinstance(exc, StorageError):
        return jsonify({"error": "Something went wrong, please try again"}), 500
    logger.error("Unmapped domain error: %r", exc)
    return jsonify({"error": "Something went wrong, please try again"}), 500


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("JSON body is required")
    return data
