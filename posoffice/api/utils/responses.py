# posoffice/api/utils/responses.py
from decimal import Decimal, InvalidOperation

from flask import current_app, jsonify, request

from posoffice.extensions import db


class PayloadError(ValueError):
    """Request body/query could not be turned into valid values (-> 400)."""


def json_error(message: str, status: int):
    return jsonify({"error": message}), status


def store_failure(message: str):
    """Roll back, log with traceback and answer a generic 500."""
    db.session.rollback()
    current_app.logger.exception("%s %s failed", request.method, request.path)
    return json_error(message, 500)


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise PayloadError("Request body must be a JSON object")
    return data


def to_decimal(val, field: str) -> Decimal | None:
    if val in (None, ""):
        return None
    try:
        d = Decimal(str(val))
    except (InvalidOperation, ValueError):
        raise PayloadError(f"Invalid value for {field}")
    # NaN/Infinity cannot be compared or serialized
    if not d.is_finite():
        raise PayloadError(f"Invalid value for {field}")
    return d


def to_int(val, field: str) -> int | None:
    if val in (None, ""):
        return None
    try:
        return int(val)
    except (TypeError, ValueError):
        raise PayloadError(f"Invalid value for {field}")
