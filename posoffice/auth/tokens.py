# posoffice/auth/tokens.py
"""
Signed bearer tokens for the admin.

Tokens are itsdangerous timed signatures over ``{"userId": <admin id>}``;
validity is checked against ``AUTH_TOKEN_MAX_AGE`` (6 hours by default).
"""
from __future__ import annotations

import time
from functools import wraps

from flask import current_app, g, jsonify, request
from itsdangerous import BadData, BadSignature, SignatureExpired, URLSafeTimedSerializer


def _get_serializer() -> URLSafeTimedSerializer:
    secret = current_app.config.get("SECRET_KEY")
    if not secret:
        raise RuntimeError("SECRET_KEY is not set, cannot sign auth tokens.")
    salt = current_app.config.get("AUTH_TOKEN_SALT", "pos-admin-token")
    return URLSafeTimedSerializer(secret_key=secret, salt=salt)


def _max_age() -> int:
    return int(current_app.config.get("AUTH_TOKEN_MAX_AGE", 6 * 60 * 60))


def issue_token(admin_id: int) -> str:
    return _get_serializer().dumps({"userId": int(admin_id)})


def read_token(token: str) -> tuple[int, int]:
    """
    Verify signature and age. Returns ``(admin_id, seconds_left)``.
    Raises ``SignatureExpired`` or another ``BadData`` on a bad token.
    """
    max_age = _max_age()
    data, issued_at = _get_serializer().loads(token, max_age=max_age, return_timestamp=True)
    try:
        admin_id = int(data["userId"])
    except (KeyError, TypeError, ValueError):
        raise BadSignature("token payload has no admin id")
    expires_in = int(issued_at.timestamp() + max_age - time.time())
    return admin_id, max(expires_in, 0)


def bearer_token() -> str | None:
    """Token part of ``Authorization: Bearer <token>``."""
    header = request.headers.get("Authorization") or ""
    _, _, token = header.strip().partition(" ")
    return token.strip() or None


def token_required(view):
    """Reject the request with 401 unless it carries a valid bearer token."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        token = bearer_token()
        if not token:
            return jsonify({"error": "No token provided"}), 401
        try:
            g.admin_id, g.token_expires_in = read_token(token)
        except SignatureExpired:
            current_app.logger.info("Rejected expired token on %s", request.path)
            return jsonify({"error": "Invalid or expired token"}), 401
        except BadData:
            current_app.logger.info("Rejected invalid token on %s", request.path)
            return jsonify({"error": "Invalid or expired token"}), 401
        return view(*args, **kwargs)

    return wrapper
