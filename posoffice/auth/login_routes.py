# posoffice/auth/login_routes.py
from flask import current_app, g, jsonify
from itsdangerous import BadData
from sqlalchemy.exc import SQLAlchemyError

from posoffice.api.utils.responses import PayloadError, json_body, json_error, store_failure
from posoffice.auth.tokens import bearer_token, issue_token, read_token, token_required
from posoffice.extensions import db
from posoffice.services import admin_account

INVALID_CREDENTIALS = "Invalid username or password"


def signin():
    try:
        data = json_body()
    except PayloadError as e:
        return json_error(str(e), 400)

    username = str(data.get("username") or "").strip()
    password = data.get("password") or ""
    current_app.logger.info("Signin attempt: username=%r", username)  # never log the password

    try:
        admin = admin_account.find_by_username(db.session, username) if username else None
    except SQLAlchemyError:
        return store_failure("An error occurred during signin")

    # Same answer for unknown user and wrong password
    if admin is None or not admin.check_password(password):
        current_app.logger.info("Signin rejected for username=%r", username)
        return json_error(INVALID_CREDENTIALS, 401)

    token = issue_token(admin.id)
    current_app.logger.info("Signin successful, token issued for admin #%s", admin.id)
    return jsonify({
        "success": True,
        "message": "Signin successful",
        "username": admin.username,
        "token": token,
    }), 200


def check_auth():
    anonymous = {"isAuthenticated": False, "usernamePasswordVerified": False}
    token = bearer_token()
    if not token:
        return jsonify(anonymous), 200
    try:
        _, expires_in = read_token(token)
    except BadData:
        return jsonify(anonymous), 200
    return jsonify({
        "isAuthenticated": True,
        "usernamePasswordVerified": True,
        "expiresIn": expires_in,
    }), 200


@token_required
def validate_pin():
    try:
        pin = json_body().get("pin")
    except PayloadError as e:
        return json_error(str(e), 400)

    try:
        admin = admin_account.get_admin(db.session, g.admin_id)
    except SQLAlchemyError:
        return store_failure("An error occurred while validating PIN")
    if admin is None:
        return json_error("Admin not found", 404)

    if pin is None or not admin.check_pin(str(pin)):
        return json_error("Invalid PIN", 401)
    return jsonify({"message": "PIN validated successfully"}), 200


def logout():
    resp = jsonify({"success": True, "message": "Logout successful"})
    resp.delete_cookie("token", path="/", httponly=True)
    return resp, 200
