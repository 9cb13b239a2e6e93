# posoffice/api/routes/admin_routes.py
from flask import current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from posoffice.api.utils.responses import PayloadError, json_body, json_error, store_failure
from posoffice.auth import token_required
from posoffice.extensions import db
from posoffice.services import admin_account


def admin_name():
    try:
        admin = admin_account.first_admin(db.session)
    except SQLAlchemyError:
        return store_failure("An error occurred while fetching admin name")
    if admin is None:
        return json_error("Admin not found", 404)
    return jsonify({"fullName": admin.full_name}), 200


@token_required
def admin_data():
    try:
        admin = admin_account.first_admin(db.session)
    except SQLAlchemyError:
        return store_failure("An error occurred while fetching admin data")
    if admin is None:
        return json_error("Admin not found", 404)
    mask_length = current_app.config.get("SECRET_MASK_LENGTH", 8)
    return jsonify(admin_account.masked_admin_data(admin, mask_length)), 200


@token_required
def update_admin():
    try:
        data = json_body()
    except PayloadError as e:
        return json_error(str(e), 400)

    full_name = str(data.get("full_name") or "").strip()
    username = str(data.get("username") or "").strip()
    role = str(data.get("role") or "").strip()
    if not (full_name and username and role):
        return json_error("full_name, username and role are required", 400)

    password = data.get("password") or None
    pin = data.get("pin")
    pin = str(pin).strip() if pin not in (None, "") else None

    try:
        affected = admin_account.update_admin(
            db.session,
            full_name=full_name,
            username=username,
            role=role,
            password=password,
            pin=pin,
        )
    except SQLAlchemyError:
        return store_failure("An error occurred while updating admin data")

    if affected == 0:
        return json_error("Admin not found", 404)
    current_app.logger.info(
        "Admin data updated (password=%s, pin=%s)", bool(password), bool(pin)
    )
    return jsonify({"message": "Admin data updated successfully"}), 200
