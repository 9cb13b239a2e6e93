# posoffice/api/routes/order_routes.py
from datetime import datetime

from flask import current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from posoffice.api.utils.responses import PayloadError, json_body, json_error, store_failure
from posoffice.extensions import db
from posoffice.models import ORDER_STATUSES
from posoffice.services import orders


def _parse_order_date(value) -> datetime:
    """Accepts ``YYYY-MM-DD`` or a full ISO timestamp."""
    s = str(value or "").strip()
    if not s:
        raise PayloadError("order_date is required")
    try:
        parsed = datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError:
        raise PayloadError("Invalid value for order_date")
    # stored as naive local time
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def list_orders():
    try:
        rows = orders.list_orders(db.session)
    except SQLAlchemyError:
        return store_failure("An error occurred while fetching orders")
    return jsonify(rows), 200


def update_order_status(order_id: int):
    try:
        status = json_body().get("status")
    except PayloadError as e:
        return json_error(str(e), 400)
    if status not in ORDER_STATUSES:
        return json_error("Invalid order status", 400)

    current_app.logger.info("Updating order status: %s -> %s", order_id, status)
    try:
        affected = orders.set_order_status(db.session, order_id, status)
    except SQLAlchemyError:
        return store_failure("Error updating order status")

    if affected == 0:
        return json_error("Order not found", 404)
    return jsonify({"message": "Order status updated successfully", "status": status}), 200


def cancel_order(order_id: int):
    try:
        affected = orders.cancel_order(db.session, order_id)
    except SQLAlchemyError:
        return store_failure("Error cancelling order")

    if affected == 0:
        return json_error("Order not found", 404)
    return jsonify({"message": "Order cancelled successfully"}), 200


def reschedule_order(order_id: int):
    try:
        order_date = _parse_order_date(json_body().get("order_date"))
    except PayloadError as e:
        return json_error(str(e), 400)

    try:
        affected = orders.reschedule_order(db.session, order_id, order_date)
    except SQLAlchemyError:
        return store_failure("Error updating order date")

    if affected == 0:
        return json_error("Order not found", 404)
    return jsonify({"message": "Order date updated successfully"}), 200


def remove_from_sales_report(order_id: int):
    try:
        affected = orders.remove_from_sales_report(db.session, order_id)
    except SQLAlchemyError:
        return store_failure("Error removing order from sales report")

    if affected == 0:
        return json_error("Order not found", 404)
    return jsonify({"message": "Order removed from sales report successfully"}), 200
