# posoffice/api/routes/stats_routes.py
from flask import current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from posoffice.api.time_window import resolve_time_window
from posoffice.api.utils.responses import store_failure
from posoffice.extensions import db
from posoffice.services import stats


def sales_data():
    window = resolve_time_window(request.args.get("timeFrame"))
    try:
        result = stats.sales_data(db.session, window)
    except SQLAlchemyError:
        return store_failure("Error fetching sales data")
    return jsonify(result), 200


def rated_products_count():
    window = resolve_time_window(request.args.get("timeFrame"))
    try:
        count = stats.rated_products_count(db.session, window)
    except SQLAlchemyError:
        return store_failure("Error fetching rated products count")
    return jsonify({"ratedProductsCount": count}), 200


def top_products():
    limit = current_app.config.get("TOP_PRODUCTS_LIMIT", 5)
    try:
        rows = stats.top_products(db.session, limit=limit)
    except SQLAlchemyError:
        return store_failure("Error fetching top products")
    return jsonify(rows), 200


def total_products():
    try:
        count = stats.total_products(db.session)
    except SQLAlchemyError:
        return store_failure("Error fetching total products")
    return jsonify({"totalProducts": count}), 200


def total_stock():
    try:
        total = stats.total_stock(db.session)
    except SQLAlchemyError:
        return store_failure("Error fetching total stock")
    return jsonify({"totalStock": total}), 200


def sales_report():
    try:
        report = stats.sales_report(db.session)
    except SQLAlchemyError:
        return store_failure("An error occurred while fetching sales report data")
    return jsonify(report), 200
