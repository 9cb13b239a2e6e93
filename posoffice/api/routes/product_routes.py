# posoffice/api/routes/product_routes.py
from flask import current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from posoffice.api.utils.responses import (
    PayloadError,
    json_body,
    json_error,
    store_failure,
    to_decimal,
    to_int,
)
from posoffice.extensions import db
from posoffice.services import catalog


def _product_fields(data: dict) -> dict:
    """Validate and coerce a product payload (all editable columns)."""
    name = str(data.get("name") or "").strip()
    if not name:
        raise PayloadError("Product name is required")

    price = to_decimal(data.get("price"), "price")
    if price is None:
        raise PayloadError("Product price is required")
    if price < 0:
        raise PayloadError("Invalid value for price")

    stock = to_int(data.get("stock_quantity"), "stock_quantity")
    if stock is not None and stock < 0:
        raise PayloadError("Invalid value for stock_quantity")

    return {
        "name": name,
        "description": data.get("description"),
        "price": price,
        "image_url": data.get("image_url"),
        "stock_quantity": stock or 0,
        "category": data.get("category"),
        "supplier_id": to_int(data.get("supplier_id"), "supplier_id"),
        "rating": to_decimal(data.get("rating"), "rating"),
    }


def list_products():
    try:
        page = int(request.args.get("page", 1))
        limit = int(request.args.get("limit", current_app.config.get("PRODUCTS_PAGE_SIZE", 10)))
    except ValueError:
        return json_error("page and limit must be integers", 400)
    if page < 1 or limit < 1:
        return json_error("page and limit must be positive", 400)

    try:
        result = catalog.list_products(db.session, page=page, limit=limit)
    except SQLAlchemyError:
        return store_failure("Error fetching products")
    return jsonify(result), 200


def add_product():
    try:
        fields = _product_fields(json_body())
    except PayloadError as e:
        return json_error(str(e), 400)

    try:
        product = catalog.add_product(db.session, fields)
    except (SQLAlchemyError, catalog.OrderIdExhausted):
        return store_failure("Error adding product")

    current_app.logger.info("Product #%s added with reference %s", product.id, product.order_id)
    return jsonify({
        "message": "Product added successfully",
        "id": product.id,
        "order_id": product.order_id,
    }), 201


def update_product(product_id: int):
    try:
        fields = _product_fields(json_body())
    except PayloadError as e:
        return json_error(str(e), 400)

    try:
        affected = catalog.update_product(db.session, product_id, fields)
    except SQLAlchemyError:
        return store_failure("Error updating product")

    if affected == 0:
        return json_error("Product not found", 404)
    return jsonify({"message": "Product updated successfully"}), 200


def delete_product(product_id: int):
    try:
        affected = catalog.soft_delete_product(db.session, product_id)
    except SQLAlchemyError:
        return store_failure("Error marking product as deleted")

    if affected == 0:
        return json_error("Product not found", 404)
    return jsonify({"message": "Product marked as deleted successfully"}), 200
