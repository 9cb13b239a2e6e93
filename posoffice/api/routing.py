# posoffice/api/routing.py
"""
The API route table.

Every endpoint is listed here once as ``(method, rule, view)``; the table is
registered on the ``api`` blueprint at start-up and Flask's URL map does the
static matching. A path that matches no rule answers 404, a known path with
another method answers 405 (see ``posoffice.app``).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from flask import Blueprint, jsonify

from posoffice.api.routes import admin_routes, order_routes, product_routes, stats_routes
from posoffice.auth import login_routes


@dataclass(frozen=True)
class Route:
    method: str
    rule: str
    view: Callable

    @property
    def endpoint(self) -> str:
        return f"{self.view.__name__}_{self.method.lower()}"


def ping():
    return jsonify({"message": "Test route working"}), 200


ROUTES: tuple[Route, ...] = (
    Route("GET", "/test", ping),
    Route("GET", "/admin-name", admin_routes.admin_name),
    # GET
    Route("GET", "/check-auth", login_routes.check_auth),
    Route("GET", "/products", product_routes.list_products),
    Route("GET", "/total-stock", stats_routes.total_stock),
    Route("GET", "/sales-report", stats_routes.sales_report),
    Route("GET", "/sales-data", stats_routes.sales_data),
    Route("GET", "/total-products", stats_routes.total_products),
    Route("GET", "/top-products", stats_routes.top_products),
    Route("GET", "/rated-products-count", stats_routes.rated_products_count),
    Route("GET", "/logout", login_routes.logout),
    Route("GET", "/orders", order_routes.list_orders),
    Route("GET", "/admin-data", admin_routes.admin_data),
    # POST
    Route("POST", "/signin", login_routes.signin),
    Route("POST", "/validate-pin", login_routes.validate_pin),
    Route("POST", "/products", product_routes.add_product),
    # PUT
    Route("PUT", "/products/<int:product_id>", product_routes.update_product),
    Route("PUT", "/orders/<int:order_id>/status", order_routes.update_order_status),
    Route("PUT", "/orders/<int:order_id>/cancel", order_routes.cancel_order),
    Route("PUT", "/orders/<int:order_id>", order_routes.reschedule_order),
    Route("PUT", "/update-admin", admin_routes.update_admin),
    # DELETE
    Route("DELETE", "/products/<int:product_id>", product_routes.delete_product),
    Route("DELETE", "/orders/<int:order_id>/salesreport", order_routes.remove_from_sales_report),
)


def build_api_blueprint(routes: tuple[Route, ...] = ROUTES) -> Blueprint:
    bp = Blueprint("api", __name__, url_prefix="/api")
    for route in routes:
        bp.add_url_rule(
            route.rule,
            endpoint=route.endpoint,
            view_func=route.view,
            methods=[route.method],
        )
    return bp
