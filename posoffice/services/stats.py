# posoffice/services/stats.py
"""
Dashboard aggregates.

Every function takes the SQLAlchemy session it should run on and returns
plain dicts/lists ready for ``jsonify``. Aggregates coalesce to zero so an
empty window never serializes as ``null``.
"""
from __future__ import annotations

from sqlalchemy import bindparam, text

from posoffice.api.time_window import LAST_MONTH, LAST_WEEK, TimeWindow
from posoffice.models.order import DELIVERED, ORDER_STATUSES

# Order counts over a range include every status (cancelled too), single
# days only count delivered orders.
RANGE_ORDER_COUNT_STATUSES = ORDER_STATUSES
DAY_ORDER_COUNT_STATUSES = (DELIVERED,)


def _to_float(v) -> float:
    return float(v) if v is not None else 0.0


def _to_int(v) -> int:
    return int(v) if v is not None else 0


def order_count_statuses(window: TimeWindow) -> tuple[str, ...]:
    if window.token in (LAST_WEEK, LAST_MONTH):
        return RANGE_ORDER_COUNT_STATUSES
    return DAY_ORDER_COUNT_STATUSES


def period_sales(session, window: TimeWindow) -> float:
    cond, params = window.predicate("order_date")
    row = session.execute(
        text(
            f"""
            SELECT COALESCE(SUM(total), 0) AS period_sales
            FROM orders
            WHERE {cond} AND status = :status
            """
        ),
        {**params, "status": DELIVERED},
    ).one()
    return round(_to_float(row.period_sales), 2)


def order_count(session, window: TimeWindow) -> int:
    cond, params = window.predicate("order_date")
    stmt = text(
        f"""
        SELECT COUNT(*) AS total_orders
        FROM orders
        WHERE {cond} AND status IN :statuses
        """
    ).bindparams(bindparam("statuses", expanding=True))
    row = session.execute(
        stmt, {**params, "statuses": list(order_count_statuses(window))}
    ).one()
    return _to_int(row.total_orders)


def customer_count(session, window: TimeWindow) -> int:
    cond, params = window.predicate("order_date")
    row = session.execute(
        text(
            f"""
            SELECT COUNT(DISTINCT user_id) AS total_customers
            FROM orders
            WHERE {cond}
            """
        ),
        params,
    ).one()
    return _to_int(row.total_customers)


def sales_data(session, window: TimeWindow) -> dict:
    return {
        "periodSales": period_sales(session, window),
        "totalOrders": order_count(session, window),
        "totalCustomers": customer_count(session, window),
    }


def top_products(session, limit: int = 5) -> list[dict]:
    """Best sellers; products without sales still rank through their rating."""
    rows = session.execute(
        text(
            """
            SELECT
              p.id,
              p.name,
              p.image_url,
              p.rating,
              COALESCE(SUM(op.quantity), 0) AS sold
            FROM products p
            LEFT JOIN ordered_products op ON p.id = op.product_id
            GROUP BY p.id, p.name, p.image_url, p.rating
            ORDER BY sold DESC, p.rating DESC
            LIMIT :limit
            """
        ),
        {"limit": int(limit)},
    ).fetchall()
    return [
        {
            "id": r.id,
            "name": r.name,
            "image_url": r.image_url,
            "rating": float(r.rating) if r.rating is not None else None,
            "sold": _to_int(r.sold),
        }
        for r in rows
    ]


def rated_products_count(session, window: TimeWindow) -> int:
    cond, params = window.predicate("created_at")
    row = session.execute(
        text(
            f"""
            SELECT COUNT(DISTINCT product_id) AS rated_products
            FROM product_ratings
            WHERE {cond}
            """
        ),
        params,
    ).one()
    return _to_int(row.rated_products)


def total_stock(session) -> int:
    row = session.execute(
        text("SELECT COALESCE(SUM(stock_quantity), 0) AS total_stock FROM products")
    ).one()
    return _to_int(row.total_stock)


def total_products(session) -> int:
    row = session.execute(text("SELECT COUNT(*) AS total_products FROM products")).one()
    return _to_int(row.total_products)


def sales_report(session) -> dict:
    """Delivered orders that are still visible in reporting."""
    params = {"visible": True, "status": DELIVERED}
    rows = session.execute(
        text(
            """
            SELECT id, user_id, order_date, status, total
            FROM orders
            WHERE in_sales_report = :visible AND status = :status
            ORDER BY order_date DESC, id DESC
            """
        ),
        params,
    ).fetchall()
    total = session.execute(
        text(
            """
            SELECT COALESCE(SUM(total), 0) AS total_sales
            FROM orders
            WHERE in_sales_report = :visible AND status = :status
            """
        ),
        params,
    ).one()
    return {
        "orders": [
            {
                "id": r.id,
                "user_id": r.user_id,
                "order_date": _iso(r.order_date),
                "status": r.status,
                "total": _to_float(r.total),
            }
            for r in rows
        ],
        "count": len(rows),
        "totalSales": round(_to_float(total.total_sales), 2),
    }


def _iso(value):
    # SQLite hands back strings for raw SELECTs, server databases datetimes
    if value is None:
        return None
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)
