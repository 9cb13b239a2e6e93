# posoffice/services/orders.py
from __future__ import annotations

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.orm import selectinload

from posoffice.models import Order
from posoffice.models.order import CANCELLED


def _items_summary(order: Order) -> str | None:
    """``"<name> (<qty>), ..."`` for the order's line items, None without items."""
    if not order.items:
        return None
    return ", ".join(f"{it.name} ({it.quantity})" for it in order.items)


def serialize_order(o: Order) -> dict:
    return {
        "id": o.id,
        "user_id": o.user_id,
        "order_date": o.order_date.isoformat() if o.order_date else None,
        "status": o.status,
        "total": float(o.total) if o.total is not None else 0.0,
        "in_sales_report": bool(o.in_sales_report),
        "ordered_products": _items_summary(o),
    }


def list_orders(session) -> list[dict]:
    orders = session.execute(
        select(Order)
        .options(selectinload(Order.items))
        .where(Order.in_sales_report.is_(True))
        .order_by(Order.id.asc())
    ).scalars().all()
    return [serialize_order(o) for o in orders]


def _update_order(session, order_id: int, **values) -> int:
    result = session.execute(update(Order).where(Order.id == order_id).values(**values))
    session.commit()
    return result.rowcount


def set_order_status(session, order_id: int, status: str) -> int:
    return _update_order(session, order_id, status=status)


def cancel_order(session, order_id: int) -> int:
    return set_order_status(session, order_id, CANCELLED)


def reschedule_order(session, order_id: int, order_date: datetime) -> int:
    return _update_order(session, order_id, order_date=order_date)


def remove_from_sales_report(session, order_id: int) -> int:
    return _update_order(session, order_id, in_sales_report=False)
