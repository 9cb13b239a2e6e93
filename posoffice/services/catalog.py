# posoffice/services/catalog.py
from __future__ import annotations

import math
import random
import string

from flask import current_app
from sqlalchemy import func, select, update

from posoffice.models import Product

ORDER_ID_PREFIX = "ORD-"
ORDER_ID_ALPHABET = string.ascii_uppercase + string.digits
ORDER_ID_LENGTH = 9
MAX_ORDER_ID_ATTEMPTS = 5

# Columns written by add/update; update overwrites all of them
PRODUCT_FIELDS = (
    "name",
    "description",
    "price",
    "image_url",
    "stock_quantity",
    "category",
    "supplier_id",
    "rating",
)


class OrderIdExhausted(RuntimeError):
    """Raised when no free ``ORD-`` reference was drawn within the retry budget."""


def generate_order_id(rng: random.Random | None = None) -> str:
    rng = rng or random
    return ORDER_ID_PREFIX + "".join(rng.choices(ORDER_ID_ALPHABET, k=ORDER_ID_LENGTH))


def _order_id_taken(session, order_id: str) -> bool:
    return session.execute(
        select(Product.id).where(Product.order_id == order_id).limit(1)
    ).first() is not None


def _unique_order_id(session, rng=None) -> str:
    for _ in range(MAX_ORDER_ID_ATTEMPTS):
        candidate = generate_order_id(rng)
        if not _order_id_taken(session, candidate):
            return candidate
        current_app.logger.warning("Order reference collision on %s, drawing again", candidate)
    raise OrderIdExhausted(f"no free order reference after {MAX_ORDER_ID_ATTEMPTS} attempts")


def serialize_product(p: Product) -> dict:
    return {
        "id": p.id,
        "name": p.name,
        "description": p.description,
        "price": float(p.price) if p.price is not None else None,
        "image_url": p.image_url,
        "stock_quantity": p.stock_quantity,
        "category": p.category,
        "supplier_id": p.supplier_id,
        "order_id": p.order_id,
        "rating": float(p.rating) if p.rating is not None else None,
        "deleted": bool(p.deleted),
    }


def list_products(session, page: int = 1, limit: int = 10) -> dict:
    """Page through products that are not soft-deleted."""
    page = max(int(page), 1)
    limit = max(int(limit), 1)
    offset = (page - 1) * limit

    total_items = session.execute(
        select(func.count(Product.id)).where(Product.deleted.is_(False))
    ).scalar_one()
    products = session.execute(
        select(Product)
        .where(Product.deleted.is_(False))
        .order_by(Product.id.asc())
        .limit(limit)
        .offset(offset)
    ).scalars().all()

    return {
        "products": [serialize_product(p) for p in products],
        "currentPage": page,
        "totalPages": math.ceil(total_items / limit),
        "totalItems": total_items,
    }


def add_product(session, fields: dict, rng: random.Random | None = None) -> Product:
    values = {k: fields.get(k) for k in PRODUCT_FIELDS}
    product = Product(**values, order_id=_unique_order_id(session, rng), deleted=False)
    session.add(product)
    session.commit()
    return product


def update_product(session, product_id: int, fields: dict) -> int:
    """Full overwrite of the editable columns. Returns the affected row count."""
    values = {k: fields.get(k) for k in PRODUCT_FIELDS}
    result = session.execute(
        update(Product).where(Product.id == product_id).values(**values)
    )
    session.commit()
    return result.rowcount


def soft_delete_product(session, product_id: int) -> int:
    # Idempotent, an already deleted row still matches
    result = session.execute(
        update(Product).where(Product.id == product_id).values(deleted=True)
    )
    session.commit()
    return result.rowcount
