"""Root conftest: Flask app on in-memory SQLite plus seeding helpers."""

from datetime import date, datetime

import pytest

from posoffice.app import create_app
from posoffice.auth import issue_token
from posoffice.config import TestConfig
from posoffice.extensions import db as _db
from posoffice.models import Admin, Order, OrderedProduct, Product, ProductRating
import posoffice.api.time_window as time_window

FROZEN_TODAY = date(2026, 3, 15)

@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def db(app):
    return _db

@pytest.fixture
def frozen_today(monkeypatch):
    """Pin the resolver's notion of 'today'."""
    monkeypatch.setattr(time_window, "local_today", lambda: FROZEN_TODAY)
    return FROZEN_TODAY


@pytest.fixture
def make_product(db):
    def _make(name="Widget", price=10, stock_quantity=5, rating=None, deleted=False, **kw):
        p = Product(
            name=name,
            price=price,
            stock_quantity=stock_quantity,
            rating=rating,
            deleted=deleted,
            **kw,
        )
        db.session.add(p)
        db.session.commit()
        return p
    return _make

@pytest.fixture
def make_order(db):
    def _make(user_id=1, total=0, status="Delivered", order_date=None, in_sales_report=True, items=()):
        o = Order(
            user_id=user_id,
            total=total,
            status=status,
            order_date=order_date or datetime.now(),
            in_sales_report=in_sales_report,
        )
        db.session.add(o)
        db.session.flush()
        for product, qty in items:
            db.session.add(OrderedProduct(
                order_id=o.id, product_id=product.id, name=product.name, quantity=qty,
            ))
        db.session.commit()
        return o
    return _make

@pytest.fixture
def make_rating(db):
    def _make(product, created_at, rating=5):
        r = ProductRating(product_id=product.id, rating=rating, created_at=created_at)
        db.session.add(r)
        db.session.commit()
        return r
    return _make

@pytest.fixture
def admin(db):
    a = Admin(id=1, full_name="Jane Doe", username="jane", role="manager")
    a.set_password("s3cret-pass")
    a.set_pin("1234")
    db.session.add(a)
    db.session.commit()
    return a

@pytest.fixture
def auth_headers(admin):
    return {"Authorization": f"Bearer {issue_token(admin.id)}"}
