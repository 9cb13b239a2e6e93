"""Product endpoints: pagination, add with generated reference, overwrite, soft delete."""

import random
import re

import pytest

from posoffice.models import Product
from posoffice.services import catalog

ORDER_ID_RE = re.compile(r"^ORD-[A-Z0-9]{9}$")


@pytest.fixture
def payload():
    return {
        "name": "Espresso beans",
        "description": "1kg bag",
        "price": "12.50",
        "image_url": "/img/beans.webp",
        "stock_quantity": 40,
        "category": "coffee",
        "supplier_id": 3,
        "rating": 4.5,
    }


def test_generate_order_id_shape():
    for _ in range(50):
        assert ORDER_ID_RE.match(catalog.generate_order_id())


def test_generate_order_id_is_repeatable_with_seeded_rng():
    assert catalog.generate_order_id(random.Random(7)) == catalog.generate_order_id(random.Random(7))


def test_add_product_returns_201_and_reference(client, db, payload):
    res = client.post("/api/products", json=payload)

    assert res.status_code == 201
    body = res.get_json()
    assert body["message"] == "Product added successfully"
    assert ORDER_ID_RE.match(body["order_id"])

    product = db.session.get(Product, body["id"])
    assert product.name == "Espresso beans"
    assert float(product.price) == 12.5
    assert product.order_id == body["order_id"]
    assert product.deleted is False


def test_add_product_draws_again_on_reference_collision(client, make_product, payload, monkeypatch):
    make_product(name="Existing", order_id="ORD-AAAAAAAAA")
    drawn = iter(["ORD-AAAAAAAAA", "ORD-BBBBBBBBB"])
    monkeypatch.setattr(catalog, "generate_order_id", lambda rng=None: next(drawn))

    res = client.post("/api/products", json=payload)

    assert res.status_code == 201
    assert res.get_json()["order_id"] == "ORD-BBBBBBBBB"


def test_add_product_gives_up_after_repeated_collisions(client, make_product, payload, monkeypatch):
    make_product(name="Existing", order_id="ORD-AAAAAAAAA")
    monkeypatch.setattr(catalog, "generate_order_id", lambda rng=None: "ORD-AAAAAAAAA")

    res = client.post("/api/products", json=payload)

    assert res.status_code == 500
    assert res.get_json() == {"error": "Error adding product"}


def test_add_product_validates_payload(client, payload):
    payload["price"] = "twelve"
    res = client.post("/api/products", json=payload)
    assert res.status_code == 400
    assert res.get_json() == {"error": "Invalid value for price"}

    res = client.post("/api/products", json={"price": 1})
    assert res.status_code == 400
    assert res.get_json() == {"error": "Product name is required"}


def test_add_product_rejects_non_finite_numbers(client, payload):
    for price in ("NaN", "Infinity", "-Infinity"):
        payload["price"] = price
        res = client.post("/api/products", json=payload)
        assert res.status_code == 400
        assert res.get_json() == {"error": "Invalid value for price"}

    payload["price"] = "5"
    payload["rating"] = "Infinity"
    res = client.post("/api/products", json=payload)
    assert res.status_code == 400
    assert res.get_json() == {"error": "Invalid value for rating"}


def test_update_product_rejects_nan_price(client, make_product, payload):
    p = make_product(name="Old")
    payload["price"] = "NaN"
    res = client.put(f"/api/products/{p.id}", json=payload)
    assert res.status_code == 400


def test_list_products_paginates_and_hides_deleted(client, make_product):
    for i in range(5):
        make_product(name=f"P{i}")
    make_product(name="Gone", deleted=True)

    body = client.get("/api/products?page=2&limit=2").get_json()

    assert body["currentPage"] == 2
    assert body["totalItems"] == 5
    assert body["totalPages"] == 3
    assert [p["name"] for p in body["products"]] == ["P2", "P3"]


def test_list_products_rejects_bad_paging(client):
    assert client.get("/api/products?page=abc").status_code == 400
    assert client.get("/api/products?limit=0").status_code == 400


def test_update_product_overwrites_every_column(client, db, make_product, payload):
    p = make_product(name="Old", price=1, stock_quantity=1, rating=2.0, description="old text")
    payload.pop("description")

    res = client.put(f"/api/products/{p.id}", json=payload)

    assert res.status_code == 200
    assert res.get_json() == {"message": "Product updated successfully"}
    db.session.expire_all()
    updated = db.session.get(Product, p.id)
    assert updated.name == "Espresso beans"
    assert updated.description is None
    assert updated.stock_quantity == 40


def test_update_missing_product_returns_404(client, payload):
    res = client.put("/api/products/999", json=payload)
    assert res.status_code == 404
    assert res.get_json() == {"error": "Product not found"}


def test_delete_is_soft_and_idempotent(client, db, make_product):
    p = make_product(name="Temp")

    first = client.delete(f"/api/products/{p.id}")
    second = client.delete(f"/api/products/{p.id}")

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.get_json() == {"message": "Product marked as deleted successfully"}
    db.session.expire_all()
    row = db.session.get(Product, p.id)
    assert row is not None
    assert row.deleted is True


def test_delete_missing_product_returns_404(client):
    res = client.delete("/api/products/12345")
    assert res.status_code == 404
    assert res.get_json() == {"error": "Product not found"}
