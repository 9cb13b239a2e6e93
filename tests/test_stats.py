"""Dashboard statistics endpoints: window filters, status asymmetry, top products."""

from datetime import datetime, timedelta

from posoffice.api.time_window import resolve_time_window
from posoffice.services import stats


def _at(day, hour=12):
    return datetime(day.year, day.month, day.day, hour, 0)


def test_sales_data_today_counts_delivered_only(client, frozen_today, make_order):
    make_order(user_id=1, total=100.50, status="Delivered", order_date=_at(frozen_today, 9))
    make_order(user_id=2, total=49.50, status="Delivered", order_date=_at(frozen_today, 15))
    make_order(user_id=2, total=30, status="Cancelled", order_date=_at(frozen_today, 16))

    res = client.get("/api/sales-data?timeFrame=today")

    assert res.status_code == 200
    assert res.get_json() == {"periodSales": 150.0, "totalOrders": 2, "totalCustomers": 2}


def test_sales_data_empty_window_coalesces_to_zero(client, frozen_today):
    res = client.get("/api/sales-data?timeFrame=yesterday")
    assert res.get_json() == {"periodSales": 0.0, "totalOrders": 0, "totalCustomers": 0}


def test_sales_data_last_week_counts_every_status(client, frozen_today, make_order):
    three_days_ago = frozen_today - timedelta(days=3)
    make_order(user_id=1, total=20, status="Delivered", order_date=_at(three_days_ago))
    make_order(user_id=2, total=15, status="Cancelled", order_date=_at(three_days_ago))
    make_order(user_id=3, total=99, status="Shipped", order_date=_at(three_days_ago))
    # today is outside the lastWeek window
    make_order(user_id=4, total=500, status="Delivered", order_date=_at(frozen_today))

    data = client.get("/api/sales-data?timeFrame=lastWeek").get_json()

    assert data["periodSales"] == 20.0
    assert data["totalOrders"] == 3
    assert data["totalCustomers"] == 3


def test_order_count_status_filter_differs_by_window(app, db, frozen_today, make_order):
    day = frozen_today - timedelta(days=1)
    make_order(status="Delivered", order_date=_at(day))
    make_order(status="Cancelled", order_date=_at(day))

    yesterday = resolve_time_window("yesterday", today=frozen_today)
    last_week = resolve_time_window("lastWeek", today=frozen_today)
    last_month = resolve_time_window("lastMonth", today=frozen_today)

    assert stats.order_count_statuses(yesterday) == ("Delivered",)
    assert "Cancelled" in stats.order_count_statuses(last_week)
    assert stats.order_count(db.session, yesterday) == 1
    assert stats.order_count(db.session, last_week) == 2
    assert "Cancelled" in stats.order_count_statuses(last_month)
    assert stats.order_count(db.session, last_month) == 2


def test_unknown_time_frame_behaves_like_today(client, frozen_today, make_order):
    make_order(total=10, status="Delivered", order_date=_at(frozen_today))
    make_order(total=10, status="Delivered", order_date=_at(frozen_today - timedelta(days=1)))

    data = client.get("/api/sales-data?timeFrame=nonsense").get_json()
    assert data["periodSales"] == 10.0
    assert data["totalOrders"] == 1


def test_top_products_sorted_and_capped(client, make_product, make_order):
    a = make_product(name="A", rating=3.0)
    b = make_product(name="B", rating=4.0)
    c = make_product(name="C", rating=1.0)
    make_product(name="D", rating=4.9)
    make_product(name="E", rating=2.0)
    make_product(name="F", rating=1.5)
    make_order(items=[(a, 5), (b, 2)])
    make_order(items=[(b, 3), (c, 1)])

    rows = client.get("/api/top-products").get_json()

    assert len(rows) == 5
    assert [r["name"] for r in rows] == ["B", "A", "C", "D", "E"]
    assert [r["sold"] for r in rows] == [5, 5, 1, 0, 0]


def test_top_products_includes_unsold_products(client, make_product):
    make_product(name="Lonely", rating=4.0)
    rows = client.get("/api/top-products").get_json()
    assert rows == [
        {"id": rows[0]["id"], "name": "Lonely", "image_url": None, "rating": 4.0, "sold": 0}
    ]


def test_rated_products_count_distinct_within_window(client, frozen_today, make_product, make_rating):
    a = make_product(name="A")
    b = make_product(name="B")
    make_rating(a, _at(frozen_today - timedelta(days=2)))
    make_rating(a, _at(frozen_today - timedelta(days=3)))
    make_rating(b, _at(frozen_today - timedelta(days=6)))
    make_rating(b, _at(frozen_today))

    assert client.get("/api/rated-products-count?timeFrame=lastWeek").get_json() == {
        "ratedProductsCount": 2
    }
    assert client.get("/api/rated-products-count?timeFrame=today").get_json() == {
        "ratedProductsCount": 1
    }
    assert client.get("/api/rated-products-count?timeFrame=yesterday").get_json() == {
        "ratedProductsCount": 0
    }


def test_total_stock_and_total_products(client, make_product):
    assert client.get("/api/total-stock").get_json() == {"totalStock": 0}

    make_product(stock_quantity=7)
    make_product(stock_quantity=3, deleted=True)

    assert client.get("/api/total-stock").get_json() == {"totalStock": 10}
    assert client.get("/api/total-products").get_json() == {"totalProducts": 2}


def test_sales_report_lists_visible_delivered_orders(client, make_order):
    shown = make_order(total=40, status="Delivered")
    make_order(total=25, status="Delivered", in_sales_report=False)
    make_order(total=70, status="Shipped")

    report = client.get("/api/sales-report").get_json()

    assert report["count"] == 1
    assert report["totalSales"] == 40.0
    assert report["orders"][0]["id"] == shown.id
