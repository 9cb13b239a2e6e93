# posoffice/cli.py
import os
import random
from datetime import datetime, timedelta

import click
from flask import current_app
from flask.cli import with_appcontext

from posoffice.extensions import db


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create all tables (for an empty database)."""
    db.create_all()
    click.echo("✅ Tables created")


@click.command("create-admin")
@click.option("--full-name", default=lambda: os.environ.get("ADMIN_FULL_NAME", "Store Admin"),
              show_default=True, help="Displayed admin name")
@click.option("--username", default=lambda: os.environ.get("ADMIN_USERNAME", "admin"),
              show_default=True, help="Admin username")
@click.option("--password", default=lambda: os.environ.get("ADMIN_PASSWORD"),
              help="Password (prompted when not given)")
@click.option("--pin", default=lambda: os.environ.get("ADMIN_PIN"),
              help="PIN (prompted when not given)")
@click.option("--role", default="admin", show_default=True)
@click.option("--force", is_flag=True, default=False,
              help="Reset the existing admin instead of stopping")
@with_appcontext
def create_admin_command(full_name, username, password, pin, role, force):
    """Create / reset the single admin account. Password and PIN are bcrypt-hashed."""
    from posoffice.models import Admin
    from posoffice.models.admin import SINGLETON_ADMIN_ID

    db.create_all()  # in case of an empty database

    if not password:
        password = click.prompt("Password", hide_input=True, confirmation_prompt=True)
    if not pin:
        pin = click.prompt("PIN", hide_input=True, confirmation_prompt=True)

    admin = db.session.get(Admin, SINGLETON_ADMIN_ID)
    if admin and not force:
        click.echo(f"❗ Admin '{admin.username}' already exists. Use --force to reset it.")
        return

    if not admin:
        admin = Admin(id=SINGLETON_ADMIN_ID)
        db.session.add(admin)

    admin.full_name = full_name
    admin.username = username
    admin.role = role
    admin.set_password(password)
    admin.set_pin(pin)

    db.session.commit()
    click.echo(f"✅ Admin ready: {username}")


@click.command("seed-demo")
@click.option("--orders", "order_count", default=20, show_default=True)
@click.option("--seed", default=None, type=int, help="Random seed for repeatable data")
@with_appcontext
def seed_demo_command(order_count, seed):
    """Insert demo products, orders, line items and ratings."""
    from posoffice.models import Order, OrderedProduct, Product, ProductRating, ORDER_STATUSES
    from posoffice.services.catalog import generate_order_id

    rng = random.Random(seed)
    db.create_all()

    products = []
    for i, (name, price) in enumerate(
        [("Espresso beans", 12.5), ("Oat milk", 2.2), ("Paper cups", 4.0),
         ("Croissant", 1.8), ("Green tea", 6.4), ("Cold brew", 3.5)],
        start=1,
    ):
        p = Product(
            name=name,
            description=f"Demo product {i}",
            price=price,
            stock_quantity=rng.randint(0, 200),
            category="demo",
            supplier_id=rng.randint(1, 3),
            rating=round(rng.uniform(2.5, 5.0), 1),
            order_id=generate_order_id(rng),
        )
        db.session.add(p)
        products.append(p)
    db.session.flush()

    now = datetime.now()
    for _ in range(order_count):
        o = Order(
            user_id=rng.randint(1, 8),
            order_date=now - timedelta(days=rng.randint(0, 40), hours=rng.randint(0, 12)),
            status=rng.choice(ORDER_STATUSES),
            total=0,
        )
        db.session.add(o)
        db.session.flush()

        total = 0.0
        for p in rng.sample(products, k=rng.randint(1, 3)):
            qty = rng.randint(1, 4)
            total += float(p.price) * qty
            db.session.add(OrderedProduct(order_id=o.id, product_id=p.id, name=p.name, quantity=qty))
        o.total = round(total, 2)

    for p in products:
        for _ in range(rng.randint(0, 3)):
            db.session.add(ProductRating(
                product_id=p.id,
                rating=rng.randint(1, 5),
                created_at=now - timedelta(days=rng.randint(0, 40)),
            ))

    db.session.commit()
    current_app.logger.info("Seeded %s products and %s orders", len(products), order_count)
    click.echo(f"[OK] Seeded {len(products)} products and {order_count} orders")


@click.command("routes-table")
@with_appcontext
def routes_table_command():
    """Print the API route table."""
    for r in sorted(current_app.url_map.iter_rules(), key=lambda x: x.rule):
        if not r.endpoint.startswith("api."):
            continue
        methods = ",".join(
            sorted(m for m in r.methods if m in {"GET", "POST", "PUT", "DELETE"})
        )
        click.echo(f"{r.rule:35s} -> {r.endpoint} [{methods}]")


def register_cli(app):
    for command in (init_db_command, create_admin_command, seed_demo_command, routes_table_command):
        app.cli.add_command(command)
