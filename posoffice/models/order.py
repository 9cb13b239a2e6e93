# posoffice/models/order.py
from datetime import datetime
from posoffice.extensions import db

ORDER_PLACED = "Order Placed"
PROCESSED = "Processed"
SHIPPED = "Shipped"
DELIVERED = "Delivered"
CANCELLED = "Cancelled"

ORDER_STATUSES = (ORDER_PLACED, PROCESSED, SHIPPED, DELIVERED, CANCELLED)


class Order(db.Model):
    __tablename__ = "orders"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, nullable=False, index=True)
    order_date = db.Column(db.DateTime, nullable=False, default=datetime.now, index=True)
    status = db.Column(db.String(32), nullable=False, default=ORDER_PLACED)
    total = db.Column(db.Numeric(10, 2), nullable=False, default=0)

    # Orders are hidden from reporting by this flag, never deleted
    in_sales_report = db.Column(db.Boolean, nullable=False, default=True)

    items = db.relationship("OrderedProduct", back_populates="order", lazy=True)

    def __repr__(self):
        return f"<Order #{self.id} – user:{self.user_id} – {self.status}>"
