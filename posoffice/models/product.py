# posoffice/models/product.py
from posoffice.extensions import db


class Product(db.Model):
    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text, nullable=True)
    price = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    image_url = db.Column(db.String(255), nullable=True)
    stock_quantity = db.Column(db.Integer, nullable=False, default=0)
    category = db.Column(db.String(100), nullable=True)
    supplier_id = db.Column(db.Integer, nullable=True)

    # Generated "ORD-XXXXXXXXX" reference, set when the product is added
    order_id = db.Column(db.String(13), unique=True, nullable=True, index=True)
    rating = db.Column(db.Numeric(3, 2), nullable=True)

    # Soft delete: rows are flagged, never removed
    deleted = db.Column(db.Boolean, nullable=False, default=False)

    line_items = db.relationship("OrderedProduct", back_populates="product", lazy=True)
    ratings = db.relationship("ProductRating", backref="product", lazy=True)

    def __repr__(self) -> str:
        return f"<Product {self.name}>"
