# posoffice/models/__init__.py
from .admin import Admin
from .product import Product
from .order import Order, ORDER_STATUSES
from .ordered_product import OrderedProduct
from .product_rating import ProductRating

__all__ = [
    "Admin",
    "Product",
    "Order",
    "ORDER_STATUSES",
    "OrderedProduct",
    "ProductRating",
]
