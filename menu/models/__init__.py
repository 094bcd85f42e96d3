from .main import Category, Dish, Restaurant, slugify_category
from .order import Order, OrderItem, OrderStatus

__all__ = [
    "Category",
    "Dish",
    "Order",
    "OrderItem",
    "OrderStatus",
    "Restaurant",
    "slugify_category",
]
