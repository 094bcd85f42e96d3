from .main import (
    CategoryDetailView,
    CategoryListView,
    RestaurantDetailView,
    RestaurantListView,
    RestaurantSearchView,
)
from .order import OrderView
from .registration import DishDetailView, DishView
