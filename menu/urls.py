from django.urls import path

import menu.views as views

urlpatterns = [
    path("restaurants/", views.RestaurantListView.as_view(), name="restaurants"),
    path("restaurants/search/", views.RestaurantSearchView.as_view(), name="restaurant-search"),
    path("restaurants/<int:restaurant_id>/", views.RestaurantDetailView.as_view(), name="restaurant-detail"),

    path("categories/", views.CategoryListView.as_view(), name="categories"),
    path("categories/<str:slug>/", views.CategoryDetailView.as_view(), name="category-detail"),

    path("dishes/", views.DishView.as_view(), name="dishes"),
    path("dishes/<int:dish_id>/", views.DishDetailView.as_view(), name="dish-detail"),

    path("orders/", views.OrderView.as_view(), name="order"),
]
