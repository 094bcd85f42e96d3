import logging

import pytest
from django.urls import reverse

from menu.models import Dish, Order, Restaurant


@pytest.fixture
def own_restaurant(restaurant_factory, owner):
    return restaurant_factory(owner=owner, name="Burger Planet")


@pytest.mark.django_db
def test_owner_creates_restaurant(api_client, authenticate, owner):
    authenticate(api_client, owner)

    response = api_client.post(
        reverse("restaurants"),
        {"name": "Taco Town", "address": "5 Side St", "category_name": "Mexican Food"},
        format="json",
    )

    assert response.status_code == 201
    restaurant = Restaurant.objects.get(pk=response.data["restaurant_id"])
    assert restaurant.category.slug == "mexican-food"


@pytest.mark.django_db
def test_client_cannot_create_restaurant(api_client, authenticate, client_user):
    authenticate(api_client, client_user)

    response = api_client.post(
        reverse("restaurants"),
        {"name": "Taco Town", "address": "5 Side St", "category_name": "Mexican"},
        format="json",
    )

    assert response.status_code == 403
    assert not Restaurant.objects.exists()


@pytest.mark.django_db
def test_anonymous_cannot_create_restaurant(api_client):
    response = api_client.post(reverse("restaurants"), {}, format="json")
    assert response.status_code == 401


@pytest.mark.django_db
def test_list_restaurants_is_public(api_client, restaurant_factory):
    restaurant_factory.create_batch(3)

    response = api_client.get(reverse("restaurants"), {"page": 1})

    assert response.status_code == 200
    assert response.data["ok"] is True
    assert len(response.data["results"]) == 3
    assert response.data["total_pages"] == 1
    assert response.data["total_results"] == 3


@pytest.mark.django_db
def test_page_zero_is_invalid_input(api_client):
    response = api_client.get(reverse("restaurants"), {"page": 0})

    assert response.status_code == 400
    assert response.data["error"].startswith("page:")


@pytest.mark.django_db
def test_restaurant_detail_includes_menu(api_client, own_restaurant, dish_factory):
    dish_factory(restaurant=own_restaurant, name="Burger")

    response = api_client.get(reverse("restaurant-detail", args=[own_restaurant.id]))

    assert response.status_code == 200
    assert response.data["restaurant"]["name"] == "Burger Planet"
    assert [d["name"] for d in response.data["restaurant"]["menu"]] == ["Burger"]


@pytest.mark.django_db
def test_restaurant_detail_not_found(api_client):
    response = api_client.get(reverse("restaurant-detail", args=[999999]))

    assert response.status_code == 404
    assert response.data == {"ok": False, "error": "Restaurant not found"}


@pytest.mark.django_db
def test_edit_someone_elses_restaurant(api_client, authenticate, other_owner, own_restaurant):
    authenticate(api_client, other_owner)

    response = api_client.patch(
        reverse("restaurant-detail", args=[own_restaurant.id]), {"name": "Stolen"}, format="json"
    )

    assert response.status_code == 403
    assert response.data["error"] == "You cannot edit restaurant you don't own"


@pytest.mark.django_db
def test_owner_deletes_restaurant(api_client, authenticate, owner, own_restaurant):
    authenticate(api_client, owner)

    response = api_client.delete(reverse("restaurant-detail", args=[own_restaurant.id]))

    assert response.status_code == 200
    assert not Restaurant.objects.exists()


@pytest.mark.django_db
def test_search(api_client, restaurant_factory):
    restaurant_factory(name="Burger Planet")
    restaurant_factory(name="Sushi Bar")

    response = api_client.get(reverse("restaurant-search"), {"query": "burger"})

    assert response.status_code == 200
    assert [r["name"] for r in response.data["restaurants"]] == ["Burger Planet"]
    assert response.data["total_results"] == 1


@pytest.mark.django_db
def test_categories(api_client, category_factory, restaurant_factory):
    category = category_factory(name="pizza", slug="pizza")
    restaurant_factory.create_batch(2, category=category)

    listing = api_client.get(reverse("categories"))
    detail = api_client.get(reverse("category-detail", args=["pizza"]))
    missing = api_client.get(reverse("category-detail", args=["nope"]))

    assert listing.data["categories"][0]["restaurant_count"] == 2
    assert detail.data["category"]["slug"] == "pizza"
    assert len(detail.data["category"]["restaurants"]) == 2
    assert detail.data["total_results"] == 2
    assert missing.status_code == 404
    assert missing.data["error"] == "Category not found"


@pytest.mark.django_db
def test_owner_manages_dishes(api_client, authenticate, owner, own_restaurant):
    authenticate(api_client, owner)

    created = api_client.post(
        reverse("dishes"),
        {
            "restaurant_id": own_restaurant.id,
            "name": "Pizza",
            "price": 1000,
            "options": [{"name": "Size", "choices": [{"name": "L", "extra": 200}]}],
        },
        format="json",
    )
    assert created.status_code == 201
    dish_id = created.data["dish_id"]

    edited = api_client.patch(reverse("dish-detail", args=[dish_id]), {"price": 1200}, format="json")
    assert edited.status_code == 200
    assert Dish.objects.get(pk=dish_id).price == 1200

    deleted = api_client.delete(reverse("dish-detail", args=[dish_id]))
    assert deleted.status_code == 200
    assert not Dish.objects.exists()


@pytest.mark.django_db
def test_client_cannot_create_dish(api_client, authenticate, client_user, own_restaurant):
    authenticate(api_client, client_user)

    response = api_client.post(
        reverse("dishes"), {"restaurant_id": own_restaurant.id, "name": "Pizza", "price": 1000}, format="json"
    )

    assert response.status_code == 403


@pytest.mark.django_db
def test_client_places_order(api_client, authenticate, client_user, own_restaurant, dish_factory):
    pizza = dish_factory(
        restaurant=own_restaurant,
        price=1000,
        options=[{"name": "Size", "choices": [{"name": "L", "extra": 200}]}, {"name": "Cheese", "extra": 100}],
    )
    authenticate(api_client, client_user)

    response = api_client.post(
        reverse("order"),
        {
            "restaurant_id": own_restaurant.id,
            "items": [{"dish_id": pizza.id, "options": [{"name": "Size", "choice": "L"}, {"name": "Cheese"}]}],
        },
        format="json",
    )

    assert response.status_code == 201
    assert response.data["total"] == 1300
    assert Order.objects.get(pk=response.data["order_id"]).customer == client_user


@pytest.mark.django_db
def test_order_needs_items(api_client, authenticate, client_user, own_restaurant):
    authenticate(api_client, client_user)

    response = api_client.post(reverse("order"), {"restaurant_id": own_restaurant.id, "items": []}, format="json")

    assert response.status_code == 400


@pytest.mark.django_db
def test_owner_cannot_place_order(api_client, authenticate, owner, own_restaurant):
    authenticate(api_client, owner)

    response = api_client.post(reverse("order"), {"restaurant_id": own_restaurant.id, "items": []}, format="json")

    assert response.status_code == 403


@pytest.mark.django_db
def test_rejected_order_is_answered_without_view_logging(api_client, authenticate, client_user, own_restaurant, caplog):
    authenticate(api_client, client_user)

    with caplog.at_level(logging.INFO):
        response = api_client.post(
            reverse("order"), {"restaurant_id": own_restaurant.id, "items": [{"dish_id": 999999}]}, format="json"
        )

    assert response.status_code == 404
    assert response.data == {"ok": False, "error": "Dish not found"}
    assert not [record for record in caplog.records if record.name.startswith("menu.views")]
