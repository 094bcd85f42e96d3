import logging

from django.db import transaction

from authflow.permissions import assert_owns
from core.results import NotFound, service_operation
from menu.models import Category, Dish, Order, OrderItem, Restaurant
from menu.pagifications import total_pages

logger = logging.getLogger(__name__)


# ─── Pricing ─────────────────────────────────────────────────────────────────

def option_extra(dish_option: dict, selection: dict) -> int:
    """
    Extra cost of one selected option.
    With choices, only the picked choice counts (an unknown or missing pick adds nothing).
    Without choices, the option's flat extra applies.
    """
    choices = dish_option.get("choices") or []
    if choices:
        picked = selection.get("choice")
        if not picked:
            return 0
        choice = next((c for c in choices if c.get("name") == picked), None)
        return (choice or {}).get("extra") or 0
    return dish_option.get("extra") or 0


def price_item(dish: Dish, selections) -> int:
    price = dish.price
    for selection in selections or []:
        dish_option = dish.find_option(selection.get("name"))
        if dish_option is None:
            continue  # not on this dish, ignored
        price += option_extra(dish_option, selection)
    return price


# ─── Categories ──────────────────────────────────────────────────────────────

class CategoryService:

    @staticmethod
    @service_operation("Could not load categories")
    def all_categories():
        return {"categories": list(Category.objects.with_restaurant_count())}

    @staticmethod
    @service_operation("Could not find category")
    def find_category_by_slug(slug: str, page: int = 1):
        category = Category.objects.with_restaurant_count().filter(slug=slug).first()
        if not category:
            raise NotFound("Category not found")

        restaurants, total = Restaurant.objects.in_category(category).page(page)
        return {
            "category": category,
            "restaurants": restaurants,
            "total_pages": total_pages(total),
            "total_results": total,
        }


# ─── Restaurants ─────────────────────────────────────────────────────────────

class RestaurantService:

    @staticmethod
    def get_restaurant(restaurant_id: int) -> Restaurant:
        restaurant = Restaurant.objects.select_related("category").filter(pk=restaurant_id).first()
        if not restaurant:
            raise NotFound("Restaurant not found")
        return restaurant

    @staticmethod
    def count_restaurants(category: Category) -> int:
        return Restaurant.objects.in_category(category).count()

    @staticmethod
    @service_operation("Could not create restaurant")
    def create_restaurant(owner, name: str, address: str, category_name: str, cover_image: str = ""):
        with transaction.atomic():
            category = Category.objects.get_or_create_by_name(category_name)
            restaurant = Restaurant.objects.create(
                owner=owner,
                name=name,
                address=address,
                cover_image=cover_image,
                category=category,
            )
        logger.info("Restaurant %s created by owner %s", restaurant.id, owner.id)
        return {"restaurant_id": restaurant.id}

    @staticmethod
    @service_operation("Could not edit restaurant")
    def edit_restaurant(owner, restaurant_id: int, category_name: str | None = None, **changes):
        restaurant = RestaurantService.get_restaurant(restaurant_id)
        assert_owns(owner, restaurant, "You cannot edit restaurant you don't own")

        with transaction.atomic():
            if category_name:
                restaurant.category = Category.objects.get_or_create_by_name(category_name)
            for field_name, value in changes.items():
                setattr(restaurant, field_name, value)
            restaurant.save()
        return {}

    @staticmethod
    @service_operation("Could not delete restaurant")
    def delete_restaurant(owner, restaurant_id: int):
        restaurant = RestaurantService.get_restaurant(restaurant_id)
        assert_owns(owner, restaurant, "You cannot delete restaurant you don't own")
        restaurant.delete()
        logger.info("Restaurant %s deleted by owner %s", restaurant_id, owner.id)
        return {}

    @staticmethod
    @service_operation("Could not load restaurants")
    def all_restaurants(page: int = 1):
        restaurants, total = Restaurant.objects.select_related("category").page(page)
        return {
            "results": restaurants,
            "total_pages": total_pages(total),
            "total_results": total,
        }

    @staticmethod
    @service_operation("Could not find restaurant")
    def find_restaurant_by_id(restaurant_id: int):
        restaurant = (
            Restaurant.objects
            .select_related("category")
            .prefetch_related("menu")
            .filter(pk=restaurant_id)
            .first()
        )
        if not restaurant:
            raise NotFound("Restaurant not found")
        return {"restaurant": restaurant}

    @staticmethod
    @service_operation("Could not search for restaurant")
    def search_restaurant_by_name(query: str, page: int = 1):
        restaurants, total = Restaurant.objects.select_related("category").name_contains(query).page(page)
        return {
            "restaurants": restaurants,
            "total_results": total,
            "total_pages": total_pages(total),
        }


# ─── Dishes ──────────────────────────────────────────────────────────────────

class DishService:

    @staticmethod
    def get_dish(dish_id: int) -> Dish:
        dish = Dish.objects.select_related("restaurant").filter(pk=dish_id).first()
        if not dish:
            raise NotFound("Dish not found")
        return dish

    @staticmethod
    @service_operation("Could not create dish")
    def create_dish(owner, restaurant_id: int, name: str, price: int, description: str = "", options=None):
        restaurant = RestaurantService.get_restaurant(restaurant_id)
        assert_owns(owner, restaurant, "You cannot create dish for restaurant you don't own")

        dish = Dish.objects.create(
            restaurant=restaurant,
            name=name,
            price=price,
            description=description,
            options=options or [],
        )
        return {"dish_id": dish.id}

    @staticmethod
    @service_operation("Could not edit dish")
    def edit_dish(owner, dish_id: int, **changes):
        dish = DishService.get_dish(dish_id)
        assert_owns(owner, dish, "You cannot edit dish you don't own")

        for field_name, value in changes.items():
            setattr(dish, field_name, value)
        dish.save()
        return {}

    @staticmethod
    @service_operation("Could not delete dish")
    def delete_dish(owner, dish_id: int):
        dish = DishService.get_dish(dish_id)
        assert_owns(owner, dish, "You cannot delete dish you don't own")
        dish.delete()
        return {}


# ─── Orders ──────────────────────────────────────────────────────────────────

class OrderService:

    @staticmethod
    @service_operation("Could not create order")
    def create_order(customer, restaurant_id: int, items):
        """
        Price every item against the restaurant's menu, then write the order
        and its items together. Nothing is written if any dish is missing.
        """
        restaurant = RestaurantService.get_restaurant(restaurant_id)

        dishes = Dish.objects.filter(restaurant=restaurant).in_bulk({item["dish_id"] for item in items})
        total = 0
        priced = []
        for item in items:
            dish = dishes.get(item["dish_id"])
            if dish is None:
                raise NotFound("Dish not found")
            selections = item.get("options") or []
            total += price_item(dish, selections)
            priced.append(OrderItem(dish=dish, options=selections))

        with transaction.atomic():
            order = Order.objects.create(customer=customer, restaurant=restaurant, total=total)
            for order_item in priced:
                order_item.order = order
            OrderItem.objects.bulk_create(priced)

        logger.info("Order %s placed at restaurant %s, total %s", order.id, restaurant.id, total)
        return {"order_id": order.id, "total": total}
