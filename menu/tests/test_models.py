import pytest

from menu.models import Category, Order, OrderStatus, slugify_category
from menu.pagifications import Page, paginate, total_pages


def test_slug_from_name():
    assert slugify_category("  Fast Food ") == "fast-food"
    assert slugify_category("Korean BBQ") == "korean-bbq"


@pytest.mark.django_db
def test_category_get_or_create_is_idempotent():
    first = Category.objects.get_or_create_by_name("Fast Food")
    second = Category.objects.get_or_create_by_name(" fast food ")

    assert first.pk == second.pk
    assert first.name == "fast food"
    assert first.slug == "fast-food"
    assert Category.objects.count() == 1


@pytest.mark.django_db
def test_category_counts_its_restaurants(category_factory, restaurant_factory):
    category = category_factory()
    restaurant_factory.create_batch(3, category=category)

    assert category.restaurant_count == 3


def test_paginate():
    assert paginate(1, 10) == Page(skip=0, take=10)
    assert paginate(3, 10) == Page(skip=20, take=10)


def test_paginate_uses_default_page_size(settings):
    settings.PAGINATION_MAX = 25
    assert paginate(2) == Page(skip=25, take=25)


def test_total_pages():
    assert total_pages(25, 10) == 3
    assert total_pages(20, 10) == 2
    assert total_pages(0, 10) == 0


def test_order_moves_forward():
    order = Order()
    assert order.status == OrderStatus.PENDING

    order.set_status(OrderStatus.COOKING)
    order.set_status(OrderStatus.COMPLETED)

    assert order.status == OrderStatus.COMPLETED


def test_order_cannot_move_backwards():
    order = Order(status=OrderStatus.DELIVERING)

    with pytest.raises(ValueError):
        order.set_status(OrderStatus.COOKING)
    with pytest.raises(ValueError):
        order.set_status("Lost")

    assert order.status == OrderStatus.DELIVERING
