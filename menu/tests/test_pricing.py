from menu.models import Dish
from menu.services import option_extra, price_item

PIZZA_OPTIONS = [
    {"name": "Size", "choices": [{"name": "M"}, {"name": "L", "extra": 200}, {"name": "XL", "extra": 500}]},
    {"name": "Extra cheese", "extra": 100},
    {"name": "Spicy", "choices": [{"name": "Mild"}, {"name": "Hot", "extra": 50}], "extra": 999},
]


def pizza():
    return Dish(name="Pizza", price=1000, options=PIZZA_OPTIONS)


def test_no_options_costs_base_price():
    assert price_item(pizza(), []) == 1000
    assert price_item(pizza(), None) == 1000


def test_choice_extra_is_added():
    assert price_item(pizza(), [{"name": "Size", "choice": "L"}]) == 1200


def test_flat_extra_is_added():
    assert price_item(pizza(), [{"name": "Extra cheese"}]) == 1100


def test_choice_without_extra_is_free():
    assert price_item(pizza(), [{"name": "Size", "choice": "M"}]) == 1000


def test_choices_win_over_flat_extra():
    spicy = PIZZA_OPTIONS[2]

    assert option_extra(spicy, {"name": "Spicy", "choice": "Hot"}) == 50
    assert option_extra(spicy, {"name": "Spicy"}) == 0


def test_unknown_option_or_choice_is_ignored():
    selections = [
        {"name": "Sauce", "choice": "BBQ"},
        {"name": "Size", "choice": "XXL"},
    ]
    assert price_item(pizza(), selections) == 1000


def test_extras_add_up():
    selections = [
        {"name": "Size", "choice": "XL"},
        {"name": "Extra cheese"},
        {"name": "Spicy", "choice": "Hot"},
    ]
    assert price_item(pizza(), selections) == 1000 + 500 + 100 + 50
