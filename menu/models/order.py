from django.conf import settings
from django.db import models

from .main import Restaurant, Dish


# Pending -> Cooking -> Delivering -> Completed, never backwards
class OrderStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    COOKING = "Cooking", "Cooking"
    DELIVERING = "Delivering", "Delivering"
    COMPLETED = "Completed", "Completed"


class Order(models.Model):
    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, related_name="orders", null=True, blank=True
    )
    driver = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, related_name="rides", null=True, blank=True
    )
    restaurant = models.ForeignKey(
        Restaurant, on_delete=models.SET_NULL, related_name="orders", null=True, blank=True
    )
    total = models.PositiveIntegerField(default=0)  # sum of item prices incl. option extras
    status = models.CharField(max_length=20, choices=OrderStatus.choices, default=OrderStatus.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Order {self.pk} - {self.status}"

    def set_status(self, new_status: str) -> None:
        statuses = list(OrderStatus.values)
        if new_status not in statuses:
            raise ValueError(f"Unknown order status '{new_status}'")
        if statuses.index(new_status) < statuses.index(self.status):
            raise ValueError(f"Order cannot go back from {self.status} to {new_status}")
        self.status = new_status


class OrderItem(models.Model):
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    dish = models.ForeignKey(Dish, on_delete=models.SET_NULL, related_name="order_items", null=True, blank=True)
    # the customer's picks: [{"name": "Size", "choice": "L"}, {"name": "Extra cheese"}]
    options = models.JSONField(default=list, blank=True)

    def __str__(self):
        return f"{self.order_id} - {self.dish_id}"
