from django.conf import settings
from django.db import models
from django.db.models import Count

from ..pagifications import paginate


def slugify_category(name: str) -> str:
    """'  Fast Food ' -> 'fast-food'"""
    return name.strip().lower().replace(" ", "-")


class CategoryQuerySet(models.QuerySet):
    def with_restaurant_count(self):
        return self.annotate(restaurant_total=Count("restaurants"))


class CategoryManager(models.Manager.from_queryset(CategoryQuerySet)):
    def get_or_create_by_name(self, name: str) -> "Category":
        """
        Return the category for this name, creating it on first use.
        The unique slug is what stops two racing creators; the loser gets an IntegrityError.
        """
        slug = slugify_category(name)
        category = self.filter(slug=slug).first()
        if category:
            return category
        return self.create(name=name.strip().lower(), slug=slug)


class Category(models.Model):
    name = models.CharField(max_length=255)
    slug = models.CharField(max_length=255, unique=True)
    cover_image = models.CharField(max_length=500, blank=True, default="")

    objects = CategoryManager()

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name

    @property
    def restaurant_count(self) -> int:
        # annotated by with_restaurant_count(), otherwise one COUNT query
        if hasattr(self, "restaurant_total"):
            return self.restaurant_total
        return self.restaurants.count()


class RestaurantQuerySet(models.QuerySet):
    def in_category(self, category):
        return self.filter(category=category)

    def name_contains(self, query: str):
        return self.filter(name__icontains=query)

    def page(self, page: int, page_size: int | None = None):
        """Returns (restaurants on that page, total matching restaurants)."""
        window = paginate(page, page_size)
        total = self.count()
        results = list(self.order_by("id")[window.skip:window.skip + window.take])
        return results, total


class Restaurant(models.Model):
    name = models.CharField(max_length=255)
    address = models.CharField(max_length=500)
    cover_image = models.CharField(max_length=500, blank=True, default="")
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="restaurants")
    category = models.ForeignKey(
        Category, on_delete=models.SET_NULL, related_name="restaurants", null=True, blank=True
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = RestaurantQuerySet.as_manager()

    def __str__(self):
        return self.name


class Dish(models.Model):
    """
    `options` holds the customisation groups, e.g.
        [{"name": "Size", "choices": [{"name": "L", "extra": 200}]},
         {"name": "Extra cheese", "extra": 100}]
    A choice is exclusive inside its group; a group without choices has a flat extra.
    """
    restaurant = models.ForeignKey(Restaurant, on_delete=models.CASCADE, related_name="menu")
    name = models.CharField(max_length=255)
    price = models.PositiveIntegerField()  # minor currency units
    description = models.CharField(max_length=500, blank=True, default="")
    photo = models.CharField(max_length=500, blank=True, default="")
    options = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "dishes"

    def __str__(self):
        return f"{self.restaurant.name} - {self.name}"

    def find_option(self, name: str):
        return next((option for option in self.options or [] if option.get("name") == name), None)
