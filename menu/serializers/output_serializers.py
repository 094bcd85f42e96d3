from rest_framework import serializers

from menu.models import Category, Dish, Restaurant


class CategoryRefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "slug", "cover_image"]


class CategorySerializer(CategoryRefSerializer):
    # reads the with_restaurant_count() annotation when the queryset has it
    restaurant_count = serializers.IntegerField(read_only=True)

    class Meta(CategoryRefSerializer.Meta):
        fields = CategoryRefSerializer.Meta.fields + ["restaurant_count"]


class DishSerializer(serializers.ModelSerializer):
    class Meta:
        model = Dish
        fields = ["id", "name", "price", "description", "photo", "options"]


class RestaurantSerializer(serializers.ModelSerializer):
    category = CategoryRefSerializer(read_only=True)

    class Meta:
        model = Restaurant
        fields = ["id", "name", "address", "cover_image", "owner_id", "category", "created_at", "updated_at"]


class RestaurantDetailSerializer(RestaurantSerializer):
    menu = DishSerializer(many=True, read_only=True)

    class Meta(RestaurantSerializer.Meta):
        fields = RestaurantSerializer.Meta.fields + ["menu"]
