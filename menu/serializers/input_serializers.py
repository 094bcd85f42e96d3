from rest_framework import serializers


class PageSerializer(serializers.Serializer):
    # pages are 1-indexed, 0 and below never reach the query layer
    page = serializers.IntegerField(min_value=1, default=1)


class SearchSerializer(PageSerializer):
    query = serializers.CharField()


# ─── Restaurants ─────────────────────────────────────────────────────────────

class CreateRestaurantSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    address = serializers.CharField(max_length=500)
    cover_image = serializers.CharField(max_length=500, required=False, allow_blank=True)
    category_name = serializers.CharField(max_length=255)


class EditRestaurantSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
    address = serializers.CharField(max_length=500, required=False)
    cover_image = serializers.CharField(max_length=500, required=False, allow_blank=True)
    category_name = serializers.CharField(max_length=255, required=False)


# ─── Dishes ──────────────────────────────────────────────────────────────────

class DishChoiceSerializer(serializers.Serializer):
    name = serializers.CharField()
    extra = serializers.IntegerField(min_value=0, required=False)


class DishOptionSerializer(serializers.Serializer):
    """Either a list of exclusive choices, or a flat extra."""
    name = serializers.CharField()
    choices = DishChoiceSerializer(many=True, required=False)
    extra = serializers.IntegerField(min_value=0, required=False)


class CreateDishSerializer(serializers.Serializer):
    restaurant_id = serializers.IntegerField()
    name = serializers.CharField(max_length=255)
    price = serializers.IntegerField(min_value=0)
    description = serializers.CharField(max_length=500, required=False, allow_blank=True)
    options = DishOptionSerializer(many=True, required=False)


class EditDishSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False)
    price = serializers.IntegerField(min_value=0, required=False)
    description = serializers.CharField(max_length=500, required=False, allow_blank=True)
    options = DishOptionSerializer(many=True, required=False)
