from rest_framework import serializers


class OrderItemOptionSerializer(serializers.Serializer):
    name = serializers.CharField()
    choice = serializers.CharField(required=False, allow_blank=True)


class OrderItemCreateSerializer(serializers.Serializer):
    dish_id = serializers.IntegerField()
    options = OrderItemOptionSerializer(many=True, required=False)


class OrderCreateSerializer(serializers.Serializer):
    restaurant_id = serializers.IntegerField()
    items = OrderItemCreateSerializer(many=True, allow_empty=False)

    def validate_items(self, items):
        if not items:
            raise serializers.ValidationError("An order must have at least one item.")
        return items
