from rest_framework import serializers

from apps.common.constants import MAX_INTEGER
from apps.common.fields import StrictIntegerField


class CartItemSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    price = serializers.IntegerField()
    image = serializers.CharField()
    quantity = serializers.IntegerField()


class CartSerializer(serializers.Serializer):
    items = CartItemSerializer(many=True)
    isOpen = serializers.BooleanField(source="is_open")
    totalItems = serializers.SerializerMethodField()
    totalPrice = serializers.SerializerMethodField()

    def get_totalItems(self, cart) -> int:
        return cart.get_total_items()

    def get_totalPrice(self, cart) -> int:
        return cart.get_total_price()


class CartVisibilitySerializer(serializers.Serializer):
    isOpen = serializers.BooleanField(source="is_open")


class CartAddSerializer(serializers.Serializer):
    menuItemId = StrictIntegerField(source="menu_item_id", min_value=1)


class CartQuantitySerializer(serializers.Serializer):
    quantity = StrictIntegerField(max_value=MAX_INTEGER)

