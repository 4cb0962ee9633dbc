from rest_framework import serializers

from apps.common.constants import MAX_INTEGER
from apps.common.fields import StrictIntegerField


class MenuItemSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(max_length=150)
    description = serializers.CharField()
    price = StrictIntegerField(
        min_value=1,
        max_value=MAX_INTEGER,
        error_messages={"min_value": "Price must be greater than 0."},
    )
    category = serializers.CharField(max_length=60)
    image = serializers.CharField(max_length=500)
    spicyLevel = serializers.CharField(source="spicy_level", required=False, allow_null=True, allow_blank=True)
    stockQuantity = StrictIntegerField(
        source="stock_quantity",
        min_value=0,
        max_value=MAX_INTEGER,
        error_messages={"min_value": "Stock cannot be negative."},
    )
    lowStockThreshold = StrictIntegerField(
        source="low_stock_threshold",
        min_value=1,
        max_value=MAX_INTEGER,
        error_messages={"min_value": "Threshold must be at least 1."},
    )
    unit = serializers.CharField(max_length=30)
    isAvailable = StrictIntegerField(
        source="is_available",
        required=False,
        default=1,
        min_value=0,
        max_value=1,
        error_messages={"min_value": "isAvailable must be 0 or 1.", "max_value": "isAvailable must be 0 or 1."},
    )
    rating = StrictIntegerField(required=False, allow_null=True, min_value=0, max_value=MAX_INTEGER)
    reviewCount = StrictIntegerField(
        source="review_count",
        required=False,
        allow_null=True,
        min_value=0,
        max_value=MAX_INTEGER,
    )
    stockStatus = serializers.SerializerMethodField()

    def get_stockStatus(self, obj) -> str:
        return str(obj.stock_status)

    def validate_spicyLevel(self, value):
        return value or None


class StockUpdateSerializer(serializers.Serializer):
    stockQuantity = StrictIntegerField(
        source="stock_quantity",
        min_value=0,
        max_value=MAX_INTEGER,
        error_messages={"min_value": "Stock cannot be negative."},
    )
    lowStockThreshold = StrictIntegerField(
        source="low_stock_threshold",
        min_value=1,
        max_value=MAX_INTEGER,
        error_messages={"min_value": "Threshold must be at least 1."},
    )


class AvailabilityUpdateSerializer(serializers.Serializer):
    isAvailable = StrictIntegerField(
        source="is_available",
        min_value=0,
        max_value=1,
        error_messages={"min_value": "isAvailable must be 0 or 1.", "max_value": "isAvailable must be 0 or 1."},
    )


class InventoryStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    available = serializers.IntegerField()
    lowStock = serializers.IntegerField(source="low_stock")
    outOfStock = serializers.IntegerField(source="out_of_stock")

