from rest_framework import serializers

from apps.common.constants import MAX_INTEGER, MIN_PHONE_LENGTH, OrderStatus, PaymentMethod, ServiceType
from apps.common.exceptions import ValidationError
from apps.common.fields import SnapshotIdField, StrictIntegerField
from apps.orders.domain import OrderDraft, OrderLine
from apps.orders.lifecycle import next_status, validate_order_draft


class OrderLineSerializer(serializers.Serializer):
    id = SnapshotIdField()
    name = serializers.CharField(max_length=150)
    price = StrictIntegerField(min_value=1, max_value=MAX_INTEGER)
    quantity = StrictIntegerField(min_value=1, max_value=MAX_INTEGER)


class OrderSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    customerName = serializers.CharField(source="customer_name")
    customerPhone = serializers.CharField(source="customer_phone")
    customerAddress = serializers.CharField(source="customer_address")
    serviceType = serializers.CharField(source="service_type")
    paymentMethod = serializers.CharField(source="payment_method")
    notes = serializers.CharField(allow_null=True)
    items = OrderLineSerializer(many=True)
    totalAmount = serializers.IntegerField(source="total_amount")
    status = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    nextStatus = serializers.SerializerMethodField()

    def get_nextStatus(self, order) -> str | None:
        """Status the dashboard offers as the next step; null once the order is delivered or cancelled."""
        return next_status(order.status)


class OrderCustomerSerializer(serializers.Serializer):
    customerName = serializers.CharField(source="customer_name", max_length=150)
    customerPhone = serializers.CharField(
        source="customer_phone",
        max_length=30,
        min_length=MIN_PHONE_LENGTH,
        error_messages={"min_length": "Phone number is not valid."},
    )
    customerAddress = serializers.CharField(source="customer_address", required=False, allow_blank=True, default="")
    serviceType = serializers.ChoiceField(source="service_type", choices=ServiceType.choices)
    paymentMethod = serializers.ChoiceField(source="payment_method", choices=PaymentMethod.choices)
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)


class OrderCreateSerializer(OrderCustomerSerializer):
    items = OrderLineSerializer(many=True, allow_empty=False)
    totalAmount = StrictIntegerField(source="total_amount", min_value=0, max_value=MAX_INTEGER)

    def validate(self, attrs):
        draft = OrderDraft(
            customer_name=attrs["customer_name"].strip(),
            customer_phone=attrs["customer_phone"].strip(),
            customer_address=(attrs.get("customer_address") or "").strip(),
            service_type=attrs["service_type"],
            payment_method=attrs["payment_method"],
            notes=attrs.get("notes") or None,
            items=tuple(OrderLine(**line) for line in attrs["items"]),
            total_amount=attrs["total_amount"],
        )
        try:
            validate_order_draft(draft)
        except ValidationError as err:
            raise serializers.ValidationError(err.errors) from err
        return {"draft": draft}

    def create(self, validated_data):
        return self.context["storage"].create_order(validated_data["draft"])


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=OrderStatus.choices,
        error_messages={
            "required": "Status is required.",
            "null": "Status is required.",
            "invalid_choice": '"{input}" is not a valid status.',
        },
    )
