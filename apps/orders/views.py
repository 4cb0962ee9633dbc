import logging

from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.constants import ALL_FILTER
from apps.orders.lifecycle import count_by_status, validate_status
from apps.orders.serializers import OrderCreateSerializer, OrderSerializer, OrderStatusSerializer
from apps.storage.mixins import StorageMixin

logger = logging.getLogger(__name__)


class _OrderStatusUpdateMixin(StorageMixin):
    invalid_message = "Invalid status"
    failure_message = "Failed to update order status"

    def patch(self, request, order_id):
        serializer = OrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = self.get_storage().update_order_status(order_id, serializer.validated_data["status"])
        return Response(OrderSerializer(order).data)


@extend_schema_view(
    get=extend_schema(summary="List all orders, newest first", responses={200: OrderSerializer(many=True)}),
    post=extend_schema(
        summary="Customer: Place an order",
        request=OrderCreateSerializer,
        responses={201: OrderSerializer},
    ),
)
class OrderListCreateView(StorageMixin, APIView):
    invalid_message = "Invalid order data"

    def get(self, request):
        self.failure_message = "Failed to fetch orders"
        return Response(OrderSerializer(self.get_storage().get_all_orders(), many=True).data)

    def post(self, request):
        self.failure_message = "Failed to create order"
        serializer = OrderCreateSerializer(data=request.data, context={"storage": self.get_storage()})
        serializer.is_valid(raise_exception=True)
        order = serializer.save()
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)


@extend_schema(summary="Get one order (receipt)", responses={200: OrderSerializer})
class OrderDetailView(StorageMixin, APIView):
    failure_message = "Failed to fetch order"

    def get(self, request, order_id):
        return Response(OrderSerializer(self.get_storage().get_order(order_id)).data)


@extend_schema(
    summary="Update order status",
    description="Any of the six statuses may be written regardless of the current one.",
    request=OrderStatusSerializer,
    responses={200: OrderSerializer},
)
class OrderStatusView(_OrderStatusUpdateMixin, APIView):
    pass


# --- Admin ---
@extend_schema(
    summary="Admin: List orders",
    parameters=[
        OpenApiParameter(
            name="status",
            type=str,
            description=f"Only orders with this status; \"{ALL_FILTER}\" lists everything",
            required=False,
        ),
    ],
    responses={200: OrderSerializer(many=True)},
    tags=["admin"],
)
class AdminOrderListView(StorageMixin, APIView):
    invalid_message = "Invalid status"
    failure_message = "Failed to fetch orders"

    def get(self, request):
        orders = self.get_storage().get_all_orders()
        status_filter = request.query_params.get("status")
        if status_filter and status_filter != ALL_FILTER:
            validate_status(status_filter)
            orders = [order for order in orders if order.status == status_filter]
        return Response(OrderSerializer(orders, many=True).data)


@extend_schema(summary="Admin: Order counters by status", tags=["admin"])
class AdminOrderStatsView(StorageMixin, APIView):
    failure_message = "Failed to fetch order stats"

    def get(self, request):
        return Response(count_by_status(self.get_storage().get_all_orders()))


@extend_schema(
    summary="Admin: Update order status",
    request=OrderStatusSerializer,
    responses={200: OrderSerializer},
    tags=["admin"],
)
class AdminOrderStatusView(_OrderStatusUpdateMixin, APIView):
    def patch(self, request, order_id):
        response = super().patch(request, order_id)
        logger.info(f"Admin moved order {order_id} to {response.data['status']}")
        return response
