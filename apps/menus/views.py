from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.constants import ALL_FILTER
from apps.menus.inventory import calculate_inventory_stats
from apps.menus.serializers import (
    AvailabilityUpdateSerializer,
    InventoryStatsSerializer,
    MenuItemSerializer,
    StockUpdateSerializer,
)
from apps.storage.mixins import StorageMixin


# --- Storefront ---
@extend_schema(summary="List all menu items", responses={200: MenuItemSerializer(many=True)}, tags=["menu"])
class MenuListView(StorageMixin, APIView):
    failure_message = "Failed to fetch menu items"

    def get(self, request):
        items = self.get_storage().get_all_menu_items()
        return Response(MenuItemSerializer(items, many=True).data)


@extend_schema(summary="List menu items of one category", responses={200: MenuItemSerializer(many=True)}, tags=["menu"])
class MenuByCategoryView(StorageMixin, APIView):
    failure_message = "Failed to fetch menu items by category"

    def get(self, request, category):
        items = self.get_storage().get_menu_items_by_category(category)
        return Response(MenuItemSerializer(items, many=True).data)


# --- Admin inventory ---
class InventoryView(StorageMixin, APIView):
    invalid_message = "Invalid menu item data"
    failure_message = "Failed to fetch inventory"

    @extend_schema(
        summary="Admin: List inventory",
        parameters=[
            OpenApiParameter(
                name="category",
                type=str,
                description=f"Only items of this category; \"{ALL_FILTER}\" lists everything",
                required=False,
            ),
        ],
        responses={200: MenuItemSerializer(many=True)},
        tags=["inventory"],
    )
    def get(self, request):
        category = request.query_params.get("category")
        storage = self.get_storage()
        if category and category != ALL_FILTER:
            items = storage.get_menu_items_by_category(category)
        else:
            items = storage.get_all_menu_items()
        return Response(MenuItemSerializer(items, many=True).data)

    @extend_schema(
        summary="Admin: Add a menu item",
        request=MenuItemSerializer,
        responses={201: MenuItemSerializer},
        tags=["inventory"],
    )
    def post(self, request):
        self.failure_message = "Failed to create menu item"
        serializer = MenuItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = self.get_storage().create_menu_item(serializer.validated_data)
        return Response(MenuItemSerializer(item).data, status=status.HTTP_201_CREATED)


@extend_schema(summary="Admin: Inventory counters", responses={200: InventoryStatsSerializer}, tags=["inventory"])
class InventoryStatsView(StorageMixin, APIView):
    failure_message = "Failed to fetch inventory stats"

    def get(self, request):
        stats = calculate_inventory_stats(self.get_storage().get_all_menu_items())
        return Response(InventoryStatsSerializer(stats).data)


@extend_schema(
    summary="Admin: Update stock and low stock threshold",
    request=StockUpdateSerializer,
    responses={200: MenuItemSerializer},
    tags=["inventory"],
)
class InventoryStockView(StorageMixin, APIView):
    invalid_message = "Invalid stock values"
    failure_message = "Failed to update stock"

    def patch(self, request, item_id):
        serializer = StockUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = self.get_storage().update_menu_item_stock(item_id, **serializer.validated_data)
        return Response(MenuItemSerializer(item).data)


@extend_schema(
    summary="Admin: Enable or disable a menu item",
    request=AvailabilityUpdateSerializer,
    responses={200: MenuItemSerializer},
    tags=["inventory"],
)
class InventoryAvailabilityView(StorageMixin, APIView):
    invalid_message = "isAvailable must be 0 or 1"
    failure_message = "Failed to update availability"

    def patch(self, request, item_id):
        serializer = AvailabilityUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = self.get_storage().update_menu_item_availability(item_id, **serializer.validated_data)
        return Response(MenuItemSerializer(item).data)
