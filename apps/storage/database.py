import logging
from functools import wraps

from django.db import DatabaseError, transaction

from apps.common.constants import MAX_ROW_ID
from apps.common.exceptions import NotFoundError, ProviderError
from apps.menus import models as menu_models
from apps.menus.defaults import DEFAULT_MENU_ITEMS
from apps.menus.domain import MenuItem
from apps.menus.inventory import validate_availability, validate_stock_values
from apps.orders import models as order_models
from apps.orders.domain import Order, OrderDraft
from apps.orders.lifecycle import validate_order_draft, validate_status
from apps.storage.base import StorageProvider, prepare_menu_item
from apps.storage.mapping import (
    GENERATED_MENU_ITEM_COLUMNS,
    draft_to_row,
    menu_item_to_domain,
    menu_item_to_row,
    order_to_domain,
)

logger = logging.getLogger(__name__)


def _wrap_database_errors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DatabaseError as err:
            raise ProviderError(f"{func.__name__} failed: {err}") from err

    return wrapper


def _new_menu_item_row(data: dict) -> dict:
    return menu_item_to_row(prepare_menu_item(data), exclude=GENERATED_MENU_ITEM_COLUMNS)


class DatabaseStorage(StorageProvider):
    """Durable store on the project's SQL database, one row per entity."""

    name = "database"

    # --- Menu items ---
    @_wrap_database_errors
    def get_all_menu_items(self) -> list[MenuItem]:
        return [menu_item_to_domain(row) for row in menu_models.MenuItem.objects.order_by("id")]

    @_wrap_database_errors
    def get_menu_items_by_category(self, category: str) -> list[MenuItem]:
        rows = menu_models.MenuItem.objects.filter(category=category).order_by("id")
        return [menu_item_to_domain(row) for row in rows]

    @_wrap_database_errors
    def get_menu_item(self, item_id: int) -> MenuItem:
        return menu_item_to_domain(self._get_row(menu_models.MenuItem, item_id, "Menu item not found"))

    @_wrap_database_errors
    def create_menu_item(self, data: dict) -> MenuItem:
        row = menu_models.MenuItem.objects.create(**_new_menu_item_row(data))
        return menu_item_to_domain(row)

    @_wrap_database_errors
    @transaction.atomic
    def update_menu_item_stock(self, item_id: int, stock_quantity: int, low_stock_threshold: int) -> MenuItem:
        validate_stock_values(stock_quantity, low_stock_threshold)
        row = self._get_row(menu_models.MenuItem, item_id, "Menu item not found", lock=True)
        row.stock_quantity = stock_quantity
        row.low_stock_threshold = low_stock_threshold
        row.save(update_fields=["stock_quantity", "low_stock_threshold", "updated_at"])
        logger.info(f"Stock for menu item {item_id} set to {stock_quantity} (threshold {low_stock_threshold})")
        return menu_item_to_domain(row)

    @_wrap_database_errors
    @transaction.atomic
    def update_menu_item_availability(self, item_id: int, is_available: int) -> MenuItem:
        validate_availability(is_available)
        row = self._get_row(menu_models.MenuItem, item_id, "Menu item not found", lock=True)
        row.is_available = is_available
        row.save(update_fields=["is_available", "updated_at"])
        logger.info(f"Availability for menu item {item_id} set to {is_available}")
        return menu_item_to_domain(row)

    # --- Orders ---
    @_wrap_database_errors
    def create_order(self, draft: OrderDraft) -> Order:
        validate_order_draft(draft)
        row = order_models.Order.objects.create(**draft_to_row(draft))
        logger.info(f"Order {row.id} created for {row.customer_name} ({row.total_amount})")
        return order_to_domain(row)

    @_wrap_database_errors
    def get_order(self, order_id: int) -> Order:
        return order_to_domain(self._get_row(order_models.Order, order_id, "Order not found"))

    @_wrap_database_errors
    def get_all_orders(self) -> list[Order]:
        return [order_to_domain(row) for row in order_models.Order.objects.order_by("-created_at", "-id")]

    @_wrap_database_errors
    @transaction.atomic
    def update_order_status(self, order_id: int, status: str) -> Order:
        validate_status(status)
        row = self._get_row(order_models.Order, order_id, "Order not found", lock=True)
        row.status = status
        row.save(update_fields=["status", "updated_at"])
        logger.info(f"Order {order_id} status set to {status}")
        return order_to_domain(row)

    # --- Seeding ---
    @_wrap_database_errors
    def seed_defaults(self, items: list[dict] | None = None) -> int:
        """Insert the default menu if the table is empty; returns the number of rows written."""
        if menu_models.MenuItem.objects.exists():
            logger.info("Menu items already exist, skipping seed")
            return 0
        rows = [menu_models.MenuItem(**_new_menu_item_row(data)) for data in items or DEFAULT_MENU_ITEMS]
        menu_models.MenuItem.objects.bulk_create(rows)
        logger.info(f"Seeded {len(rows)} menu items")
        return len(rows)

    @staticmethod
    def _get_row(model, pk, message, lock=False):
        # ids past the primary key range cannot exist and would overflow the driver
        if not 0 < pk <= MAX_ROW_ID:
            raise NotFoundError(message)
        queryset = model.objects.select_for_update() if lock else model.objects
        try:
            return queryset.get(pk=pk)
        except model.DoesNotExist as err:
            raise NotFoundError(message) from err
