import logging
import threading
from dataclasses import replace
from itertools import count

from django.utils import timezone

from apps.common.exceptions import NotFoundError
from apps.menus.defaults import DEFAULT_MENU_ITEMS
from apps.menus.domain import MenuItem
from apps.menus.inventory import validate_availability, validate_stock_values
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


class MemoryStorage(StorageProvider):
    """
    Process-local store. Data lives as long as the process and is reseeded
    with the default menu every time a new instance is built.
    """

    name = "memory"

    def __init__(self, seed: list[dict] | None = None):
        self._lock = threading.Lock()
        self._menu_items: dict[int, MenuItem] = {}
        self._orders: dict[int, Order] = {}
        self._menu_ids = count(1)
        self._order_ids = count(1)

        for data in DEFAULT_MENU_ITEMS if seed is None else seed:
            self.create_menu_item(data)

    # --- Menu items ---
    def get_all_menu_items(self) -> list[MenuItem]:
        return list(self._menu_items.values())

    def get_menu_items_by_category(self, category: str) -> list[MenuItem]:
        return [item for item in self._menu_items.values() if item.category == category]

    def get_menu_item(self, item_id: int) -> MenuItem:
        try:
            return self._menu_items[item_id]
        except KeyError as err:
            raise NotFoundError("Menu item not found") from err

    def create_menu_item(self, data: dict) -> MenuItem:
        values = prepare_menu_item(data)
        with self._lock:
            row = {**menu_item_to_row(values, exclude=GENERATED_MENU_ITEM_COLUMNS), "id": next(self._menu_ids)}
            item = menu_item_to_domain(row)
            self._menu_items[item.id] = item
        return item

    def update_menu_item_stock(self, item_id: int, stock_quantity: int, low_stock_threshold: int) -> MenuItem:
        validate_stock_values(stock_quantity, low_stock_threshold)
        with self._lock:
            item = replace(
                self.get_menu_item(item_id),
                stock_quantity=stock_quantity,
                low_stock_threshold=low_stock_threshold,
            )
            self._menu_items[item_id] = item
        logger.info(f"Stock for menu item {item_id} set to {stock_quantity} (threshold {low_stock_threshold})")
        return item

    def update_menu_item_availability(self, item_id: int, is_available: int) -> MenuItem:
        validate_availability(is_available)
        with self._lock:
            item = replace(self.get_menu_item(item_id), is_available=is_available)
            self._menu_items[item_id] = item
        logger.info(f"Availability for menu item {item_id} set to {is_available}")
        return item

    # --- Orders ---
    def create_order(self, draft: OrderDraft) -> Order:
        validate_order_draft(draft)
        with self._lock:
            row = {**draft_to_row(draft), "id": next(self._order_ids), "created_at": timezone.now()}
            order = order_to_domain(row)
            self._orders[order.id] = order
        logger.info(f"Order {order.id} created for {order.customer_name} ({order.total_amount})")
        return order

    def get_order(self, order_id: int) -> Order:
        try:
            return self._orders[order_id]
        except KeyError as err:
            raise NotFoundError("Order not found") from err

    def get_all_orders(self) -> list[Order]:
        return sorted(self._orders.values(), key=lambda order: (order.created_at, order.id), reverse=True)

    def update_order_status(self, order_id: int, status: str) -> Order:
        validate_status(status)
        with self._lock:
            order = replace(self.get_order(order_id), status=status)
            self._orders[order_id] = order
        logger.info(f"Order {order_id} status set to {status}")
        return order
