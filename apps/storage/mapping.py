"""
Field correspondence between the camelCase API shape and the snake_case rows
stored by providers.

The tables below are the single source of truth: serializers expose the API
names listed here (plus derived read-only fields such as ``stockStatus``), and
both providers read and write exactly the columns listed here.
"""

from collections.abc import Mapping

from apps.common.constants import OrderStatus
from apps.menus.domain import MenuItem
from apps.orders.domain import Order, OrderDraft, OrderLine

MENU_ITEM_FIELDS = (
    ("id", "id"),
    ("name", "name"),
    ("description", "description"),
    ("price", "price"),
    ("category", "category"),
    ("image", "image"),
    ("spicyLevel", "spicy_level"),
    ("stockQuantity", "stock_quantity"),
    ("lowStockThreshold", "low_stock_threshold"),
    ("unit", "unit"),
    ("isAvailable", "is_available"),
    ("rating", "rating"),
    ("reviewCount", "review_count"),
)

ORDER_FIELDS = (
    ("id", "id"),
    ("customerName", "customer_name"),
    ("customerPhone", "customer_phone"),
    ("customerAddress", "customer_address"),
    ("serviceType", "service_type"),
    ("paymentMethod", "payment_method"),
    ("notes", "notes"),
    ("items", "items"),
    ("totalAmount", "total_amount"),
    ("status", "status"),
    ("createdAt", "created_at"),
)

MENU_ITEM_COLUMNS = tuple(column for _, column in MENU_ITEM_FIELDS)
ORDER_COLUMNS = tuple(column for _, column in ORDER_FIELDS)

# Filled in by the backend on insert.
GENERATED_MENU_ITEM_COLUMNS = ("id",)
GENERATED_ORDER_COLUMNS = ("id", "created_at")


def _pick(source, columns) -> dict:
    if isinstance(source, Mapping):
        return {column: source[column] for column in columns}
    return {column: getattr(source, column) for column in columns}


def menu_item_to_row(item, exclude=()) -> dict:
    """Row for a MenuItem, or for prepared values of a new one with ``exclude=GENERATED_MENU_ITEM_COLUMNS``."""
    return _pick(item, [column for column in MENU_ITEM_COLUMNS if column not in exclude])


def menu_item_to_domain(row) -> MenuItem:
    return MenuItem(**_pick(row, MENU_ITEM_COLUMNS))


def order_to_row(order, exclude=()) -> dict:
    row = _pick(order, [column for column in ORDER_COLUMNS if column not in exclude])
    if "items" in row:
        row["items"] = [line.as_dict() for line in row["items"]]
    return row


def draft_to_row(draft: OrderDraft) -> dict:
    """Insert row for a new order: the draft's columns plus the initial status."""
    row = order_to_row(draft, exclude=(*GENERATED_ORDER_COLUMNS, "status"))
    row["customer_address"] = row["customer_address"] or ""
    row["status"] = OrderStatus.PENDING.value
    return row


def order_line_to_domain(data: Mapping) -> OrderLine:
    return OrderLine(id=data["id"], name=data["name"], price=data["price"], quantity=data["quantity"])


def order_to_domain(row) -> Order:
    values = _pick(row, ORDER_COLUMNS)
    values["items"] = tuple(order_line_to_domain(line) for line in values["items"])
    return Order(**values)
