"""
Inventory classification and aggregation.

Everything here is a pure function of menu item data so it can be applied to
rows coming from any storage provider, including stale or externally written
ones (e.g. a negative stock count).
"""

from collections.abc import Iterable
from dataclasses import dataclass

from apps.common.constants import MAX_INTEGER, StockStatus
from apps.common.exceptions import ValidationError


@dataclass(frozen=True)
class InventoryStats:
    total: int
    available: int
    low_stock: int
    out_of_stock: int


def _has_stock(item) -> bool:
    return bool(item.is_available) and item.stock_quantity > 0


def classify_stock(is_available, stock_quantity: int, low_stock_threshold: int) -> StockStatus:
    if not is_available:
        return StockStatus.UNAVAILABLE
    if stock_quantity <= 0:
        return StockStatus.OUT_OF_STOCK
    if stock_quantity <= low_stock_threshold:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def get_stock_status(item) -> StockStatus:
    return classify_stock(item.is_available, item.stock_quantity, item.low_stock_threshold)


def calculate_inventory_stats(items: Iterable) -> InventoryStats:
    items = list(items)
    return InventoryStats(
        total=len(items),
        available=sum(1 for item in items if _has_stock(item)),
        low_stock=sum(1 for item in items if _has_stock(item) and item.stock_quantity <= item.low_stock_threshold),
        out_of_stock=sum(1 for item in items if not _has_stock(item)),
    )


def validate_stock_values(stock_quantity: int, low_stock_threshold: int) -> None:
    errors = {}
    if stock_quantity < 0:
        errors["stockQuantity"] = ["Stock cannot be negative."]
    elif stock_quantity > MAX_INTEGER:
        errors["stockQuantity"] = [f"Stock cannot exceed {MAX_INTEGER}."]
    if low_stock_threshold < 1:
        errors["lowStockThreshold"] = ["Threshold must be at least 1."]
    elif low_stock_threshold > MAX_INTEGER:
        errors["lowStockThreshold"] = [f"Threshold cannot exceed {MAX_INTEGER}."]
    if errors:
        raise ValidationError("Invalid stock values", errors)


def validate_availability(is_available: int) -> None:
    if isinstance(is_available, bool) or is_available not in (0, 1):
        raise ValidationError("isAvailable must be 0 or 1", {"isAvailable": ["isAvailable must be 0 or 1."]})
